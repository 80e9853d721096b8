"""Node key derivation."""

import hashlib
import re

from dcgraph.core.constants import KEY_DELIMITER

_NODE_KEY_RE = re.compile(rf"^{KEY_DELIMITER}[0-9a-f]{{64}}{KEY_DELIMITER}$")


def derive_key(name: str) -> str:
    """
    Derive the stable payload key of a node from its name.

    Args:
        name: Human readable node name

    Returns:
        SHA-256 hex digest wrapped in key delimiters
    """
    digest = hashlib.sha256(name.encode("utf-8")).hexdigest()
    return f"{KEY_DELIMITER}{digest}{KEY_DELIMITER}"


def is_node_key(value: str) -> bool:
    """Check whether a payload string has the shape of a node key."""
    return bool(_NODE_KEY_RE.match(value))

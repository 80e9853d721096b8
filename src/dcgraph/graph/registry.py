"""Registry of dialogue graph nodes keyed by derived key."""

import logging
from collections.abc import Iterator, Mapping
from types import MappingProxyType

from dcgraph.core.errors import DuplicateNodeError
from dcgraph.graph.node import Node

logger = logging.getLogger(__name__)


class NodeRegistry:
    """
    Mapping from node key to Node.

    Keys are unique: adding a second node whose name derives an existing key
    raises DuplicateNodeError and leaves the first node in place.
    """

    def __init__(self) -> None:
        self._nodes: dict[str, Node] = {}

    def add(self, node: Node) -> Node:
        """
        Register a node.

        Args:
            node: Node to register

        Returns:
            The registered node

        Raises:
            DuplicateNodeError: If a node with the same key already exists
        """
        if node.key in self._nodes:
            logger.error(
                f"Duplicate node '{node.name}'",
                extra={"node_name": node.name, "node_key": node.key},
            )
            raise DuplicateNodeError(node.name, node.key)

        self._nodes[node.key] = node
        logger.debug(
            f"Registered node '{node.name}'",
            extra={"node_name": node.name, "node_key": node.key},
        )
        return node

    def lookup(self, key: str) -> Node | None:
        """Get the node registered under ``key``, if any."""
        return self._nodes.get(key)

    def snapshot(self) -> Mapping[str, Node]:
        """Read-only copy of the current key to node mapping."""
        return MappingProxyType(dict(self._nodes))

    def __contains__(self, key: object) -> bool:
        return key in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self._nodes.values())

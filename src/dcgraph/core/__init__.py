"""Core building blocks: constants, errors, keys and message types."""

from dcgraph.core.constants import GET_STARTED_PAYLOAD, ActionType
from dcgraph.core.errors import (
    AsyncContextError,
    ConfigError,
    DCGraphError,
    DuplicateNodeError,
    GraphBuildError,
    MissingOperationError,
    UnknownActionTypeError,
    UnresolvedReferenceError,
)
from dcgraph.core.keys import derive_key, is_node_key
from dcgraph.core.recording import RecordingContext, SendCall
from dcgraph.core.types import IncomingMessage

__all__ = [
    "GET_STARTED_PAYLOAD",
    "ActionType",
    "AsyncContextError",
    "DCGraphError",
    "GraphBuildError",
    "DuplicateNodeError",
    "UnknownActionTypeError",
    "UnresolvedReferenceError",
    "MissingOperationError",
    "ConfigError",
    "derive_key",
    "is_node_key",
    "IncomingMessage",
    "RecordingContext",
    "SendCall",
]

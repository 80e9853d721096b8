"""dcgraph - dialogue graphs for messaging bots.

Nodes hold ordered send actions and link to each other through payloads
carried by buttons and quick replies. Incoming postbacks and quick-reply
selections are routed to the matching node.

Quick start:
    from dcgraph import GraphHandlerBuilder

    builder = GraphHandlerBuilder()
    builder.create_node("welcome", [("text", "Hello!")])
    handler = builder.build()

    handler(context, {"postback": {"payload": derive_key("welcome")}})
"""

from dcgraph.__version__ import __version__
from dcgraph.config import ConfigLoader, DispatchSettings, GraphConfig
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
from dcgraph.core.keys import derive_key
from dcgraph.core.recording import RecordingContext
from dcgraph.core.types import IncomingMessage
from dcgraph.graph import Dispatcher, GraphHandlerBuilder, Node, NodeRef

__all__ = [
    "__version__",
    # Setup API
    "GraphHandlerBuilder",
    "Dispatcher",
    "Node",
    "NodeRef",
    "derive_key",
    "ActionType",
    "GET_STARTED_PAYLOAD",
    "IncomingMessage",
    "RecordingContext",
    # Configuration
    "ConfigLoader",
    "DispatchSettings",
    "GraphConfig",
    # Errors
    "AsyncContextError",
    "DCGraphError",
    "GraphBuildError",
    "DuplicateNodeError",
    "UnknownActionTypeError",
    "UnresolvedReferenceError",
    "MissingOperationError",
    "ConfigError",
]

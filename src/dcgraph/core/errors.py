"""Dialogue graph errors."""

from typing import Any


class DCGraphError(Exception):
    """Base class for all dcgraph errors."""

    pass


class GraphBuildError(DCGraphError):
    """Error raised during graph construction."""

    pass


class DuplicateNodeError(GraphBuildError):
    """Raised when two nodes derive the same key."""

    def __init__(self, name: str, key: str):
        self.name = name
        self.key = key
        super().__init__(f"Can not create node with duplicate name '{name}' (key {key})")


class UnknownActionTypeError(GraphBuildError):
    """Raised when an action carries a type tag outside ActionType."""

    def __init__(self, action_type: Any, node_name: str | None = None):
        self.action_type = action_type
        self.node_name = node_name
        where = f" in node '{node_name}'" if node_name else ""
        super().__init__(f"Unknown action type {action_type!r}{where}")


class UnresolvedReferenceError(GraphBuildError):
    """Raised when a node link can not be resolved to a registered node."""

    pass


class MissingOperationError(GraphBuildError):
    """Raised when the context type lacks send operations the graph uses."""

    def __init__(self, missing: list[str], context_type: Any = None):
        self.missing = missing
        self.context_type = context_type
        owner = getattr(context_type, "__name__", repr(context_type))
        super().__init__(f"Context {owner} is missing operations: {', '.join(missing)}")


class ConfigError(DCGraphError):
    """Raised when graph configuration is invalid."""


class AsyncContextError(DCGraphError):
    """Raised when synchronous dispatch meets an awaitable outside an event loop."""

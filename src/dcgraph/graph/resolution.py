"""Resolution of node links and compilation of node actions.

Runs once when the graph is built. Every ``transition_to`` reference in a
button or quick-reply descriptor is replaced by the key of the node it points
at, so dispatching never evaluates references. The caller's action data is
left untouched: resolved descriptors are new mappings.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from dcgraph.config.settings import DispatchSettings
from dcgraph.core.constants import (
    LINKED_ARGUMENT_POSITIONS,
    PAYLOAD_FIELD,
    SEND_OPERATIONS,
    SEND_PREFIX,
    TRANSITION_FIELD,
    ActionType,
)
from dcgraph.core.errors import (
    GraphBuildError,
    MissingOperationError,
    UnknownActionTypeError,
    UnresolvedReferenceError,
)
from dcgraph.graph.node import Action, Node, NodeRef
from dcgraph.graph.registry import NodeRegistry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CompiledAction:
    """Action ready to be sent: operation name plus resolved arguments."""

    action_type: ActionType | str
    operation: str
    args: tuple[Any, ...]


@dataclass(frozen=True)
class CompiledNode:
    """Node whose actions have every link resolved."""

    key: str
    name: str
    actions: tuple[CompiledAction, ...]


def normalize_action_type(
    tag: Any, *, strict: bool = True, node_name: str | None = None
) -> ActionType | str:
    """
    Map an action tag to its ActionType.

    Args:
        tag: ActionType member or its string value
        strict: Reject tags outside ActionType
        node_name: Owning node, for error messages

    Returns:
        The ActionType, or the raw string tag when not strict

    Raises:
        UnknownActionTypeError: If the tag is not a known type (strict) or not a string
    """
    if isinstance(tag, ActionType):
        return tag
    if not isinstance(tag, str) or not tag:
        raise UnknownActionTypeError(tag, node_name)
    try:
        return ActionType(tag)
    except ValueError:
        if strict:
            raise UnknownActionTypeError(tag, node_name) from None
        return tag


def operation_for(action_type: ActionType | str) -> str:
    """Name of the context operation that sends ``action_type``."""
    if isinstance(action_type, ActionType):
        return SEND_OPERATIONS[action_type]
    return f"{SEND_PREFIX}{action_type}"


def resolve_reference(target: Any, registry: NodeRegistry, *, node_name: str) -> str:
    """
    Resolve a link target to the key of a registered node.

    Args:
        target: NodeRef, Node, or zero-argument callable returning one of them
        registry: Registry the target must belong to
        node_name: Node owning the link, for error messages

    Returns:
        The target node key

    Raises:
        UnresolvedReferenceError: If the target is not a node or is not registered
    """
    resolved = target
    if callable(resolved) and not isinstance(resolved, (Node, NodeRef)):
        resolved = resolved()

    if not isinstance(resolved, (Node, NodeRef)):
        raise UnresolvedReferenceError(
            f"Node '{node_name}' links to {resolved!r}, which is not a node"
        )

    if resolved.key not in registry:
        raise UnresolvedReferenceError(
            f"Node '{node_name}' links to unregistered node '{resolved.name}'"
        )
    return resolved.key


def resolve_descriptors(
    descriptors: Any, registry: NodeRegistry, *, node_name: str
) -> list[Any]:
    """Return a copy of ``descriptors`` with every ``transition_to`` turned into a payload."""
    if not isinstance(descriptors, (list, tuple)):
        raise UnresolvedReferenceError(
            f"Node '{node_name}' has a linked action without a descriptor list"
        )

    resolved: list[Any] = []
    for descriptor in descriptors:
        if not isinstance(descriptor, Mapping) or TRANSITION_FIELD not in descriptor:
            resolved.append(descriptor)
            continue

        new = {k: v for k, v in descriptor.items() if k != TRANSITION_FIELD}
        target = descriptor[TRANSITION_FIELD]
        if target is not None:
            new[PAYLOAD_FIELD] = resolve_reference(target, registry, node_name=node_name)
        resolved.append(new)
    return resolved


def compile_action(
    action: Action, registry: NodeRegistry, settings: DispatchSettings, *, node_name: str
) -> CompiledAction:
    """Compile one ``(action_type, *args)`` tuple."""
    if not action:
        raise GraphBuildError(f"Node '{node_name}' has an empty action")

    tag, *args = action
    action_type = normalize_action_type(
        tag, strict=settings.strict_action_types, node_name=node_name
    )

    position = (
        LINKED_ARGUMENT_POSITIONS.get(action_type)
        if isinstance(action_type, ActionType)
        else None
    )
    if position is not None:
        if len(args) <= position:
            raise UnresolvedReferenceError(
                f"Node '{node_name}': {action_type.value} action needs descriptors "
                f"at argument {position}"
            )
        args[position] = resolve_descriptors(args[position], registry, node_name=node_name)

    return CompiledAction(
        action_type=action_type,
        operation=operation_for(action_type),
        args=tuple(args),
    )


def compile_graph(
    registry: NodeRegistry, settings: DispatchSettings
) -> Mapping[str, CompiledNode]:
    """
    Compile every registered node.

    Args:
        registry: Registry holding the finished graph
        settings: Dispatch settings (strictness of action types)

    Returns:
        Read-only mapping from node key to CompiledNode

    Raises:
        GraphBuildError: If an action or link is invalid
    """
    compiled: dict[str, CompiledNode] = {}
    for node in registry:
        actions = tuple(
            compile_action(action, registry, settings, node_name=node.name)
            for action in node.actions
        )
        compiled[node.key] = CompiledNode(key=node.key, name=node.name, actions=actions)

    logger.debug(f"Compiled {len(compiled)} node(s)", extra={"node_count": len(compiled)})
    return MappingProxyType(compiled)


def verify_operations(nodes: Mapping[str, CompiledNode], context_type: Any) -> None:
    """
    Check that ``context_type`` provides every operation the graph sends through.

    Args:
        nodes: Compiled nodes
        context_type: Context class or instance

    Raises:
        MissingOperationError: If any operation is missing or not callable
    """
    operations = sorted({a.operation for node in nodes.values() for a in node.actions})
    missing = [op for op in operations if not callable(getattr(context_type, op, None))]
    if missing:
        logger.error(
            f"Context is missing operations: {missing}",
            extra={"missing_operations": missing},
        )
        raise MissingOperationError(missing, context_type)

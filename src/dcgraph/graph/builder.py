"""Setup API for dialogue graphs."""

import logging
from collections.abc import Mapping
from typing import Any

from dcgraph.config.models import GraphConfig
from dcgraph.config.settings import DispatchSettings
from dcgraph.core.constants import LINKED_ARGUMENT_POSITIONS, TRANSITION_FIELD, ActionType
from dcgraph.core.errors import GraphBuildError
from dcgraph.core.interfaces import Handler
from dcgraph.core.keys import derive_key
from dcgraph.graph.dispatcher import Dispatcher
from dcgraph.graph.node import Action, Node, NodeRef
from dcgraph.graph.registry import NodeRegistry
from dcgraph.graph.resolution import compile_graph, normalize_action_type, verify_operations

logger = logging.getLogger(__name__)


class GraphHandlerBuilder:
    """Builds a dialogue graph and the message handler that runs it.

    Usage:
        builder = GraphHandlerBuilder()
        menu = builder.ref("menu")

        welcome = builder.create_node(
            "welcome",
            [
                ("text", "Hi!"),
                ("button_template", "What next?", None, [
                    {"type": "postback", "title": "Menu", "transition_to": menu},
                ]),
            ],
        )
        builder.create_node("menu", [
            ("quick_replies", "Pick", None, None, [
                {"title": "Back", "transition_to": lambda: welcome},
            ]),
        ])

        handler = builder.on_unhandled(fallback).build()
        handler(context, message)

    Links may point at nodes created later, including cycles. They are
    resolved once in ``build``.
    """

    def __init__(self, settings: DispatchSettings | None = None) -> None:
        self.settings = settings or DispatchSettings()
        self._registry = NodeRegistry()
        self._get_started_handler: Handler | None = None
        self._unhandled_handler: Handler | None = None

    def on_get_started(self, handler: Handler) -> "GraphHandlerBuilder":
        """Set the handler for the get-started postback. Replaces any previous one."""
        self._get_started_handler = handler
        return self

    def on_unhandled(self, handler: Handler) -> "GraphHandlerBuilder":
        """Set the fallback handler. Replaces any previous one."""
        self._unhandled_handler = handler
        return self

    def create_node(self, name: str, actions: list[Action] | tuple[Action, ...]) -> Node:
        """
        Create and register a node.

        Args:
            name: Node name; its key is derived from it
            actions: Ordered ``(action_type, *args)`` tuples. Descriptors in
                button templates and quick replies may carry ``transition_to``
                references to nodes that do not exist yet.

        Returns:
            The new node

        Raises:
            DuplicateNodeError: If a node with this name already exists
            UnknownActionTypeError: If an action type is not known (strict settings)
            GraphBuildError: If an action is empty or not a tuple
        """
        node = Node.create(name, actions)
        for action in node.actions:
            if not action:
                raise GraphBuildError(f"Node '{name}' has an empty action")
            normalize_action_type(
                action[0], strict=self.settings.strict_action_types, node_name=name
            )
        return self._registry.add(node)

    def ref(self, name: str) -> NodeRef:
        """Reference a node by name; it may be created later."""
        return NodeRef(name)

    @property
    def nodes(self) -> Mapping[str, Node]:
        """Read-only view of the registered nodes by key."""
        return self._registry.snapshot()

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and derive_key(name) in self._registry

    def build(self, context_type: Any = None) -> Dispatcher:
        """
        Resolve every link and return the message handler.

        Args:
            context_type: Optional context class or instance. When given, it
                must provide every send operation the graph uses.

        Returns:
            Dispatcher over a snapshot of the current graph

        Raises:
            UnresolvedReferenceError: If a link points at no registered node
            MissingOperationError: If context_type lacks a send operation
        """
        nodes = compile_graph(self._registry, self.settings)
        if context_type is not None:
            verify_operations(nodes, context_type)

        logger.info(
            f"Built dialogue graph with {len(nodes)} node(s)",
            extra={"node_count": len(nodes)},
        )
        return Dispatcher(
            nodes,
            get_started_handler=self._get_started_handler,
            unhandled_handler=self._unhandled_handler,
            settings=self.settings,
        )

    @classmethod
    def from_config(cls, config: GraphConfig) -> "GraphHandlerBuilder":
        """
        Create a builder holding every node of a graph configuration.

        String ``transition_to`` values in button and quick-reply descriptors
        name the target node.
        """
        builder = cls(settings=config.settings)
        for node_config in config.nodes:
            actions = [
                (action.type, *_link_by_name(action.type, action.args, builder))
                for action in node_config.actions
            ]
            builder.create_node(node_config.name, actions)
        return builder


def _link_by_name(action_type: str, args: list[Any], builder: GraphHandlerBuilder) -> list[Any]:
    try:
        position = LINKED_ARGUMENT_POSITIONS.get(ActionType(action_type))
    except ValueError:
        position = None
    if position is None or len(args) <= position or not isinstance(args[position], list):
        return list(args)

    linked = list(args)
    linked[position] = [
        {**d, TRANSITION_FIELD: builder.ref(d[TRANSITION_FIELD])}
        if isinstance(d, dict) and isinstance(d.get(TRANSITION_FIELD), str)
        else d
        for d in args[position]
    ]
    return linked

"""Dialogue graph nodes and references between them."""

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any, TypeAlias

from dcgraph.core.errors import GraphBuildError
from dcgraph.core.keys import derive_key

# (action_type, *args)
Action: TypeAlias = tuple[Any, ...]


@dataclass(frozen=True)
class Node:
    """Named point in the dialogue graph.

    Nodes are created through ``GraphHandlerBuilder.create_node`` and never
    change afterwards. Other nodes link to a node through its ``key``.
    """

    key: str
    name: str
    actions: tuple[Action, ...] = field(repr=False)

    @classmethod
    def create(cls, name: str, actions: Sequence[Action]) -> "Node":
        """
        Create a node, freezing its actions into tuples.

        Raises:
            GraphBuildError: If an action is not a list or tuple
        """
        for action in actions:
            if isinstance(action, (str, bytes)) or not isinstance(action, Sequence):
                raise GraphBuildError(
                    f"Node '{name}' has an action that is not a (type, *args) tuple: {action!r}"
                )
        return cls(key=derive_key(name), name=name, actions=tuple(tuple(a) for a in actions))


@dataclass(frozen=True)
class NodeRef:
    """Reference to a node by name, usable before the node exists.

    The key is derived from the name up front; the builder checks at build
    time that a node with that name was registered.
    """

    name: str

    @property
    def key(self) -> str:
        return derive_key(self.name)

"""Dialogue graph: nodes, registry, link resolution and dispatch."""

from dcgraph.graph.builder import GraphHandlerBuilder
from dcgraph.graph.dispatcher import Dispatcher, Route
from dcgraph.graph.node import Action, Node, NodeRef
from dcgraph.graph.registry import NodeRegistry
from dcgraph.graph.resolution import CompiledAction, CompiledNode

__all__ = [
    "GraphHandlerBuilder",
    "Dispatcher",
    "Route",
    "Action",
    "Node",
    "NodeRef",
    "NodeRegistry",
    "CompiledAction",
    "CompiledNode",
]

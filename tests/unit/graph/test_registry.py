"""Tests for NodeRegistry and Node."""

import pytest

from dcgraph.core.errors import DuplicateNodeError, GraphBuildError
from dcgraph.core.keys import derive_key
from dcgraph.graph.node import Node, NodeRef
from dcgraph.graph.registry import NodeRegistry


class TestNode:
    def test_create_derives_key_and_freezes_actions(self):
        node = Node.create("welcome", [["text", "hi"], ("image", "url")])

        assert node.key == derive_key("welcome")
        assert node.name == "welcome"
        assert node.actions == (("text", "hi"), ("image", "url"))

    def test_node_is_immutable(self):
        node = Node.create("welcome", [])

        with pytest.raises(AttributeError):
            node.name = "other"  # type: ignore[misc]

    def test_ref_key_matches_node_key(self):
        assert NodeRef("menu").key == Node.create("menu", []).key


class TestNodeRegistry:
    def test_add_and_lookup(self):
        registry = NodeRegistry()
        node = Node.create("welcome", [("text", "hi")])

        assert registry.add(node) is node
        assert registry.lookup(node.key) is node
        assert node.key in registry
        assert len(registry) == 1

    def test_lookup_unknown_key(self):
        assert NodeRegistry().lookup(derive_key("missing")) is None

    def test_duplicate_key_keeps_first_node(self):
        registry = NodeRegistry()
        first = registry.add(Node.create("A", [("text", "first")]))

        with pytest.raises(DuplicateNodeError) as exc_info:
            registry.add(Node.create("A", [("text", "second")]))

        assert isinstance(exc_info.value, GraphBuildError)
        assert exc_info.value.name == "A"
        assert exc_info.value.key == first.key
        assert registry.lookup(first.key) is first
        assert len(registry) == 1

    def test_iterates_in_insertion_order(self):
        registry = NodeRegistry()
        for name in ("c", "a", "b"):
            registry.add(Node.create(name, []))

        assert [node.name for node in registry] == ["c", "a", "b"]

    def test_snapshot_is_read_only_and_detached(self):
        registry = NodeRegistry()
        registry.add(Node.create("a", []))

        snapshot = registry.snapshot()
        registry.add(Node.create("b", []))

        assert list(snapshot) == [derive_key("a")]
        with pytest.raises(TypeError):
            snapshot["x"] = None  # type: ignore[index]

"""End to end dialogue graph tests: cycles, forward links and YAML graphs."""

from pathlib import Path

import pytest

from conftest import postback, quick_reply
from dcgraph import (
    GET_STARTED_PAYLOAD,
    ConfigLoader,
    GraphHandlerBuilder,
    RecordingContext,
    derive_key,
)

EXAMPLE_GRAPH = Path(__file__).resolve().parents[2] / "examples" / "onboarding" / "graph.yaml"

pytestmark = pytest.mark.integration


def buttons_of(call):
    return call.args[2]


def quick_replies_of(call):
    return call.args[3]


def test_forward_link_resolves_to_later_node():
    """A links to B with a closure before B is created"""
    builder = GraphHandlerBuilder()
    a = builder.create_node(
        "A", [("button_template", "to B", None, [{"title": "B", "transition_to": lambda: b}])]
    )
    b = builder.create_node("B", [("text", "in B")])
    context = RecordingContext()

    builder.build()(context, postback(a.key))

    assert buttons_of(context.calls[0]) == [{"title": "B", "payload": b.key}]


def test_mutual_cycle():
    """A -> B -> A, declared in either order"""
    builder = GraphHandlerBuilder()
    b_ref = builder.ref("B")
    a = builder.create_node(
        "A", [("quick_replies", "a", None, None, [{"title": "B", "transition_to": b_ref}])]
    )
    b = builder.create_node(
        "B", [("button_template", "b", None, [{"title": "A", "transition_to": lambda: a}])]
    )
    dispatcher = builder.build()
    context = RecordingContext()

    dispatcher(context, postback(a.key))
    next_payload = quick_replies_of(context.calls[0])[0]["payload"]
    dispatcher(context, quick_reply(next_payload))
    back_payload = buttons_of(context.calls[1])[0]["payload"]

    assert next_payload == b.key
    assert back_payload == a.key
    assert context.operations == ["send_quick_replies", "send_button_template"]


def test_no_reference_reaches_send_operations():
    builder = GraphHandlerBuilder()
    target = builder.create_node("target", [("text", "t")])
    original_button = {"type": "postback", "title": "T", "transition_to": lambda: target}
    node = builder.create_node("source", [("button_template", "s", None, [original_button])])
    dispatcher = builder.build()
    context = RecordingContext()

    for _ in range(3):
        dispatcher(context, postback(node.key))

    for call in context.calls:
        assert all("transition_to" not in button for button in buttons_of(call))
        assert buttons_of(call)[0]["payload"] == target.key
    assert "transition_to" in original_button


def test_conversation_walkthrough():
    builder = GraphHandlerBuilder()
    welcomed = []
    unhandled = []
    builder.create_node("welcome", [("text", "Welcome")])
    dispatcher = (
        builder.on_get_started(lambda context, message: welcomed.append(message))
        .on_unhandled(lambda context, message: unhandled.append(message))
        .build()
    )
    context = RecordingContext()

    dispatcher(context, postback(GET_STARTED_PAYLOAD))
    dispatcher(context, postback(derive_key("welcome")))
    dispatcher(context, {"message": {"text": "free text"}})

    assert len(welcomed) == 1
    assert len(unhandled) == 2
    assert context.operations == ["send_text"]


def test_example_graph_file():
    config = ConfigLoader.load(EXAMPLE_GRAPH)
    dispatcher = GraphHandlerBuilder.from_config(config).build(context_type=RecordingContext)
    context = RecordingContext()

    dispatcher(context, postback(derive_key("welcome")))
    buttons = buttons_of(context.calls[1])
    dispatcher(context, postback(buttons[0]["payload"]))
    replies = quick_replies_of(context.calls[2])

    assert buttons[0]["payload"] == derive_key("plans")
    assert buttons[1] == {"type": "web_url", "title": "Website", "url": "https://example.com"}
    assert [reply["payload"] for reply in replies] == [derive_key("basic"), derive_key("welcome")]

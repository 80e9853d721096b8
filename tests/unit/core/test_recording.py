"""Tests for RecordingContext."""

import pytest

from dcgraph.core.constants import SEND_OPERATIONS
from dcgraph.core.recording import RecordingContext, SendCall


def test_records_calls_in_order():
    context = RecordingContext()

    context.send_text("hi")
    context.send_image("https://example.com/a.png")

    assert context.calls == [
        SendCall("send_text", ("hi",)),
        SendCall("send_image", ("https://example.com/a.png",)),
    ]
    assert context.operations == ["send_text", "send_image"]


def test_declares_every_known_operation():
    """Known operations exist on the class itself"""
    for operation in SEND_OPERATIONS.values():
        assert callable(getattr(RecordingContext, operation, None))


def test_custom_send_operations_are_recorded():
    context = RecordingContext()

    context.send_typing_on()

    assert context.operations == ["send_typing_on"]


def test_other_attributes_are_missing():
    context = RecordingContext()

    with pytest.raises(AttributeError):
        context.reply_text("hi")


def test_clear():
    context = RecordingContext()
    context.send_text("hi")

    context.clear()

    assert context.calls == []

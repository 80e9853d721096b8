"""Shared fixtures for dcgraph tests."""

from typing import Any

import pytest

from dcgraph.core.recording import RecordingContext
from dcgraph.graph.builder import GraphHandlerBuilder


def postback(payload: str | None) -> dict[str, Any]:
    """Incoming message carrying a postback."""
    return {"postback": {"payload": payload}}


def quick_reply(payload: str | None) -> dict[str, Any]:
    """Incoming message carrying a quick reply selection."""
    return {"message": {"text": "tap", "quick_reply": {"payload": payload}}}


class HookRecorder:
    """Records lifecycle handler calls."""

    def __init__(self) -> None:
        self.calls: list[tuple[Any, Any]] = []

    def __call__(self, context: Any, message: Any) -> None:
        self.calls.append((context, message))


@pytest.fixture
def builder() -> GraphHandlerBuilder:
    return GraphHandlerBuilder()


@pytest.fixture
def context() -> RecordingContext:
    return RecordingContext()


@pytest.fixture
def get_started_hook() -> HookRecorder:
    return HookRecorder()


@pytest.fixture
def unhandled_hook() -> HookRecorder:
    return HookRecorder()

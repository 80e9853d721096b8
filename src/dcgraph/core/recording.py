"""Recording context for tests and dry runs."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from dcgraph.core.constants import SEND_OPERATIONS, SEND_PREFIX


@dataclass(frozen=True)
class SendCall:
    """A send operation invoked on a RecordingContext."""

    operation: str
    args: tuple[Any, ...]


def _recorder(operation: str) -> Callable[..., None]:
    def send(self: "RecordingContext", *args: Any) -> None:
        self.calls.append(SendCall(operation=operation, args=args))

    send.__name__ = operation
    return send


class RecordingContext:
    """Context that records every ``send_*`` call instead of delivering it.

    Declares one operation per known action type, so it passes capability
    checks. Other ``send_*`` names are recorded too, which covers custom
    action types when strict action types are disabled.
    """

    def __init__(self) -> None:
        self.calls: list[SendCall] = []

    def __getattr__(self, name: str) -> Callable[..., None]:
        if not name.startswith(SEND_PREFIX):
            raise AttributeError(name)
        return _recorder(name).__get__(self, type(self))

    @property
    def operations(self) -> list[str]:
        """Names of the recorded operations, in call order."""
        return [call.operation for call in self.calls]

    def clear(self) -> None:
        """Clear the recorded calls."""
        self.calls.clear()


for _operation in SEND_OPERATIONS.values():
    setattr(RecordingContext, _operation, _recorder(_operation))
del _operation

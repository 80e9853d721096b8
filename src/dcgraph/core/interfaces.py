"""Core interfaces (Protocols) for dcgraph collaborators."""

from collections.abc import Awaitable, Callable
from typing import Any, Protocol, TypeAlias

# Handlers receive the context and the original incoming message
Handler: TypeAlias = Callable[[Any, Any], None | Awaitable[None]]


class SendContext(Protocol):
    """Interface of the messaging context a dispatcher sends through.

    A concrete context exposes one ``send_<type>`` operation per action type
    the graph uses, e.g. ``send_text(text)`` or
    ``send_button_template(text, options, buttons)``. Return values are
    ignored by the synchronous dispatcher and awaited by ``adispatch``.
    """

    def send_text(self, *args: Any) -> Any:
        """Send a plain text message."""
        ...

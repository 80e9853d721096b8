"""Normalized incoming message models.

Raw platform webhooks are parsed upstream; the dispatcher only needs the
postback and quick-reply payloads, so every other field is ignored.
"""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Postback(BaseModel):
    """Postback event (button tap)."""

    model_config = ConfigDict(extra="allow", from_attributes=True)

    payload: str | None = Field(default=None, description="Payload attached to the button")


class QuickReply(BaseModel):
    """Quick reply selection attached to a text message."""

    model_config = ConfigDict(extra="allow", from_attributes=True)

    payload: str | None = Field(default=None, description="Payload of the chosen quick reply")


class MessageBody(BaseModel):
    """Message part of an incoming event."""

    model_config = ConfigDict(extra="allow", from_attributes=True)

    text: str | None = None
    quick_reply: QuickReply | None = None


class IncomingMessage(BaseModel):
    """Incoming event as seen by the dispatcher."""

    model_config = ConfigDict(extra="allow", from_attributes=True)

    message: MessageBody | None = None
    postback: Postback | None = None

    @classmethod
    def coerce(cls, raw: Any) -> "IncomingMessage":
        """Build an IncomingMessage from a model, a mapping or an attribute object."""
        if isinstance(raw, cls):
            return raw
        if raw is None:
            return cls()
        if isinstance(raw, Mapping):
            return cls.model_validate(dict(raw))
        return cls.model_validate(raw, from_attributes=True)

"""Dispatch settings.

Runtime switches for how a built graph routes incoming messages.
"""

from pydantic import BaseModel, ConfigDict, Field

from dcgraph.core.constants import GET_STARTED_PAYLOAD


class DispatchSettings(BaseModel):
    """Dispatcher configuration."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    get_started_payload: str = Field(
        default=GET_STARTED_PAYLOAD,
        description="Postback payload that triggers the get-started handler",
    )
    unhandled_after_match: bool = Field(
        default=True,
        description=(
            "Call the unhandled handler after a matched node's actions ran. "
            "When disabled it only fires if no node matched."
        ),
    )
    strict_action_types: bool = Field(
        default=True,
        description=(
            "Reject action types outside ActionType when nodes are created. "
            "When disabled, unknown types are sent through send_<type>."
        ),
    )

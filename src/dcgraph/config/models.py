"""Configuration models for YAML dialogue graphs."""

from typing import Any

from pydantic import BaseModel, Field, field_validator

from dcgraph.config.settings import DispatchSettings

# DSL Version constants
SUPPORTED_VERSIONS = frozenset({"1.0"})
CURRENT_VERSION = "1.0"


class ActionConfig(BaseModel):
    """One outbound action of a node."""

    type: str = Field(description="Action type, e.g. text or button_template")
    args: list[Any] = Field(default_factory=list, description="Positional arguments")


class NodeConfig(BaseModel):
    """A named node and its ordered actions."""

    name: str = Field(min_length=1, description="Node name, used to derive its key")
    actions: list[ActionConfig] = Field(default_factory=list)


class GraphConfig(BaseModel):
    """Root of a dialogue graph configuration file."""

    version: str = Field(default=CURRENT_VERSION, description="DSL version")
    settings: DispatchSettings = Field(default_factory=DispatchSettings)
    nodes: list[NodeConfig] = Field(default_factory=list)

    @field_validator("version", mode="before")
    @classmethod
    def validate_version(cls, value: Any) -> str:
        version = str(value)
        if version not in SUPPORTED_VERSIONS:
            raise ValueError(
                f"Unsupported version '{version}'. Supported: {sorted(SUPPORTED_VERSIONS)}"
            )
        return version

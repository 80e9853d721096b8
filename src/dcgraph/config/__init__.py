"""Configuration module for dcgraph."""

from dcgraph.config.loader import ConfigLoader
from dcgraph.config.models import ActionConfig, GraphConfig, NodeConfig
from dcgraph.config.settings import DispatchSettings

__all__ = ["ConfigLoader", "DispatchSettings", "GraphConfig", "NodeConfig", "ActionConfig"]

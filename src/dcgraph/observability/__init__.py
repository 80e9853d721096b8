"""Observability module for dcgraph."""

from dcgraph.observability.logging import setup_logging

__all__ = ["setup_logging"]

"""Command line interface for dcgraph."""

"""Version information for dcgraph.

The version is read from the installed package metadata.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("dcgraph")
except PackageNotFoundError:
    # Package not installed, fallback for development
    __version__ = "0.0.0-dev"

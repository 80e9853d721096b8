"""Config loader for YAML dialogue graph files."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from dcgraph.config.models import GraphConfig
from dcgraph.core.errors import ConfigError

DEFAULT_FILENAMES = ("graph.yaml", "graph.yml")


class ConfigLoader:
    """Load GraphConfig from YAML files."""

    @staticmethod
    def load(path: Path | str) -> GraphConfig:
        """Load a graph configuration.

        Args:
            path: Path to a graph YAML file or to a directory of them

        Returns:
            Parsed GraphConfig instance

        Raises:
            FileNotFoundError: If the file or directory has no config
            yaml.YAMLError: If a file is not valid YAML
            ConfigError: If the content does not describe a valid graph
        """
        config_path = Path(path)

        if config_path.is_dir():
            data = ConfigLoader._load_directory(config_path)
        else:
            if not config_path.exists():
                raise FileNotFoundError(f"Config file not found: {config_path}")
            data = ConfigLoader._read(config_path)

        try:
            return GraphConfig.model_validate(data)
        except ValidationError as e:
            raise ConfigError(f"Invalid graph config in {config_path}: {e}") from e

    @staticmethod
    def _read(path: Path) -> dict[str, Any]:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ConfigError(f"Top level of {path} must be a mapping")
        return data

    @staticmethod
    def _load_directory(directory: Path) -> dict[str, Any]:
        for filename in DEFAULT_FILENAMES:
            if (directory / filename).exists():
                return ConfigLoader._read(directory / filename)

        # Merge all .yaml files in directory
        files = sorted(directory.glob("*.yaml"))
        if not files:
            raise FileNotFoundError(f"No config files found in {directory}")

        data: dict[str, Any] = {"nodes": [], "settings": {}}
        for fpath in files:
            chunk = ConfigLoader._read(fpath)

            nodes = chunk.get("nodes") or []
            if not isinstance(nodes, list):
                raise ConfigError(f"'nodes' in {fpath} must be a list")
            data["nodes"].extend(nodes)

            settings = chunk.get("settings") or {}
            if not isinstance(settings, dict):
                raise ConfigError(f"'settings' in {fpath} must be a mapping")
            data["settings"].update(settings)

            for k, v in chunk.items():
                if k not in ("nodes", "settings"):
                    data[k] = v

        return data

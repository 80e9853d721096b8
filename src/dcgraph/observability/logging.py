"""Structured logging configuration for dcgraph."""

import logging
import logging.config
from typing import Any


def setup_logging(level: str = "INFO", json_format: bool = False) -> None:
    """
    Configure logging for dcgraph.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        json_format: Emit one JSON object per record, including ``extra`` fields
    """
    config: dict[str, Any] = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "structured": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
            "json": {
                "()": "pythonjsonlogger.json.JsonFormatter",
                "format": "%(asctime)s %(name)s %(levelname)s %(message)s",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "json" if json_format else "structured",
                "level": level,
            },
        },
        "loggers": {
            "dcgraph": {
                "handlers": ["console"],
                "level": level,
                "propagate": False,
            },
        },
        "root": {
            "handlers": ["console"],
            "level": "WARNING",
        },
    }

    logging.config.dictConfig(config)


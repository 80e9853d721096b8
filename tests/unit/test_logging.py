"""Tests for logging setup."""

import logging

from pythonjsonlogger.json import JsonFormatter

from dcgraph.observability.logging import setup_logging


def test_setup_logging_configures_dcgraph_logger():
    setup_logging("DEBUG")

    logger = logging.getLogger("dcgraph")
    assert logger.level == logging.DEBUG
    assert logger.propagate is False
    assert len(logger.handlers) == 1


def test_setup_logging_json_format():
    setup_logging("INFO", json_format=True)

    handler = logging.getLogger("dcgraph").handlers[0]
    assert isinstance(handler.formatter, JsonFormatter)

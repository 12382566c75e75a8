"""Tests for console logging setup."""

import logging

import pytest
from rich.logging import RichHandler

from calcbench.logging import PROJECT_PREFIX, setup_logging


def test_setup_logging_sets_level():
    handler = setup_logging("info")
    logger = logging.getLogger(PROJECT_PREFIX)
    assert isinstance(handler, RichHandler)
    assert handler.level == logging.INFO
    assert logger.level == logging.INFO


def test_setup_logging_replaces_previous_handler():
    setup_logging("warning")
    setup_logging("warning")
    logger = logging.getLogger(PROJECT_PREFIX)
    assert sum(isinstance(h, RichHandler) for h in logger.handlers) == 1


def test_debug_mode_forces_debug():
    handler = setup_logging("error", debug_mode=True)
    assert handler.level == logging.DEBUG


def test_unknown_level_rejected():
    with pytest.raises(ValueError, match="LOUD"):
        setup_logging("loud")

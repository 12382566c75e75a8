"""Shared fixtures for the calcbench test suite."""

from __future__ import annotations

import logging

import pytest

from calcbench.calculator import Calculator
from calcbench.logging import PROJECT_PREFIX
from calcbench.suite import Suite


@pytest.fixture(autouse=True)
def _restore_project_logger():
    """Undo handlers/levels installed by CLI invocations."""
    logger = logging.getLogger(PROJECT_PREFIX)
    handlers, level, propagate = list(logger.handlers), logger.level, logger.propagate
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate


@pytest.fixture
def calculator() -> Calculator:
    return Calculator()


@pytest.fixture
def suite() -> Suite:
    return Suite("sample", "suite built inside a test")


@pytest.fixture
def results_dir(tmp_path, monkeypatch):
    """Point CALCBENCH_RESULTS_DIR at a temp directory."""
    path = tmp_path / "results"
    monkeypatch.setenv("CALCBENCH_RESULTS_DIR", str(path))
    return path

"""Tests for suite discovery."""

from calcbench.models import SkippedCase
from calcbench.suites import list_suites, load_suite


def test_list_includes_calculator():
    names = [s.name for s in list_suites()]
    assert "calculator" in names


def test_load_calculator():
    info = load_suite("calculator")
    assert info is not None
    assert info.description
    assert info.tests_dir is not None
    assert (info.tests_dir / "test_calculator_lifecycle.py").exists()
    assert info.suite.case_names() == [
        "test_sum",
        "test_division",
        "test_division_by_zero",
        "test_equal",
        "test_subtraction",
    ]
    skipped = [c.name for c in info.suite.cases if isinstance(c, SkippedCase)]
    assert skipped == ["test_equal", "test_subtraction"]


def test_each_load_builds_a_new_suite():
    assert load_suite("calculator").suite is not load_suite("calculator").suite


def test_unknown_suite_returns_none():
    assert load_suite("does_not_exist") is None
    assert load_suite("../calculator") is None

"""Calculator suite — the lifecycle walkthrough.

A shared Calculator is created once, each executed case is wrapped by
before/after hooks, one case expects DivisionError, two cases are skipped.
Expected result: 3 passed, 0 failed, 2 skipped.
"""

from __future__ import annotations

import logging

from calcbench.calculator import Calculator, DivisionError
from calcbench.suite import Suite

NAME = "calculator"
DESCRIPTION = "Calculator lifecycle: once-before, per-test hooks, expected errors, skips"

logger = logging.getLogger(__name__)


def build_suite() -> Suite:
    """Build a fresh calculator suite."""
    suite = Suite(NAME, DESCRIPTION)

    @suite.once_before
    def init_calculator(fixture):
        fixture.calculator = Calculator()

    @suite.before_each
    def before_each_test(fixture):
        logger.info("This is executed before each test")

    @suite.after_each
    def after_each_test(fixture):
        logger.info("This is executed after each test")

    @suite.case()
    def test_sum(fixture):
        assert fixture.calculator.sum(3, 4) == 7

    # Errors propagate to the runner; nothing here swallows them.
    @suite.case()
    def test_division(fixture):
        assert fixture.calculator.divide(10, 2) == 5

    @suite.case(expected=DivisionError)
    def test_division_by_zero(fixture):
        fixture.calculator.divide(10, 0)

    @suite.case(skip="disabled: asserts the opposite of equal_integers(20, 20)")
    def test_equal(fixture):
        assert not fixture.calculator.equal_integers(20, 20)

    @suite.case(skip="disabled: 10 - 3 is not 9")
    def test_subtraction(fixture):
        assert 10 - 3 == 9

    return suite

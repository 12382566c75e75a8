"""Tests for the Calculator and DivisionError."""

import pytest

from calcbench.calculator import Calculator, DivisionError


# --- sum ---

def test_sum(calculator):
    assert calculator.sum(3, 4) == 7


@pytest.mark.parametrize("a,b", [(0, 0), (-5, 3), (10**30, 1), (-2, -8)])
def test_sum_matches_addition(calculator, a, b):
    assert calculator.sum(a, b) == a + b


# --- divide ---

def test_divide(calculator):
    assert calculator.divide(10, 2) == 5


@pytest.mark.parametrize(
    "a,b,expected",
    [
        (7, 2, 3),
        (-7, 2, -3),
        (7, -2, -3),
        (-7, -2, 3),
        (1, 3, 0),
        (-1, 3, 0),
        (0, -4, 0),
    ],
)
def test_divide_truncates_toward_zero(calculator, a, b, expected):
    assert calculator.divide(a, b) == expected


def test_divide_large_ints_exact(calculator):
    """Quotients beyond float precision stay exact."""
    a = 10**40 + 7
    assert calculator.divide(a, 1) == a
    assert calculator.divide(-(10**40), 3) == -(10**40 // 3)


@pytest.mark.parametrize("a", [10, 0, -3])
def test_divide_by_zero_raises(calculator, a):
    with pytest.raises(DivisionError):
        calculator.divide(a, 0)


def test_division_error_is_zero_division_error(calculator):
    with pytest.raises(ZeroDivisionError, match="by zero"):
        calculator.divide(10, 0)


# --- equal_integers ---

@pytest.mark.parametrize("a", [0, 20, -1, 10**25])
def test_equal_integers_same(calculator, a):
    assert calculator.equal_integers(a, a) is True


def test_equal_integers_different(calculator):
    assert calculator.equal_integers(20, 21) is False
    assert calculator.equal_integers(-1, 1) is False


def test_calculator_is_stateless():
    calc = Calculator()
    calc.divide(9, 3)
    calc.sum(1, 2)
    assert vars(calc) == {}

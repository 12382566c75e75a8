"""The subject under test: a tiny stateless calculator.

Integer arithmetic only. Division truncates toward zero and refuses a zero
divisor with DivisionError.
"""

from __future__ import annotations


class DivisionError(ZeroDivisionError):
    """Raised by Calculator.divide when the divisor is zero."""


class Calculator:
    """Stateless integer calculator shared by every case of a suite run."""

    def sum(self, a: int, b: int) -> int:
        return a + b

    def divide(self, a: int, b: int) -> int:
        """Integer quotient of a / b, truncated toward zero.

        Works on the absolute values so large ints never pass through float.
        """
        if b == 0:
            raise DivisionError(f"cannot divide {a} by zero")
        quotient = abs(a) // abs(b)
        if (a < 0) != (b < 0):
            return -quotient
        return quotient

    def equal_integers(self, a: int, b: int) -> bool:
        return a == b

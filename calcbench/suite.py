"""Suite definition: ordered test cases plus lifecycle hook slots.

A suite is built once, before it runs, through decorators:

    suite = Suite("calculator")

    @suite.once_before
    def init(fixture):
        fixture.calculator = Calculator()

    @suite.case(expected=DivisionError)
    def test_division_by_zero(fixture):
        fixture.calculator.divide(10, 0)

    @suite.case(skip="not ready")
    def test_equal(fixture):
        ...

Whether a case is skipped is fixed here, not checked by the runner mid-run.
"""

from __future__ import annotations

from typing import Any, Callable, Optional

from calcbench.models import ActiveCase, SkippedCase, TestCase

Hook = Callable[[Any], None]

_HOOK_SLOTS = ("once_before", "before_each", "after_each", "once_after")


class SuiteError(Exception):
    """Raised when a suite is defined inconsistently."""


class Fixture:
    """Shared state for a single suite run.

    A fresh Fixture is handed to every hook and case body of one run and
    thrown away when the run ends.
    """

    def __repr__(self) -> str:
        attrs = ", ".join(f"{k}={v!r}" for k, v in sorted(vars(self).items()))
        return f"Fixture({attrs})"


class Suite:
    """An ordered collection of test cases with optional lifecycle hooks."""

    def __init__(self, name: str, description: str = "") -> None:
        self.name = name
        self.description = description
        self.cases: list[TestCase] = []
        self.hooks: dict[str, Optional[Hook]] = {slot: None for slot in _HOOK_SLOTS}

    def _register_hook(self, slot: str, fn: Hook) -> Hook:
        if self.hooks[slot] is not None:
            raise SuiteError(f"Suite {self.name!r} already has a {slot} hook")
        self.hooks[slot] = fn
        return fn

    def once_before(self, fn: Hook) -> Hook:
        """Run once, before the first executed case."""
        return self._register_hook("once_before", fn)

    def before_each(self, fn: Hook) -> Hook:
        return self._register_hook("before_each", fn)

    def after_each(self, fn: Hook) -> Hook:
        """Run after every executed case, even when the case raised."""
        return self._register_hook("after_each", fn)

    def once_after(self, fn: Hook) -> Hook:
        return self._register_hook("once_after", fn)

    def case(
        self,
        expected: Optional[type[BaseException]] = None,
        skip: Optional[str] = None,
        name: Optional[str] = None,
    ) -> Callable[[Hook], Hook]:
        """Register the decorated function as a test case.

        Args:
            expected: Exception class the body must raise for the case to pass.
            skip: Reason string; when given the case is recorded as skipped.
            name: Case name. Defaults to the function name.
        """
        if expected is not None and not (
            isinstance(expected, type) and issubclass(expected, Exception)
        ):
            # SystemExit and KeyboardInterrupt always end the run
            raise SuiteError(f"expected must be an Exception subclass, got {expected!r}")

        def decorator(fn: Hook) -> Hook:
            case_name = name or fn.__name__
            if case_name in self.case_names():
                raise SuiteError(f"Suite {self.name!r} already has a case named {case_name!r}")
            if skip is not None:
                self.cases.append(SkippedCase(name=case_name, body=fn, reason=skip))
            else:
                self.cases.append(ActiveCase(name=case_name, body=fn, expected=expected))
            return fn

        return decorator

    def case_names(self) -> list[str]:
        return [c.name for c in self.cases]

    @property
    def active_count(self) -> int:
        return sum(1 for c in self.cases if isinstance(c, ActiveCase))

    @property
    def skipped_count(self) -> int:
        return sum(1 for c in self.cases if isinstance(c, SkippedCase))

"""Data models for calcbench.

Outcome enum, the ActiveCase/SkippedCase variants, CaseResult, SuiteReport and
JudgeResult — the typed structures that flow through suite → runner → scorer → CLI.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Optional, Union


class Outcome(str, Enum):
    """Per-case outcomes."""

    PASSED = "passed"
    FAILED = "failed"
    SKIPPED = "skipped"


def _verdict(passed: int, executed: int) -> str:
    if executed == 0:
        return "no-tests"
    if passed == executed:
        return "pass"
    if passed > 0:
        return "partial"
    return "fail"


@dataclass(frozen=True)
class ActiveCase:
    """A case the runner executes.

    When `expected` is set the case passes only if its body raises an
    instance of that exception class.
    """

    name: str
    body: Callable[[Any], None]
    expected: Optional[type[BaseException]] = None


@dataclass(frozen=True)
class SkippedCase:
    """A case excluded from execution. Reported, never run."""

    name: str
    body: Callable[[Any], None]
    reason: str = ""


TestCase = Union[ActiveCase, SkippedCase]


@dataclass
class CaseResult:
    """Outcome of a single case."""

    name: str
    outcome: Outcome
    duration_s: float = 0.0
    error: Optional[str] = None
    expected: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "outcome": self.outcome.value,
            "duration_s": self.duration_s,
            "error": self.error,
            "expected": self.expected,
        }

    @classmethod
    def from_dict(cls, d: dict) -> CaseResult:
        return cls(
            name=d.get("name", ""),
            outcome=Outcome(d.get("outcome", Outcome.FAILED.value)),
            duration_s=d.get("duration_s", 0.0),
            error=d.get("error"),
            expected=d.get("expected"),
        )


@dataclass
class SuiteReport:
    """Complete result of a single suite run."""

    suite: str
    timestamp: str
    results: list[CaseResult] = field(default_factory=list)
    # Ordered record of every hook and body invocation
    trace: list[str] = field(default_factory=list)
    wall_clock_s: float = 0.0

    def _count(self, outcome: Outcome) -> int:
        return sum(1 for r in self.results if r.outcome == outcome)

    @property
    def passed(self) -> int:
        return self._count(Outcome.PASSED)

    @property
    def failed(self) -> int:
        return self._count(Outcome.FAILED)

    @property
    def skipped(self) -> int:
        return self._count(Outcome.SKIPPED)

    @property
    def total(self) -> int:
        return len(self.results)

    @property
    def verdict(self) -> str:
        """Verdict over executed cases; skipped cases carry no signal."""
        return _verdict(self.passed, self.passed + self.failed)

    def to_dict(self) -> dict:
        """Serialize to a JSON-compatible dict."""
        return {
            "suite": self.suite,
            "timestamp": self.timestamp,
            "wall_clock_s": self.wall_clock_s,
            "passed": self.passed,
            "failed": self.failed,
            "skipped": self.skipped,
            "total": self.total,
            "verdict": self.verdict,
            "results": [r.to_dict() for r in self.results],
            "trace": list(self.trace),
        }

    @classmethod
    def from_dict(cls, d: dict) -> SuiteReport:
        """Deserialize from a JSON dict (report.json).

        Counts are derived from the results, so the stored totals are ignored.
        """
        return cls(
            suite=d.get("suite", ""),
            timestamp=d.get("timestamp", ""),
            results=[CaseResult.from_dict(r) for r in d.get("results", [])],
            trace=list(d.get("trace", [])),
            wall_clock_s=d.get("wall_clock_s", 0.0),
        )

    def save(self, result_dir: Path) -> Path:
        """Write report.json to the result directory."""
        result_dir.mkdir(parents=True, exist_ok=True)
        path = result_dir / "report.json"
        path.write_text(json.dumps(self.to_dict(), indent=2), encoding="utf-8")
        return path

    @classmethod
    def load(cls, result_dir: Path) -> Optional[SuiteReport]:
        """Load report.json from a result directory."""
        p = result_dir / "report.json"
        if not p.exists():
            return None
        try:
            return cls.from_dict(json.loads(p.read_text(encoding="utf-8")))
        except (json.JSONDecodeError, OSError, ValueError):
            return None


@dataclass
class JudgeResult:
    """Counts parsed from an external pytest run of a suite."""

    passed: int = 0
    failed: int = 0
    skipped: int = 0
    errors: int = 0
    total: int = 0
    output: str = ""

    @property
    def verdict(self) -> str:
        return _verdict(self.passed, self.passed + self.failed + self.errors)

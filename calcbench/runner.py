"""calcbench runner — executes a suite's lifecycle and judges pytest renditions.

Data flow per run_suite call:
1. Create a fresh Fixture for this run
2. Walk the cases in declaration order
3. Skipped cases are recorded without touching any hook
4. Before the first executed case, run once_before (exactly once)
5. Per executed case: before_each → body → after_each (always)
6. Decide the outcome from what propagated and the case's expected error
7. Run once_after if once_before ran, assemble the SuiteReport

run_judge is the external route: pytest runs the suite's tests/ directory in
a subprocess and the summary line is parsed into a JudgeResult.
"""

from __future__ import annotations

import logging
import re
import subprocess
import sys
import time
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from rich.console import Console

from calcbench.environment import build_judge_env
from calcbench.models import ActiveCase, CaseResult, JudgeResult, Outcome, SuiteReport
from calcbench.suite import Fixture, Suite

logger = logging.getLogger(__name__)

JUDGE_TIMEOUT_S = 60


def _describe(exc: BaseException) -> str:
    return f"{type(exc).__name__}: {exc}"


def _invoke(step: str, fn, fixture: Fixture, trace: list[str]) -> Optional[BaseException]:
    """Call a hook or body, returning whatever it raised (or None)."""
    trace.append(step)
    try:
        fn(fixture)
    except Exception as e:
        logger.debug("%s raised %s", step, _describe(e))
        return e
    return None


def _run_case(
    suite: Suite, case: ActiveCase, fixture: Fixture, trace: list[str]
) -> CaseResult:
    """Run one active case between the per-test hooks and judge it."""
    before = suite.hooks["before_each"]
    after = suite.hooks["after_each"]
    expected_name = case.expected.__name__ if case.expected else None

    start = time.monotonic()
    before_error = body_error = after_error = None
    body_ran = False

    try:
        if before:
            before_error = _invoke(f"before_each:{case.name}", before, fixture, trace)
        if before_error is None:
            body_ran = True
            body_error = _invoke(case.name, case.body, fixture, trace)
    finally:
        # Also runs while SystemExit or KeyboardInterrupt propagates
        if after:
            after_error = _invoke(f"after_each:{case.name}", after, fixture, trace)
    elapsed = round(time.monotonic() - start, 6)

    error: Optional[str] = None
    if before_error is not None:
        error = f"before_each failed: {_describe(before_error)}"
    elif case.expected is not None:
        if body_error is None:
            error = f"expected {expected_name} but nothing was raised"
        elif not isinstance(body_error, case.expected):
            error = f"expected {expected_name}, got {_describe(body_error)}"
    elif body_error is not None:
        error = _describe(body_error)

    if error is None and after_error is not None:
        logger.warning("after_each failed for %s: %s", case.name, _describe(after_error))
        error = f"after_each failed: {_describe(after_error)}"

    outcome = Outcome.PASSED if error is None else Outcome.FAILED
    logger.info("%s %s%s", case.name, outcome.value, "" if body_ran else " (body not run)")
    return CaseResult(
        name=case.name,
        outcome=outcome,
        duration_s=elapsed,
        error=error,
        expected=expected_name,
    )


def run_suite(suite: Suite, console: Optional[Console] = None) -> SuiteReport:
    """Execute every case of a suite and return the report.

    This is the main orchestration function. once_before runs lazily,
    immediately before the first executed case, so a suite of skipped cases
    never runs it. If it raises, every active case fails with that error and
    no per-test hook runs.

    Args:
        suite: The suite to run.
        console: Rich Console for status output; silent when None.

    Returns:
        SuiteReport with one CaseResult per case, in declaration order.
    """
    timestamp = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%SZ")
    report = SuiteReport(suite=suite.name, timestamp=timestamp)
    fixture = Fixture()
    once_before = suite.hooks["once_before"]
    once_after = suite.hooks["once_after"]

    if console:
        console.print(f"\n[bold]Running:[/bold] {suite.name} ({len(suite.cases)} cases)")

    start = time.monotonic()
    setup_done = False
    setup_error: Optional[BaseException] = None

    for case in suite.cases:
        if not isinstance(case, ActiveCase):
            logger.info("%s skipped: %s", case.name, case.reason or "no reason given")
            report.results.append(CaseResult(name=case.name, outcome=Outcome.SKIPPED))
            continue

        if not setup_done:
            setup_done = True
            if once_before:
                setup_error = _invoke("once_before", once_before, fixture, report.trace)
                if setup_error is not None:
                    logger.error("once_before failed: %s", _describe(setup_error))

        if setup_error is not None:
            report.results.append(
                CaseResult(
                    name=case.name,
                    outcome=Outcome.FAILED,
                    error=f"once_before failed: {_describe(setup_error)}",
                    expected=case.expected.__name__ if case.expected else None,
                )
            )
            continue

        result = _run_case(suite, case, fixture, report.trace)
        report.results.append(result)
        if console:
            color = "green" if result.outcome == Outcome.PASSED else "red"
            console.print(f"  {case.name} [{color}]{result.outcome.value}[/{color}]")

    if setup_done and once_after:
        teardown_error = _invoke("once_after", once_after, fixture, report.trace)
        if teardown_error is not None:
            logger.warning("once_after failed: %s", _describe(teardown_error))

    report.wall_clock_s = round(time.monotonic() - start, 4)
    logger.info(
        "%s: %d passed, %d failed, %d skipped",
        suite.name, report.passed, report.failed, report.skipped,
    )
    return report


# pytest's closing line, e.g. "==== 3 passed, 2 skipped in 0.05s ===="
_SUMMARY_RE = re.compile(r"^=+ (.+) in [\d.]+s\b.*=+$", re.MULTILINE)


def _parse_summary(output: str) -> JudgeResult:
    """Parse pytest's summary line: "X passed, Y failed, Z skipped, W errors".

    Only the last summary line counts; skip reasons and test output above it
    are ignored.
    """
    counts = {"passed": 0, "failed": 0, "skipped": 0, "error": 0}
    summaries = _SUMMARY_RE.findall(output)
    if summaries:
        for key in counts:
            m = re.search(rf"(\d+) {key}", summaries[-1])
            if m:
                counts[key] = int(m.group(1))
    total = counts["passed"] + counts["failed"] + counts["skipped"] + counts["error"]
    return JudgeResult(
        passed=counts["passed"],
        failed=counts["failed"],
        skipped=counts["skipped"],
        errors=counts["error"],
        total=total,
        output=output,
    )


def run_judge(tests_dir: Path, result_dir: Optional[Path] = None) -> JudgeResult:
    """Run pytest over a suite's pytest rendition.

    Returns JudgeResult with pass/fail/skip counts parsed from pytest output.
    The raw output is saved as pytest-output.txt when result_dir is given.
    """
    try:
        proc = subprocess.run(
            [sys.executable, "-m", "pytest", str(tests_dir), "-v", "--tb=short",
             "--no-header", "-p", "no:cacheprovider", "-rs"],
            cwd=tests_dir.parent,
            env=build_judge_env(),
            capture_output=True,
            text=True,
            timeout=JUDGE_TIMEOUT_S,
        )
    except subprocess.TimeoutExpired:
        logger.error("pytest timed out after %ss", JUDGE_TIMEOUT_S)
        return JudgeResult(output=f"pytest timed out after {JUDGE_TIMEOUT_S}s")
    except FileNotFoundError:
        return JudgeResult(output="pytest not found")

    output = proc.stdout + "\n" + proc.stderr
    if result_dir:
        result_dir.mkdir(parents=True, exist_ok=True)
        (result_dir / "pytest-output.txt").write_text(output, encoding="utf-8")
    return _parse_summary(output)

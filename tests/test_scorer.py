"""Tests for report rendering, listing, and RESULTS.md generation."""

from rich.console import Console

from calcbench.models import CaseResult, JudgeResult, Outcome, SuiteReport
from calcbench.scorer import generate_report, list_all_results, render_judge, render_report


def _console() -> Console:
    return Console(record=True, width=160)


def _report(timestamp: str, *outcomes: Outcome) -> SuiteReport:
    results = []
    for i, o in enumerate(outcomes):
        error = "AssertionError: " if o == Outcome.FAILED else None
        results.append(CaseResult(name=f"case_{i}", outcome=o, error=error))
    return SuiteReport(suite="calculator", timestamp=timestamp, results=results)


def test_render_report_shows_cases_and_summary():
    console = _console()
    render_report(_report("20260101T000000Z", Outcome.PASSED, Outcome.SKIPPED), console)
    text = console.export_text()
    assert "Suite: calculator" in text
    assert "case_0" in text and "case_1" in text
    assert "1 passed, 0 failed, 1 skipped" in text


def test_render_empty_report():
    console = _console()
    render_report(SuiteReport(suite="empty", timestamp=""), console)
    assert "No cases in suite: empty" in console.export_text()


def test_render_judge():
    console = _console()
    render_judge("calculator", JudgeResult(passed=3, skipped=2, total=5), console)
    assert "3 passed, 0 failed, 2 skipped, 0 errors" in console.export_text()


def test_list_all_results_empty(tmp_path):
    console = _console()
    list_all_results(console, tmp_path / "nothing")
    assert "No results yet" in console.export_text()


def test_list_all_results(results_dir):
    report = _report("20260101T000000Z", Outcome.PASSED)
    report.save(results_dir / "calculator" / report.timestamp)
    console = _console()
    list_all_results(console)
    text = console.export_text()
    assert "calculator" in text
    assert "20260101T000000Z" in text


def test_generate_report_history(results_dir):
    first = _report("20260101T000000Z", Outcome.PASSED, Outcome.SKIPPED)
    second = _report("20260102T000000Z", Outcome.PASSED, Outcome.FAILED)
    for r in (second, first):
        r.save(results_dir / r.suite / r.timestamp)

    path = generate_report()
    assert path == results_dir / "RESULTS.md"
    text = path.read_text(encoding="utf-8")
    assert "## calculator" in text
    assert text.index("20260101T000000Z") < text.index("20260102T000000Z")
    assert "**partial**" in text
    assert "- `case_1`: AssertionError" in text


def test_generate_report_without_results(tmp_path):
    path = generate_report(tmp_path / "results")
    assert "No results yet." in path.read_text(encoding="utf-8")

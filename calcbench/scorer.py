"""calcbench scorer — renders reports as Rich tables, lists stored runs, writes RESULTS.md.

Reports are stored as <results root>/<suite>/<timestamp>/report.json.
"""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.table import Table

from calcbench.environment import results_root
from calcbench.models import JudgeResult, Outcome, SuiteReport

_OUTCOME_STYLES = {
    Outcome.PASSED: "green",
    Outcome.FAILED: "red",
    Outcome.SKIPPED: "yellow",
}

_VERDICT_STYLES = {"pass": "green", "partial": "yellow", "fail": "red"}


def _styled_verdict(verdict: str) -> str:
    color = _VERDICT_STYLES.get(verdict, "white")
    return f"[{color}]{verdict}[/{color}]"


def _fmt_duration(s: float) -> str:
    """Format a duration in milliseconds."""
    if s == 0.0:
        return "--"
    return f"{s * 1000:.2f}ms"


def render_report(report: SuiteReport, console: Console) -> None:
    """Render a Rich table of case outcomes for a suite run."""
    if not report.results:
        console.print(f"[yellow]No cases in suite: {report.suite}[/yellow]")
        return

    table = Table(
        title=f"Suite: {report.suite}",
        show_header=True,
        header_style="bold",
    )
    table.add_column("Case", min_width=24)
    table.add_column("Outcome", justify="center", min_width=8)
    table.add_column("Expected", style="dim")
    table.add_column("Time", justify="right")
    table.add_column("Detail", style="dim")

    for r in report.results:
        style = _OUTCOME_STYLES[r.outcome]
        table.add_row(
            r.name,
            f"[{style}]{r.outcome.value}[/{style}]",
            r.expected or "",
            _fmt_duration(r.duration_s),
            r.error or "",
        )

    console.print()
    console.print(table)
    console.print(
        f"  {report.passed} passed, {report.failed} failed, {report.skipped} skipped "
        f"({_styled_verdict(report.verdict)}) in {report.wall_clock_s}s"
    )
    console.print()


def render_judge(name: str, result: JudgeResult, console: Console) -> None:
    """Print the counts from a pytest judge run."""
    console.print(
        f"  Judge {name}: {result.passed} passed, {result.failed} failed, "
        f"{result.skipped} skipped, {result.errors} errors "
        f"({_styled_verdict(result.verdict)})"
    )


def _load_all_runs(suite: str, root: Optional[Path] = None) -> list[SuiteReport]:
    """Load every stored run for a suite, sorted by timestamp."""
    suite_dir = results_root(root) / suite
    if not suite_dir.is_dir():
        return []
    runs: list[SuiteReport] = []
    for run_dir in sorted(suite_dir.iterdir()):
        if not run_dir.is_dir():
            continue
        report = SuiteReport.load(run_dir)
        if report:
            runs.append(report)
    runs.sort(key=lambda r: r.timestamp)
    return runs


def list_all_results(console: Console, root: Optional[Path] = None) -> None:
    """List all stored reports across all suites."""
    base = results_root(root)
    if not base.is_dir():
        console.print("[yellow]No results yet. Run a suite first.[/yellow]")
        return

    for suite_dir in sorted(base.iterdir()):
        if not suite_dir.is_dir():
            continue
        console.print(f"\n[bold]{suite_dir.name}[/bold]")
        for report in reversed(_load_all_runs(suite_dir.name, root)):
            counts = f"{report.passed}/{report.failed}/{report.skipped}"
            console.print(
                f"  {report.timestamp}  {report.verdict:8s} {counts:8s} {report.wall_clock_s:>8.4f}s"
            )


def generate_report(root: Optional[Path] = None) -> Path:
    """Generate RESULTS.md with the run history of every suite.

    Returns the path to the generated file.
    """
    base = results_root(root)
    suites = sorted(d.name for d in base.iterdir() if d.is_dir()) if base.is_dir() else []

    lines: list[str] = []
    lines.append("# Suite Results")
    lines.append("")
    lines.append(f"*Generated {datetime.now(timezone.utc).strftime('%Y-%m-%d %H:%M UTC')}*")
    lines.append("")

    if not suites:
        lines.append("No results yet.")

    for suite in suites:
        lines.append(f"## {suite}")
        lines.append("")

        runs = _load_all_runs(suite, root)
        if not runs:
            lines.append("No runs recorded.")
            lines.append("")
            continue

        lines.append("| # | Timestamp | Verdict | Passed | Failed | Skipped | Wall Clock |")
        lines.append("|---|-----------|---------|--------|--------|---------|------------|")
        for i, r in enumerate(runs, 1):
            lines.append(
                f"| {i} | `{r.timestamp}` | **{r.verdict}** | {r.passed} | {r.failed} "
                f"| {r.skipped} | {r.wall_clock_s}s |"
            )
        lines.append("")

        failures = [c for c in runs[-1].results if c.outcome == Outcome.FAILED]
        if failures:
            lines.append("### Failures in latest run")
            lines.append("")
            for c in failures:
                lines.append(f"- `{c.name}`: {c.error}")
            lines.append("")

    base.mkdir(parents=True, exist_ok=True)
    out = base / "RESULTS.md"
    out.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return out

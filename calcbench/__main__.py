"""CLI for calcbench.

Usage:
    python -m calcbench list                     # Show bundled suites
    python -m calcbench run calculator           # Run a suite's lifecycle in-process
    python -m calcbench judge calculator         # Run the pytest rendition of a suite
    python -m calcbench results                  # List all stored reports
    python -m calcbench report                   # Generate RESULTS.md history
    python -m calcbench calc divide 10 2         # Use the calculator directly
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from calcbench.calculator import Calculator, DivisionError
from calcbench.environment import log_level_name, results_root
from calcbench.logging import setup_logging
from calcbench.runner import run_judge, run_suite
from calcbench.scorer import generate_report, list_all_results, render_judge, render_report
from calcbench.suites import list_suites, load_suite

app = typer.Typer(
    name="calcbench",
    help="Test-lifecycle walkthrough around a four-function calculator",
    no_args_is_help=True,
)
console = Console(stderr=True)


class Operation(str, Enum):
    """Calculator operations exposed by `calc`."""

    SUM = "sum"
    DIVIDE = "divide"
    EQUAL = "equal"


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(None, "--log-level", "-l", help="Console log level (default: $CALCBENCH_LOG_LEVEL or WARNING)"),
    debug: bool = typer.Option(False, "--debug", help="Debug logging with logger names and source paths"),
) -> None:
    """Configure logging before any command runs."""
    try:
        setup_logging(log_level_name(log_level), debug_mode=debug)
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)


@app.command("list")
def cmd_list() -> None:
    """Show bundled suites."""
    suites = list_suites()
    if not suites:
        console.print("[yellow]No suites found.[/yellow]")
        raise typer.Exit(1)

    table = Table(title="Available Suites", show_header=True, header_style="bold")
    table.add_column("Name", style="green", min_width=12)
    table.add_column("Description", min_width=30)
    table.add_column("Cases", justify="right")
    table.add_column("Skipped", justify="right")
    table.add_column("pytest", justify="center")

    for s in suites:
        table.add_row(
            s.name,
            s.description,
            str(len(s.suite.cases)),
            str(s.suite.skipped_count),
            "yes" if s.tests_dir else "--",
        )

    console.print()
    console.print(table)
    console.print()


@app.command("run")
def cmd_run(
    suite: str = typer.Argument(help="Suite name (e.g., 'calculator')"),
    save: bool = typer.Option(True, "--save/--no-save", help="Store report.json under the results directory"),
    results_dir: Optional[Path] = typer.Option(None, "--results-dir", help="Override $CALCBENCH_RESULTS_DIR"),
    show_trace: bool = typer.Option(False, "--trace", help="Print the hook invocation order"),
) -> None:
    """Run a suite's lifecycle and report passed/failed/skipped."""
    info = load_suite(suite)
    if not info:
        console.print(f"[red]Error:[/red] Unknown suite: {suite}")
        raise typer.Exit(1)

    report = run_suite(info.suite, console)
    render_report(report, console)

    if show_trace:
        console.print("[bold]Trace:[/bold] " + ", ".join(report.trace))

    if save:
        path = report.save(results_root(results_dir) / report.suite / report.timestamp)
        console.print(f"  [bold green]Done.[/bold green] Report saved to {path}")

    if report.failed:
        raise typer.Exit(1)


@app.command("judge")
def cmd_judge(
    suite: str = typer.Argument(help="Suite name (e.g., 'calculator')"),
    results_dir: Optional[Path] = typer.Option(None, "--results-dir", help="Override $CALCBENCH_RESULTS_DIR"),
) -> None:
    """Run the suite's pytest rendition through pytest and count outcomes."""
    info = load_suite(suite)
    if not info:
        console.print(f"[red]Error:[/red] Unknown suite: {suite}")
        raise typer.Exit(1)
    if not info.tests_dir:
        console.print(f"[red]Error:[/red] Suite {suite} has no pytest rendition")
        raise typer.Exit(1)

    console.print(f"  Running pytest on {info.tests_dir} ...")
    result = run_judge(info.tests_dir, results_root(results_dir) / info.name / "judge")
    render_judge(info.name, result, console)
    if result.verdict != "pass":
        raise typer.Exit(1)


@app.command("results")
def cmd_results(
    results_dir: Optional[Path] = typer.Option(None, "--results-dir", help="Override $CALCBENCH_RESULTS_DIR"),
) -> None:
    """List all stored reports."""
    list_all_results(console, results_dir)


@app.command("report")
def cmd_report(
    results_dir: Optional[Path] = typer.Option(None, "--results-dir", help="Override $CALCBENCH_RESULTS_DIR"),
) -> None:
    """Generate RESULTS.md with the run history of every suite."""
    path = generate_report(results_dir)
    console.print(f"Report written to {path}")


@app.command("calc")
def cmd_calc(
    op: Operation = typer.Argument(help="Operation: sum, divide, equal"),
    a: int = typer.Argument(help="First operand"),
    b: int = typer.Argument(help="Second operand"),
) -> None:
    """Apply a calculator operation and print the result to stdout."""
    calculator = Calculator()
    try:
        if op == Operation.SUM:
            value = calculator.sum(a, b)
        elif op == Operation.DIVIDE:
            value = calculator.divide(a, b)
        else:
            value = calculator.equal_integers(a, b)
    except DivisionError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
    typer.echo(str(value).lower() if isinstance(value, bool) else value)


if __name__ == "__main__":
    app()

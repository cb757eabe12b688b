"""Rich console output for eval runs: progress lines, warnings, suite reports."""

from __future__ import annotations

from collections.abc import Sequence

from rich.console import Console
from rich.table import Table

from skill_evals.schemas.cases import CaseOutcome

console = Console()

STATUS_STYLES = {
    "passed": "[green]PASS[/green]",
    "failed": "[red]FAIL[/red]",
    "low_score": "[yellow]LOW[/yellow]",
    "errored": "[bold red]ERROR[/bold red]",
}


def fmt_score(score: float | None) -> str:
    if score is None:
        return "-"
    color = "green" if score >= 0.8 else "yellow" if score >= 0.5 else "red"
    return f"[{color}]{score:.2f}[/{color}]"


def print_structural_failures(skill_path: str, failures: Sequence[str]) -> None:
    """Print the ordered list of structural mismatches for one skill."""
    console.print(f"[red]{skill_path}[/red] structural issues:")
    for failure in failures:
        console.print(f"  - {failure}")


def print_low_score_warning(skill_name: str, scores: dict[str, float], threshold: float) -> None:
    parts = ", ".join(f"{key}={value:.2f}" for key, value in scores.items())
    console.print(f"[yellow]Low score for {skill_name} (< {threshold:.2f}):[/yellow] {parts}")


def print_suite_report(title: str, outcomes: Sequence[CaseOutcome]) -> None:
    """Print a per-case table and aggregate metrics."""
    if not outcomes:
        console.print("[yellow]No results to display.[/yellow]")
        return

    score_keys: list[str] = []
    for outcome in outcomes:
        for key in outcome.scores:
            if key not in score_keys:
                score_keys.append(key)

    table = Table(title=title, show_lines=True)
    table.add_column("Case", style="cyan", max_width=50)
    table.add_column("Skill", style="magenta")
    for key in score_keys:
        table.add_column(key, justify="center")
    table.add_column("Status", justify="center")

    for outcome in outcomes:
        table.add_row(
            outcome.case_id[:50] + ("..." if len(outcome.case_id) > 50 else ""),
            outcome.skill_name,
            *(fmt_score(outcome.scores.get(key)) for key in score_keys),
            STATUS_STYLES[outcome.status],
        )

    console.print(table)

    total = len(outcomes)
    counts = {status: sum(1 for o in outcomes if o.status == status) for status in STATUS_STYLES}
    console.print("\n[bold]Aggregate Metrics:[/bold]")
    console.print(f"  Cases evaluated: {total}")
    for key in score_keys:
        values = [o.scores[key] for o in outcomes if key in o.scores]
        console.print(f"  Avg {key}: {sum(values) / len(values):.2f}")
    console.print(
        f"  Status: [green]{counts['passed']} PASS[/green] | "
        f"[red]{counts['failed']} FAIL[/red] | "
        f"[yellow]{counts['low_score']} LOW[/yellow] | "
        f"[bold red]{counts['errored']} ERROR[/bold red]"
    )
    console.print(f"  Pass Rate: {counts['passed'] / total * 100:.0f}%\n")

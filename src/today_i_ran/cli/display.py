"""Display utilities for the Today I Ran CLI with Rich formatting."""

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from today_i_ran.shared.calculations import RunReport
from today_i_ran.shared.formatting import (
    format_distance,
    format_duration,
    format_ratio,
    format_velocity,
)

console = Console(highlight=False)

PROJECTIONS_HEADER = "This is how long you would have needed for other distances:"
COMPARISONS_HEADER = "Your average velocity compared to those of other performances:"


def _borderless_table() -> Table:
    return Table(show_header=False, box=None, padding=(0, 1), pad_edge=False)


def display_summary(report: RunReport) -> None:
    """Display distance, time and average velocity."""
    distance = format_distance(report.distance.meters, report.unit_system)
    duration = format_duration(report.duration)
    velocity = format_velocity(report.velocity, report.unit_system)

    console.print(f"Today, you ran [bold]{distance}[/bold] in [bold]{duration}[/bold].")
    console.print(f"[bold]Your average velocity was {velocity}.[/bold]")


def display_projections(report: RunReport) -> None:
    """Display estimated times for the standard distances."""
    table = _borderless_table()
    table.add_column(justify="right")
    table.add_column()

    for projection in report.projections:
        table.add_row(projection.label, format_duration(projection.duration))

    console.print()
    console.print(f"[bold]{PROJECTIONS_HEADER}[/bold]")
    console.print(table)


def display_comparisons(report: RunReport) -> None:
    """Display velocity ratios against the reference performances."""
    table = _borderless_table()
    table.add_column(justify="right")
    table.add_column()

    for comparison in report.comparisons:
        table.add_row(format_ratio(comparison.ratio), comparison.label)

    console.print()
    console.print(f"[bold]{COMPARISONS_HEADER}[/bold]")
    console.print(table)


def display_report(report: RunReport) -> None:
    """Display a full run report."""
    display_summary(report)
    if report.projections:
        display_projections(report)
    if report.comparisons:
        display_comparisons(report)


def display_error(message: str) -> None:
    """Display error message."""
    console.print(f"[red]✗[/red] {escape(message)}", soft_wrap=True)

#!/usr/bin/env python3
"""
today-i-ran - basic information derived from the distance you ran and the
time you needed.

Usage:
    today-i-ran 14.3km 1h12min4s        # Average velocity
    today-i-ran 14.3km 1h12min4s -v     # Plus projections and comparisons
    today-i-ran 9mi 1h20min --miles     # Output in miles
    today-i-ran 9mi 1h20min --km        # Output in kilometers
    today-i-ran 10km 50min --json       # Raw JSON report
"""

import logging

import typer
from pydantic import ValidationError

from today_i_ran import __version__
from today_i_ran.cli import display
from today_i_ran.shared.calculations import build_report
from today_i_ran.shared.config import get_settings
from today_i_ran.shared.errors import InvalidReferenceData, RunInputError
from today_i_ran.shared.models import REFERENCE_PERFORMANCES, UnitSystem, validate_references
from today_i_ran.shared.parsing import parse_distance, parse_duration

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="today-i-ran",
    help=(
        "Basic information derived from the distance you ran and the time you needed: "
        "your average velocity, estimated times for other distances and comparisons "
        "with other performances."
    ),
    add_completion=False,
)


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        display.console.print(f"today-i-ran version {__version__}")
        raise typer.Exit()


def configure_logging(level: str) -> None:
    """Configure root logging on stderr."""
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@app.command()
def run(
    distance: str = typer.Argument(..., help="the distance you ran today, e.g. 14.3km"),
    time: str = typer.Argument(..., help="the time you needed, e.g. 1h12min4s"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="show additional information"),
    use_miles: bool = typer.Option(False, "--miles", "-m", help="use miles as unit of length"),
    use_km: bool = typer.Option(False, "--km", "-k", help="use kilometers as unit of length"),
    json_output: bool = typer.Option(False, "--json", "-j", help="Output raw JSON"),
    version: bool = typer.Option(
        False, "--version", callback=version_callback, is_eager=True, help="Show version"
    ),
) -> None:
    """Show your average velocity for today's run."""
    if use_miles and use_km:
        raise typer.BadParameter("--miles and --km cannot be used together.")

    try:
        settings = get_settings()
    except ValidationError as e:
        display.display_error(f"Invalid configuration. {e}")
        raise typer.Exit(1) from e
    configure_logging(settings.log_level)

    if use_miles:
        unit_system = UnitSystem.IMPERIAL
    elif use_km:
        unit_system = UnitSystem.METRIC
    else:
        unit_system = settings.unit_system
    verbose = verbose or settings.verbose

    try:
        validate_references(REFERENCE_PERFORMANCES)
    except InvalidReferenceData as e:
        logger.error(f"Reference table check failed: {e}")
        display.display_error(f"Built-in reference data is broken. {e}")
        raise typer.Exit(1) from e

    try:
        report = build_report(
            parse_distance(distance),
            parse_duration(time),
            unit_system=unit_system,
            verbose=verbose,
            references=REFERENCE_PERFORMANCES,
        )
    except (RunInputError, ValidationError) as e:
        logger.debug(f"Rejected input {distance!r} {time!r}", exc_info=True)
        display.display_error(f"Could not understand the passed arguments. {e}")
        raise typer.Exit(1) from e

    if json_output:
        print(report.model_dump_json(indent=2))
    else:
        display.display_report(report)


def cli() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    cli()

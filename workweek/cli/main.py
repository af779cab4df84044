"""CLI for workweek.

Prints the work week number (``WW<n>``) for a date given as ``YYYY-MM-DD``,
defaulting to today's local date.
"""

import datetime
import json
from typing import Optional

import typer
from loguru import logger
from pydantic import ValidationError
from rich.console import Console
from rich.text import Text

from workweek import __version__
from workweek.cli.date_input import parse_date, resolve_date_argument
from workweek.config.settings import load_settings
from workweek.core.contracts import validate_work_week_result
from workweek.core.domain.work_week import PreAnchorPolicy, WorkWeekResult
from workweek.core.errors import InvalidDateError, WorkWeekError
from workweek.core.logger import setup_logger
from workweek.core.math.work_week import compute_work_week

# Errors go to stderr, stdout carries only the result
err_console = Console(stderr=True)

app = typer.Typer(
    name="workweek",
    help="Calculate the work week (week 1 starts on the first Sunday of the year).",
    add_completion=False,
)


def run(raw_date: str, policy: PreAnchorPolicy = PreAnchorPolicy.ZERO) -> WorkWeekResult:
    """Parse the date string and compute its work week.

    Raises:
        DateParseError: raw_date is not a valid YYYY-MM-DD date
        WorkWeekError: the calculation failed (cause: InvalidDateError)
    """
    day = parse_date(raw_date)
    logger.debug(f"Parsed date {day.isoformat()} (policy={policy.value})")

    try:
        result = compute_work_week(day, policy)
    except InvalidDateError as e:
        raise WorkWeekError("Failed to calculate the work week", cause=e) from e

    logger.debug(
        f"Anchor {result.anchor.isoformat()} -> {result.label} of {result.work_week_year}"
        f"{' (pre-anchor)' if result.pre_anchor else ''}"
    )
    return result


def _today() -> datetime.date:
    # Single wall-clock read for the whole run
    return datetime.date.today()


def _report_error(error: WorkWeekError) -> None:
    err_console.print(Text(error.describe(), style="red"), soft_wrap=True)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"workweek {__version__}")
        raise typer.Exit()


@app.command()
def main(
    date_arg: Optional[str] = typer.Argument(
        None,
        metavar="DATE",
        help="The date for which to calculate the work week, in YYYY-MM-DD format.",
        show_default="today",
    ),
    pre_anchor: Optional[PreAnchorPolicy] = typer.Option(
        None,
        "--pre-anchor",
        help="Policy for dates before the first Sunday of the year (default from WORKWEEK_PRE_ANCHOR_POLICY).",
        case_sensitive=False,
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the full result as JSON"),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    """Print the work week for DATE."""
    try:
        settings = load_settings()
    except ValidationError as e:
        setup_logger("DEBUG" if debug else "WARNING")
        _report_error(WorkWeekError("Invalid configuration", cause=e))
        raise typer.Exit(code=1)

    setup_logger("DEBUG" if debug else settings.log_level)

    policy = pre_anchor or settings.pre_anchor_policy
    raw_date = resolve_date_argument(date_arg, today=_today())

    try:
        result = run(raw_date, policy)
    except WorkWeekError as e:
        logger.debug(f"Work week calculation aborted: {e.message}")
        _report_error(e)
        raise typer.Exit(code=1)

    if as_json:
        payload = result.to_payload()
        validate_work_week_result(payload)
        typer.echo(json.dumps(payload))
    else:
        typer.echo(result.label)

"""CLI utilities for argument parsing and error handling."""

import functools
import logging
from datetime import date

import typer

from miqaat.exceptions import CalendarError
from miqaat.models.hijri import HijriDate

logger = logging.getLogger(__name__)


def handle_errors(command):
    """Log CalendarError raised by a command and exit with status 1."""

    @functools.wraps(command)
    def wrapper(*args, **kwargs):
        try:
            return command(*args, **kwargs)
        except CalendarError as e:
            logger.error(f"Calendar error: {e}")
            raise typer.Exit(1)

    return wrapper


def to_month_index(month: int | None) -> int | None:
    """Convert a one-based CLI month to the zero-based index.

    Raises:
        typer.BadParameter: If month is outside 1-12.
    """
    if month is None:
        return None
    if not 1 <= month <= 12:
        raise typer.BadParameter(f"Month must be 1-12, got {month}")
    return month - 1


def parse_gregorian(value: str) -> date:
    """Parse a date string in YYYY-MM-DD format."""
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise typer.BadParameter(f"Invalid date format: {value}. Use YYYY-MM-DD.")


def parse_hijri(value: str) -> HijriDate:
    """Parse a Hijri date written as YEAR-MONTH-DAY with a one-based month.

    Raises:
        typer.BadParameter: If the value is malformed.
        ValidationError: If the day does not exist in that month.
    """
    try:
        year, month, day = (int(part) for part in value.split("-"))
    except ValueError:
        raise typer.BadParameter(
            f"Invalid Hijri date: {value}. Use YEAR-MONTH-DAY (e.g. 1446-1-10)."
        )
    return HijriDate(year, month - 1, day)

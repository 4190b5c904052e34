"""Build a selection of calendar days for bulk actions."""

from enum import Enum

import typer
from typing_extensions import Annotated

from cli.context import get_context
from cli.display import GridRenderer, console
from cli.utils import handle_errors, parse_hijri, to_month_index
from miqaat import selection


class Scope(str, Enum):
    month = "month"
    year = "year"
    range = "range"


@handle_errors
def select(
    scope: Annotated[
        Scope,
        typer.Argument(help="What to select: month, year or range"),
    ],
    year: Annotated[
        int | None,
        typer.Option("--year", "-y", help="Hijri year (default: current)"),
    ] = None,
    month: Annotated[
        int | None,
        typer.Option("--month", "-m", help="Hijri month 1-12 (default: current)"),
    ] = None,
    start: Annotated[
        str | None,
        typer.Option("--start", help="First day of a range (YEAR-MONTH-DAY)"),
    ] = None,
    end: Annotated[
        str | None,
        typer.Option("--end", help="Last day of a range (YEAR-MONTH-DAY)"),
    ] = None,
    show_keys: Annotated[
        bool,
        typer.Option("--keys", "-k", help="Print every selected key"),
    ] = False,
) -> None:
    """Select the days of a month grid, a whole year or a date range.

    Keys are written as day-month-year with a zero-based month, the same
    form accepted by the web API.

    Examples:
        miqaat-cal select month -y 1446 -m 9
        miqaat-cal select year -y 1446
        miqaat-cal select range --start 1446-9-1 --end 1446-9-10 --keys
    """
    calendar = get_context().calendar(year, to_month_index(month))

    if scope == Scope.month:
        keys = selection.month_keys(calendar)
        GridRenderer().render(calendar, selected=keys)
    elif scope == Scope.year:
        keys = selection.year_keys(calendar.year)
    else:
        if start is None or end is None:
            raise typer.BadParameter("--start and --end are required for a range")
        keys = selection.range_keys(parse_hijri(start).key, parse_hijri(end).key)

    console.print(f"[bold]{len(keys)}[/bold] days selected")
    if show_keys:
        for day in selection.selected_dates(keys):
            console.print(f"  {day.key}  [dim]{day.formatted()}[/dim]")

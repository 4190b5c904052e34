"""Display a Hijri month grid with miqaats."""

import logging

import typer
from typing_extensions import Annotated

from cli.context import get_context
from cli.display import GridRenderer, MiqaatRenderer, console
from cli.utils import handle_errors, to_month_index
from miqaat.config import WeekStart

logger = logging.getLogger(__name__)


@handle_errors
def month(
    year: Annotated[
        int | None,
        typer.Option("--year", "-y", help="Hijri year (default: current)"),
    ] = None,
    month: Annotated[
        int | None,
        typer.Option("--month", "-m", help="Hijri month 1-12 (default: current)"),
    ] = None,
    offset: Annotated[
        int,
        typer.Option("--offset", "-o", help="Months to move forward (negative for back)"),
    ] = 0,
    monday: Annotated[
        bool,
        typer.Option("--monday", help="Start weeks on Monday"),
    ] = False,
    arabic: Annotated[
        bool,
        typer.Option("--arabic", "-a", help="Show day numbers in Arabic-Indic digits"),
    ] = False,
    details: Annotated[
        bool,
        typer.Option("--details", "-d", help="List every day with miqaats below the grid"),
    ] = False,
) -> None:
    """Display a Hijri month grid.

    Examples:
        miqaat-cal month                      # Current month
        miqaat-cal month -y 1446 -m 1         # Moharram 1446
        miqaat-cal month -o 1                 # Next month
        miqaat-cal month --monday --arabic    # ISO weeks, Arabic digits
    """
    ctx = get_context()
    week_start = WeekStart.MONDAY if monday else None
    calendar = ctx.calendar(year, to_month_index(month), week_start=week_start)
    for _ in range(abs(offset)):
        calendar = calendar.next_month() if offset > 0 else calendar.previous_month()

    GridRenderer(arabic=arabic).render(calendar)

    if details:
        renderer = MiqaatRenderer()
        days = [d for d in calendar.month_days() if d.has_miqaats or d.has_daily_duas]
        if not days:
            console.print("\n[dim]No miqaats this month[/dim]")
        for day in days:
            renderer.render_day(day)

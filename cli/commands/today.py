"""Show today's Hijri date, month grid and miqaats."""

import typer
from typing_extensions import Annotated

from cli.context import get_context
from cli.display import GridRenderer, MiqaatRenderer, console, format_hijri
from cli.utils import handle_errors


@handle_errors
def today(
    arabic: Annotated[
        bool,
        typer.Option("--arabic", "-a", help="Show day numbers in Arabic-Indic digits"),
    ] = False,
    no_grid: Annotated[
        bool,
        typer.Option("--no-grid", help="Only print today's date and miqaats"),
    ] = False,
) -> None:
    """Show today's Hijri date with the current month.

    Tonight's miqaats are listed with today, since the night of a date
    begins on the previous evening.
    """
    calendar = get_context().calendar()

    if not no_grid:
        GridRenderer(arabic=arabic).render(calendar)

    current = next((day for day in calendar.month_days() if day.is_today), None)
    if current is None:
        # Only reachable when the current year is outside the configured range
        console.print("[yellow]Today is outside the configured calendar range[/yellow]")
        raise typer.Exit(1)

    console.print(f"\nToday is [bold]{format_hijri(current.date, arabic=arabic)}[/bold]")
    MiqaatRenderer().render_day(current)

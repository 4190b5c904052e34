"""Manage stored miqaat records."""

import logging

import typer
from typing_extensions import Annotated

from cli.context import get_context
from cli.display import MiqaatRenderer, console, format_slot
from cli.utils import handle_errors
from miqaat.miqaat_query import MiqaatQuery
from miqaat.models.miqaat import Phase

logger = logging.getLogger(__name__)

app = typer.Typer(help="List, show, add and delete miqaats", no_args_is_help=True)


@app.command("list")
@handle_errors
def list_command(
    month: Annotated[
        int | None,
        typer.Option("--month", "-m", help="Only miqaats with a slot in Hijri month 1-12"),
    ] = None,
    incomplete: Annotated[
        bool,
        typer.Option("--incomplete", help="Only miqaats that cannot be placed on the calendar"),
    ] = False,
) -> None:
    """List stored miqaats in calendar order."""
    cal_query = MiqaatQuery(get_context().miqaats.list())

    if incomplete:
        miqaats = cal_query.unrenderable()
    elif month is not None:
        miqaats = cal_query.for_month(month)
    else:
        miqaats = cal_query.search()

    MiqaatRenderer().render_table(miqaats)


@app.command("show")
@handle_errors
def show_command(
    miqaat_id: Annotated[int, typer.Argument(help="Miqaat id")],
) -> None:
    """Show one miqaat."""
    miqaat = get_context().miqaats.get(miqaat_id)

    title = f"[bold cyan]{miqaat.name}[/bold cyan]"
    if miqaat.important:
        title += " [red]![/red]"
    console.print(title)
    if miqaat.description:
        console.print(f"  {miqaat.description}")
    console.print(f"  Day:       {format_slot(miqaat.date, miqaat.month)}")
    console.print(f"  Night:     {format_slot(miqaat.date_night, miqaat.month_night)}")
    console.print(f"  Type:      {miqaat.type.value if miqaat.type else '-'}")
    console.print(f"  Phase:     {miqaat.phase.value}")
    if miqaat.location:
        console.print(f"  Location:  {miqaat.location}")
    if miqaat.priority is not None:
        console.print(f"  Priority:  {miqaat.priority}")
    if not miqaat.is_renderable:
        console.print("  [yellow]No complete day or night slot; not shown on the calendar[/yellow]")


@app.command("add")
@handle_errors
def add_command(
    name: Annotated[str, typer.Argument(help="Miqaat name")],
    date: Annotated[
        int | None, typer.Option("--date", "-d", help="Day of the day slot")
    ] = None,
    month: Annotated[
        int | None, typer.Option("--month", "-m", help="Month 1-12 of the day slot")
    ] = None,
    date_night: Annotated[
        int | None, typer.Option("--night-date", help="Day of the night slot")
    ] = None,
    month_night: Annotated[
        int | None, typer.Option("--night-month", help="Month 1-12 of the night slot")
    ] = None,
    miqaat_type: Annotated[
        str | None, typer.Option("--type", "-t", help="Miqaat type (e.g. URS, EID)")
    ] = None,
    phase: Annotated[
        Phase, typer.Option("--phase", help="Whether the miqaat is observed by day or night")
    ] = Phase.DAY,
    description: Annotated[
        str | None, typer.Option("--description", help="Longer description")
    ] = None,
    location: Annotated[
        str | None, typer.Option("--location", "-l", help="Location")
    ] = None,
    priority: Annotated[
        int | None, typer.Option("--priority", help="Sort order within a day")
    ] = None,
    important: Annotated[
        bool, typer.Option("--important", "-i", help="Mark as important")
    ] = False,
) -> None:
    """Add a miqaat.

    Examples:
        miqaat-cal miqaats add "Ashura" -d 10 -m 1 --night-date 10 --night-month 1 -i
        miqaat-cal miqaats add "Lailat al-Qadr" --night-date 23 --night-month 9 --phase NIGHT
    """
    miqaat = get_context().miqaats.create(
        {
            "name": name,
            "description": description,
            "date": date,
            "month": month,
            "date_night": date_night,
            "month_night": month_night,
            "location": location,
            "type": miqaat_type,
            "phase": phase,
            "priority": priority,
            "important": important,
        }
    )
    console.print(f"[green]✓[/green] Added miqaat {miqaat.id}: {miqaat.name}")
    if not miqaat.is_renderable:
        console.print("[yellow]  Warning: no complete day or night slot[/yellow]")


@app.command("delete")
@handle_errors
def delete_command(
    miqaat_id: Annotated[int, typer.Argument(help="Miqaat id")],
    force: Annotated[
        bool, typer.Option("--force", "-f", help="Delete without confirmation")
    ] = False,
) -> None:
    """Delete a miqaat."""
    repository = get_context().miqaats
    miqaat = repository.get(miqaat_id)

    if not force and not typer.confirm(f"Delete '{miqaat.name}'?"):
        console.print("Aborted")
        raise typer.Exit(0)

    repository.delete(miqaat_id)
    console.print(f"[green]✓[/green] Deleted miqaat {miqaat_id}")

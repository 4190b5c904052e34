"""Export a Hijri year of miqaats as ICS or JSON."""

import logging
from enum import Enum
from pathlib import Path

import typer
from typing_extensions import Annotated

from cli.context import get_context
from cli.display import MiqaatRenderer, console
from cli.utils import handle_errors
from miqaat.models.hijri import HijriDate
from miqaat.occurrences import year_occurrences
from miqaat.output import setup_writer

logger = logging.getLogger(__name__)


class ExportFormat(str, Enum):
    ics = "ics"
    json = "json"


@handle_errors
def export(
    year: Annotated[
        int | None,
        typer.Argument(help="Hijri year to export (default: current)"),
    ] = None,
    output_format: Annotated[
        ExportFormat,
        typer.Option("--format", "-f", help="Output format"),
    ] = ExportFormat.ics,
    output: Annotated[
        str | None,
        typer.Option("--output", "-o", help="Output file (default: miqaat-<year>.<ext>)"),
    ] = None,
    preview: Annotated[
        bool,
        typer.Option("--preview", "-p", help="Print the occurrences without writing"),
    ] = False,
) -> None:
    """Export every miqaat occurrence of a Hijri year.

    Night miqaats are dated on the evening they begin. Miqaats without a
    complete day or night slot are skipped.

    Examples:
        miqaat-cal export                     # Current year as ICS
        miqaat-cal export 1446 -f json
        miqaat-cal export 1446 -o ~/miqaat.ics
    """
    ctx = get_context()
    config = ctx.config

    if year is None:
        year = HijriDate.today().year
    if not config.min_year <= year <= config.max_year:
        raise typer.BadParameter(
            f"Year must be between {config.min_year} and {config.max_year}"
        )

    occurrences = year_occurrences(year, ctx.miqaats.list())
    if preview:
        MiqaatRenderer().render_occurrences(occurrences)
        return

    writer = setup_writer(output_format.value)
    path = Path(output or f"miqaat-{year}.{writer.get_extension()}").expanduser()
    writer.write(occurrences, path, name=f"Miqaats {year}H")

    logger.info(f"Exported {len(occurrences)} occurrences to {path}")
    console.print(f"[green]✓[/green] Exported {len(occurrences)} occurrences")
    console.print(f"  {path.resolve()}")

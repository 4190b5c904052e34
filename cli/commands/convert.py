"""Convert dates between the Gregorian and Hijri calendars."""

import logging
from datetime import date

import typer
from typing_extensions import Annotated

from cli.display import console, format_gregorian, format_hijri
from cli.utils import handle_errors, parse_gregorian, parse_hijri
from miqaat.models.hijri import HijriDate

logger = logging.getLogger(__name__)


@handle_errors
def convert(
    value: Annotated[
        str | None,
        typer.Argument(help="Date to convert (default: today)"),
    ] = None,
    from_hijri: Annotated[
        bool,
        typer.Option(
            "--from-hijri", "-H", help="Treat the value as a Hijri YEAR-MONTH-DAY date"
        ),
    ] = False,
    arabic: Annotated[
        bool,
        typer.Option("--arabic", "-a", help="Show the Hijri date in Arabic-Indic digits"),
    ] = False,
) -> None:
    """Convert a Gregorian date to Hijri, or back with --from-hijri.

    Hijri months are written one-based (1 = Moharram).

    Examples:
        miqaat-cal convert                        # Today
        miqaat-cal convert 2024-07-16             # 10 Moharram 1446
        miqaat-cal convert -H 1446-1-10           # 2024-07-16
    """
    if from_hijri:
        if value is None:
            raise typer.BadParameter("A Hijri date is required with --from-hijri")
        hijri = parse_hijri(value)
        gregorian = hijri.to_gregorian()
    else:
        gregorian = parse_gregorian(value) if value else date.today()
        hijri = HijriDate.from_gregorian(gregorian)

    logger.info(f"Converted {value or 'today'} to {hijri.key} / {gregorian.isoformat()}")
    console.print(
        f"[bold]{format_hijri(hijri, arabic=arabic)}[/bold]  "
        f"[dim]=[/dim]  {format_gregorian(gregorian)} ({gregorian.isoformat()})"
    )

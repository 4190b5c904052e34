"""Import miqaats and daily duas from a JSON or CSV file."""

import logging
from pathlib import Path

import typer
from typing_extensions import Annotated

from cli.context import get_context
from cli.display import MiqaatRenderer, console
from cli.utils import handle_errors

logger = logging.getLogger(__name__)


@handle_errors
def import_command(
    data_file: Annotated[
        str,
        typer.Argument(help="Path to a .json or .csv file"),
    ],
    replace: Annotated[
        bool,
        typer.Option(
            "--replace", "-r", help="Replace stored records instead of appending"
        ),
    ] = False,
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", "-n", help="Show what would be imported without saving"),
    ] = False,
) -> None:
    """Import miqaats and daily duas.

    JSON files hold either a list of miqaats or an object with "miqaats"
    and "daily_duas" lists. CSV files hold miqaats only; rows without a
    name or with invalid values are skipped and counted.

    Examples:
        miqaat-cal import miqaats.csv
        miqaat-cal import export.json --replace
        miqaat-cal import miqaats.csv --dry-run
    """
    ctx = get_context()

    input_path = Path(data_file).expanduser().resolve()
    if not input_path.exists():
        console.print(f"[red]File not found: {input_path}[/red]")
        raise typer.Exit(1)

    reader = ctx.reader_registry.get_reader(input_path)
    result = reader.read(input_path)
    logger.info(
        f"Read {len(result.miqaats)} miqaats and {len(result.daily_duas)} daily duas "
        f"from {input_path.name} ({result.skipped} skipped)"
    )

    if dry_run:
        MiqaatRenderer().render_table(result.miqaats, title="Would import")
        _print_summary(len(result.miqaats), len(result.daily_duas), result.skipped)
        return

    if replace:
        miqaats = ctx.miqaats.replace_all(result.miqaats)
        daily_duas = ctx.daily_duas.replace_all(result.daily_duas)
    else:
        miqaats = ctx.miqaats.create_many(result.miqaats)
        daily_duas = ctx.daily_duas.create_many(result.daily_duas)

    console.print(f"[green]✓[/green] Imported {input_path.name}")
    _print_summary(len(miqaats), len(daily_duas), result.skipped)


def _print_summary(miqaats: int, daily_duas: int, skipped: int) -> None:
    console.print(f"  Miqaats:     {miqaats}")
    console.print(f"  Daily duas:  {daily_duas}")
    if skipped:
        console.print(f"  [yellow]Skipped:     {skipped}[/yellow]")

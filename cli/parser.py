"""CLI application and command routing."""

import typer
from typing_extensions import Annotated

from cli import setup_logging
from cli.commands import (
    convert,
    export,
    import_command,
    miqaats,
    month,
    search,
    select,
    today,
)
from cli.context import CLIContext, set_context

app = typer.Typer(
    name="miqaat-cal",
    help="Hijri calendar with miqaats, daily duas and calendar export.",
    no_args_is_help=True,
    pretty_exceptions_enable=False,
)


@app.callback()
def main_callback(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show info-level log messages"),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Only show errors"),
    ] = False,
) -> None:
    """Hijri calendar with miqaats, daily duas and calendar export."""
    ctx = CLIContext(verbose=verbose, quiet=quiet)
    setup_logging(verbose=verbose, quiet=quiet, config=ctx.config)
    set_context(ctx)


app.command()(month)
app.command()(today)
app.command()(convert)
app.command()(search)
app.command()(select)
app.command("import")(import_command)
app.command()(export)
app.add_typer(miqaats.app, name="miqaats")

"""CLI commands package."""

from cli.commands import miqaats
from cli.commands.convert import convert
from cli.commands.export import export
from cli.commands.ingest import import_command
from cli.commands.month import month
from cli.commands.search import search
from cli.commands.select import select
from cli.commands.today import today

__all__ = [
    "convert",
    "export",
    "import_command",
    "miqaats",
    "month",
    "search",
    "select",
    "today",
]

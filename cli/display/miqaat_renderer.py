"""Miqaat list and day detail renderer."""

from rich.console import Console
from rich.table import Table

from cli.display.console import console as shared_console
from cli.display.formatters import format_gregorian, format_hijri, format_slot
from miqaat.miqaat_query import Page
from miqaat.models.calendar import CalendarDay
from miqaat.models.miqaat import Miqaat
from miqaat.occurrences import Occurrence


class MiqaatRenderer:
    """Render miqaat records, day details and exported occurrences."""

    def __init__(self, console: Console | None = None):
        self.console = console or shared_console

    def render_table(self, miqaats: list[Miqaat], title: str | None = None) -> None:
        """Render miqaats as a table."""
        if not miqaats:
            self.render_empty()
            return

        table = Table(title=title, show_header=True, header_style="bold", box=None, padding=(0, 2))
        table.add_column("ID", justify="right", style="dim")
        table.add_column("NAME", style="cyan")
        table.add_column("DAY", justify="right")
        table.add_column("NIGHT", justify="right")
        table.add_column("TYPE", style="dim")
        table.add_column("PHASE", style="dim")

        for miqaat in miqaats:
            name = miqaat.name
            if miqaat.important:
                name += " [red]![/red]"
            table.add_row(
                str(miqaat.id) if miqaat.id is not None else "-",
                name,
                format_slot(miqaat.date, miqaat.month),
                format_slot(miqaat.date_night, miqaat.month_night),
                miqaat.type.value if miqaat.type else "-",
                miqaat.phase.value,
            )

        self.console.print(table)

    def render_page(self, page: Page, title: str | None = None) -> None:
        """Render one page of results with a footer."""
        self.render_table(page.data, title=title)
        if page.total:
            self.console.print(
                f"[dim]Page {page.page}/{page.total_pages} · {page.total} miqaats[/dim]"
            )

    def render_day(self, day: CalendarDay) -> None:
        """Render everything attached to one calendar day."""
        self.console.print()
        self.console.print(
            f"[bold]{format_hijri(day.date)}[/bold]  [dim]{format_gregorian(day.gregorian)}[/dim]"
        )
        if not (day.has_miqaats or day.has_daily_duas):
            self.console.print("[dim]  Nothing scheduled[/dim]")
            return

        for miqaat in day.miqaats:
            self.console.print(f"  [magenta]{miqaat.name}[/magenta]")
            if miqaat.description:
                self.console.print(f"    [dim]{miqaat.description}[/dim]")
        for miqaat in day.night_miqaats:
            self.console.print(f"  [blue]☾ {miqaat.name}[/blue] [dim](night)[/dim]")
        for dua in day.daily_duas:
            self.console.print(f"  [green]📖 {dua.title}[/green]")

    def render_occurrences(self, occurrences: list[Occurrence]) -> None:
        """Render exported occurrences as a table."""
        if not occurrences:
            self.render_empty("No occurrences")
            return

        table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
        table.add_column("DATE", style="dim")
        table.add_column("HIJRI")
        table.add_column("MIQAAT", style="cyan")
        for o in occurrences:
            table.add_row(
                o.gregorian.isoformat(),
                f"{o.hijri_day}/{o.hijri_month}",
                o.title,
            )
        self.console.print(table)

    def render_empty(self, message: str | None = None) -> None:
        """Render an empty state message."""
        msg = message or "No miqaats found"
        self.console.print(f"\n[dim]{msg}[/dim]\n")

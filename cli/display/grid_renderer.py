"""Month grid renderer for terminal display."""

from typing import AbstractSet

from rich.console import Console
from rich.table import Table
from rich.text import Text

from cli.display.console import console as shared_console
from cli.display.formatters import format_miqaat_label
from miqaat.calendar import Calendar
from miqaat.models.calendar import CalendarDay

MAX_MIQAATS_PER_CELL = 2


class GridRenderer:
    """Render a Hijri month as a Rich table, one column per weekday.

    Cell styling:
    - Hijri day: bold (reverse when today)
    - Gregorian day: dim
    - Miqaats: magenta, important ones red
    - Night miqaats: blue, prefixed with a moon
    - Daily duas: green
    - Filler days from adjacent months: dim throughout
    """

    def __init__(self, console: Console | None = None, arabic: bool = False):
        """Initialize the renderer.

        Args:
            console: Rich Console instance (uses shared console if not provided).
            arabic: Show Hijri day numbers in Arabic-Indic digits.
        """
        self.console = console or shared_console
        self.arabic = arabic

    def render(
        self, calendar: Calendar, selected: AbstractSet[str] = frozenset()
    ) -> None:
        """Render the month grid.

        Args:
            calendar: Calendar to render.
            selected: Selection keys to highlight.
        """
        title = f"{calendar.month_name} {calendar.year}"
        table = Table(
            title=f"[bold]{title}[/bold]",
            caption=calendar.gregorian_label,
            show_lines=True,
            expand=True,
        )
        for name in calendar.weekday_names:
            table.add_column(name, justify="left", vertical="top", ratio=1)

        for week in calendar.weeks():
            table.add_row(*(self._render_cell(day, day.key in selected) for day in week))

        self.console.print(table)

    def _render_cell(self, day: CalendarDay, is_selected: bool) -> Text:
        cell = Text()
        number = day.date.to_arabic() if self.arabic else str(day.date.day)

        if day.filler:
            cell.append(f"{number}", style="dim")
            cell.append(f"  {day.gregorian.day}", style="dim")
            return cell

        day_style = "bold reverse" if day.is_today else "bold"
        if is_selected:
            day_style += " underline"
        cell.append(number, style=day_style)
        cell.append(f"  {day.gregorian:%d %b}", style="dim")

        labels = [(m, False) for m in day.miqaats] + [(m, True) for m in day.night_miqaats]
        for miqaat, night in labels[:MAX_MIQAATS_PER_CELL]:
            if night:
                style = "blue"
            else:
                style = "red" if miqaat.important else "magenta"
            cell.append("\n" + format_miqaat_label(miqaat, night=night), style=style)
        if len(labels) > MAX_MIQAATS_PER_CELL:
            cell.append(f"\n+{len(labels) - MAX_MIQAATS_PER_CELL} more", style="dim")

        if day.daily_duas:
            cell.append(f"\n📖 {day.daily_duas[0].title}", style="green")
            if len(day.daily_duas) > 1:
                cell.append(f" +{len(day.daily_duas) - 1}", style="dim")

        return cell

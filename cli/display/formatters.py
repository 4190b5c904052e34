"""Pure formatting functions for display output."""

from datetime import date

from miqaat.models.hijri import HijriDate
from miqaat.models.miqaat import Miqaat


def format_hijri(day: HijriDate, arabic: bool = False) -> str:
    """Format a Hijri date.

    Args:
        day: Date to format.
        arabic: Use Arabic-Indic digits for the day.

    Returns:
        Formatted string (e.g., "10 Moharram 1446", "١٠ Moharram 1446").
    """
    number = day.to_arabic() if arabic else str(day.day)
    return f"{number} {day.short_month_name} {day.year}"


def format_gregorian(value: date) -> str:
    """Format a Gregorian date (e.g., "Tue Jul 16, 2024")."""
    return value.strftime("%a %b %d, %Y")


def format_slot(day: int | None, month: int | None) -> str:
    """Format a one-based day/month slot (e.g., "10/1"), or "-" if unset."""
    if day is None or month is None:
        return "-"
    return f"{day}/{month}"


def format_miqaat_label(miqaat: Miqaat, night: bool = False, width: int = 14) -> str:
    """Short grid label for a miqaat.

    Args:
        miqaat: Miqaat to label.
        night: Prefix with a moon marker for night slots.
        width: Maximum label width.

    Returns:
        Truncated label, with "!" appended for important miqaats.
    """
    label = miqaat.name
    if miqaat.important:
        label += "!"
    if night:
        label = f"☾ {label}"
    if len(label) > width:
        label = label[: width - 1] + "…"
    return label

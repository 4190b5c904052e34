"""Selection key sets for bulk actions on calendar days.

A selection is a frozenset of ``day-month-year`` keys owned by the caller.
These helpers only build new sets; none of them mutates its input.
"""

from typing import AbstractSet

from miqaat.calendar import Calendar
from miqaat.models.hijri import HijriDate, days_in_year

Selection = frozenset[str]


def month_keys(calendar: Calendar) -> Selection:
    """Keys for every cell of the calendar's grid."""
    return frozenset(day.key for day in calendar.days())


def year_keys(year: int) -> Selection:
    """Keys for every day of a Hijri year."""
    first = HijriDate(year, 0, 1)
    return frozenset(first.add_days(offset).key for offset in range(days_in_year(year)))


def range_keys(start_key: str, end_key: str) -> Selection:
    """Keys for every day between two keys, inclusive, in either order.

    Raises:
        ValidationError: If either key is malformed.
    """
    start = HijriDate.from_key(start_key)
    end = HijriDate.from_key(end_key)
    if end < start:
        start, end = end, start
    span = end.toordinal() - start.toordinal()
    return frozenset(start.add_days(offset).key for offset in range(span + 1))


def toggle(selection: AbstractSet[str], key: str) -> Selection:
    """Copy of ``selection`` with ``key`` added, or removed if present."""
    if key in selection:
        return frozenset(selection - {key})
    return frozenset(selection | {key})


def extend(selection: AbstractSet[str], keys: AbstractSet[str]) -> Selection:
    """Union of a selection and new keys."""
    return frozenset(selection | keys)


def selected_dates(selection: AbstractSet[str]) -> list[HijriDate]:
    """Selected keys as sorted Hijri dates.

    Raises:
        ValidationError: If a key is malformed.
    """
    return sorted(HijriDate.from_key(key) for key in selection)

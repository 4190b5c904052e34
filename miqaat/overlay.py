"""Attach miqaats and daily duas to Hijri days.

Miqaats store one-based months while ``HijriDate.month`` is zero-based, so
miqaat comparisons go through ``month + 1``. Daily duas store zero-based
months and compare directly.

The night of a Hijri date precedes that date: the night of the 10th is the
evening of the 9th. A night slot ``(date_night, month_night)`` is therefore
shown on the cell whose following day is that date.
"""

import logging
from typing import Iterable

from miqaat.models.daily_dua import DailyDua
from miqaat.models.hijri import HijriDate
from miqaat.models.miqaat import Miqaat

logger = logging.getLogger(__name__)


def day_miqaats(day: HijriDate, miqaats: Iterable[Miqaat]) -> list[Miqaat]:
    """Miqaats whose day slot falls on ``day``."""
    matching = [m for m in miqaats if m.matches_day(day.day, day.month + 1)]
    for miqaat in matching:
        logger.debug(f"Miqaat match: {miqaat.name} on {day.formatted()}")
    return matching


def night_miqaats(day: HijriDate, miqaats: Iterable[Miqaat]) -> list[Miqaat]:
    """Miqaats whose night slot falls on the evening of ``day``."""
    following = day.add_days(1)
    matching = [
        m for m in miqaats if m.matches_night(following.day, following.month + 1)
    ]
    for miqaat in matching:
        logger.debug(
            f"Night miqaat match: {miqaat.name} on eve of {following.formatted()}"
        )
    return matching


def daily_duas_for(day: HijriDate, daily_duas: Iterable[DailyDua]) -> list[DailyDua]:
    """Daily duas assigned to ``day`` (both months zero-based)."""
    return [d for d in daily_duas if d.matches(day.day, day.month)]


def night_cell_for(date_night: int, month_night: int, year: int) -> HijriDate:
    """Cell that carries the night of ``date_night``/``month_night`` in ``year``.

    Args:
        date_night: Day of the night slot (1-30).
        month_night: One-based month of the night slot.
        year: Hijri year.

    Returns:
        The day before the night's date (may fall in the previous month or year).
    """
    return HijriDate(year, month_night - 1, date_night).add_days(-1)

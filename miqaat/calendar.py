"""Hijri month grid with miqaat overlay and immutable navigation."""

import logging
from datetime import date
from typing import Iterable, Sequence

from miqaat.config import WeekStart
from miqaat.constants import ISO_WEEKDAYS, MAX_CALENDAR_YEAR, MIN_CALENDAR_YEAR, WEEKDAYS
from miqaat.exceptions import ValidationError
from miqaat.models.calendar import CalendarDay, CalendarState
from miqaat.models.daily_dua import DailyDua
from miqaat.models.hijri import HijriDate, LONG_NAMES, SHORT_NAMES, days_in_month
from miqaat.models.miqaat import Miqaat
from miqaat.overlay import daily_duas_for, day_miqaats, night_miqaats

logger = logging.getLogger(__name__)


class Calendar:
    """A Hijri month laid out as a 7-column grid.

    Out-of-range input is clamped rather than rejected: the month to 0-11
    and the year to ``[min_year, max_year]``. Navigation returns a new
    Calendar carrying the same events and settings; an instance is never
    modified after construction.
    """

    def __init__(
        self,
        year: int | None = None,
        month: int | None = None,
        miqaats: Iterable[Miqaat] = (),
        daily_duas: Iterable[DailyDua] = (),
        week_start: WeekStart = WeekStart.SUNDAY,
        today: date | None = None,
        min_year: int = MIN_CALENDAR_YEAR,
        max_year: int = MAX_CALENDAR_YEAR,
    ):
        """Initialize the calendar.

        Args:
            year: Hijri year (defaults to the current Hijri year).
            month: Zero-based Hijri month (defaults to the current month).
            miqaats: Miqaats to overlay.
            daily_duas: Daily duas to overlay.
            week_start: First column of the grid.
            today: Reference Gregorian date for "today" (defaults to date.today()).
            min_year: Lowest navigable year.
            max_year: Highest navigable year.

        Raises:
            ValidationError: If min_year is greater than max_year.
        """
        if min_year > max_year:
            raise ValidationError(f"min_year {min_year} is greater than max_year {max_year}")
        self.min_year = min_year
        self.max_year = max_year
        self.week_start = WeekStart(week_start)
        self.miqaats: tuple[Miqaat, ...] = tuple(miqaats)
        self.daily_duas: tuple[DailyDua, ...] = tuple(daily_duas)
        self._today = today

        now = HijriDate.today(today)
        self._now = now
        requested_year = now.year if year is None else year
        requested_month = now.month if month is None else month

        self.year = min(max(requested_year, min_year), max_year)
        self.month = min(max(requested_month, 0), 11)
        if (self.year, self.month) != (requested_year, requested_month):
            logger.debug(
                f"Clamped calendar ({requested_year}, {requested_month}) "
                f"to ({self.year}, {self.month})"
            )

    # ─────────────────────────────────────────────────────────────────────────
    # State
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def state(self) -> CalendarState:
        return CalendarState(year=self.year, month=self.month)

    @property
    def first_day(self) -> HijriDate:
        return HijriDate(self.year, self.month, 1)

    @property
    def last_day(self) -> HijriDate:
        return HijriDate(self.year, self.month, days_in_month(self.year, self.month))

    @property
    def month_name(self) -> str:
        return LONG_NAMES[self.month]

    @property
    def short_month_name(self) -> str:
        return SHORT_NAMES[self.month]

    @property
    def weekday_names(self) -> list[str]:
        """Column headers in grid order."""
        if self.week_start == WeekStart.MONDAY:
            return list(ISO_WEEKDAYS)
        return list(WEEKDAYS)

    @property
    def gregorian_label(self) -> str:
        """Gregorian month(s) spanned by this Hijri month.

        Returns:
            ``"July 2024"``, ``"July / August 2024"`` or
            ``"December 2024 / January 2025"``.
        """
        first = self.first_day.to_gregorian()
        last = self.last_day.to_gregorian()

        if first.year != last.year:
            return f"{first:%B %Y} / {last:%B %Y}"
        if first.month != last.month:
            return f"{first:%B} / {last:%B} {first.year}"
        return f"{first:%B %Y}"

    def day_of_week(self, day: HijriDate) -> int:
        """Grid column (0-6) of a Hijri date."""
        gregorian = day.to_gregorian()
        if self.week_start == WeekStart.MONDAY:
            return gregorian.weekday()
        return gregorian.isoweekday() % 7

    # ─────────────────────────────────────────────────────────────────────────
    # Grid
    # ─────────────────────────────────────────────────────────────────────────

    def month_days(self) -> list[CalendarDay]:
        """Days of the current month only."""
        length = days_in_month(self.year, self.month)
        return [
            self._make_day(HijriDate(self.year, self.month, day), filler=False)
            for day in range(1, length + 1)
        ]

    def days(self) -> list[CalendarDay]:
        """Full display grid, padded with neighbouring days to whole weeks.

        Leading cells come from the end of the previous month and trailing
        cells from the start of the next one, so the length is always a
        multiple of 7.
        """
        leading = self.day_of_week(self.first_day)
        trailing = 6 - self.day_of_week(self.last_day)

        first = self.first_day
        before = [
            self._make_day(first.add_days(offset), filler=True)
            for offset in range(-leading, 0)
        ]
        last = self.last_day
        after = [
            self._make_day(last.add_days(offset), filler=True)
            for offset in range(1, trailing + 1)
        ]
        return before + self.month_days() + after

    def weeks(self) -> list[list[CalendarDay]]:
        """Grid split into rows of 7."""
        days = self.days()
        return [days[i : i + 7] for i in range(0, len(days), 7)]

    def _make_day(self, day: HijriDate, filler: bool) -> CalendarDay:
        return CalendarDay(
            date=day,
            gregorian=day.to_gregorian(),
            is_current_month=not filler,
            is_today=day == self._now,
            filler=filler,
            miqaats=day_miqaats(day, self.miqaats),
            night_miqaats=night_miqaats(day, self.miqaats),
            daily_duas=daily_duas_for(day, self.daily_duas),
        )

    # ─────────────────────────────────────────────────────────────────────────
    # Navigation
    # ─────────────────────────────────────────────────────────────────────────

    def previous_month(self) -> "Calendar":
        return self._move_months(-1)

    def next_month(self) -> "Calendar":
        return self._move_months(1)

    def previous_year(self) -> "Calendar":
        return self._copy(self.year - 1, self.month)

    def next_year(self) -> "Calendar":
        return self._copy(self.year + 1, self.month)

    def today(self) -> "Calendar":
        """Calendar for the current Hijri month with the same events."""
        return self._copy(self._now.year, self._now.month)

    def with_events(
        self,
        miqaats: Sequence[Miqaat] | None = None,
        daily_duas: Sequence[DailyDua] | None = None,
    ) -> "Calendar":
        """Same month with replaced event lists."""
        return self._copy(self.year, self.month, miqaats, daily_duas)

    def _move_months(self, delta: int) -> "Calendar":
        index = self.year * 12 + self.month + delta
        index = min(max(index, self.min_year * 12), self.max_year * 12 + 11)
        year, month = divmod(index, 12)
        return self._copy(year, month)

    def _copy(
        self,
        year: int,
        month: int,
        miqaats: Sequence[Miqaat] | None = None,
        daily_duas: Sequence[DailyDua] | None = None,
    ) -> "Calendar":
        return Calendar(
            year=year,
            month=month,
            miqaats=self.miqaats if miqaats is None else miqaats,
            daily_duas=self.daily_duas if daily_duas is None else daily_duas,
            week_start=self.week_start,
            today=self._today,
            min_year=self.min_year,
            max_year=self.max_year,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Calendar):
            return NotImplemented
        return (
            self.state == other.state
            and self.week_start == other.week_start
            and self.miqaats == other.miqaats
            and self.daily_duas == other.daily_duas
        )

    def __repr__(self) -> str:
        return f"Calendar(year={self.year}, month={self.month})"

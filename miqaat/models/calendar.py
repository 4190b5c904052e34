"""Calendar view values: the navigable state and the derived grid cell."""

from dataclasses import dataclass, field
from datetime import date

from miqaat.models.daily_dua import DailyDua
from miqaat.models.hijri import HijriDate
from miqaat.models.miqaat import Miqaat


@dataclass(frozen=True)
class CalendarState:
    """Hijri (year, month) shown by a calendar view. ``month`` is zero-based."""

    year: int
    month: int


@dataclass
class CalendarDay:
    """One cell of the month grid.

    ``miqaats`` holds day-slot matches for ``date``; ``night_miqaats`` holds
    miqaats whose night falls on the evening of this day.
    """

    date: HijriDate
    gregorian: date
    is_current_month: bool
    is_today: bool
    filler: bool
    miqaats: list[Miqaat] = field(default_factory=list)
    night_miqaats: list[Miqaat] = field(default_factory=list)
    daily_duas: list[DailyDua] = field(default_factory=list)

    @property
    def key(self) -> str:
        return self.date.key

    @property
    def has_miqaats(self) -> bool:
        return bool(self.miqaats or self.night_miqaats)

    @property
    def has_daily_duas(self) -> bool:
        return bool(self.daily_duas)

    @property
    def gregorian_label(self) -> str:
        """Gregorian day label, e.g. ``Sun Jul 07``."""
        return self.gregorian.strftime("%a %b %d")

    def to_dict(self) -> dict:
        """Convert to a JSON-ready dictionary."""
        return {
            "key": self.key,
            "hijri": {
                "day": self.date.day,
                "month": self.date.month,
                "year": self.date.year,
                "arabic": self.date.to_arabic(),
            },
            "gregorian": self.gregorian.isoformat(),
            "is_current_month": self.is_current_month,
            "is_today": self.is_today,
            "filler": self.filler,
            "miqaats": [m.model_dump(mode="json") for m in self.miqaats],
            "night_miqaats": [m.model_dump(mode="json") for m in self.night_miqaats],
            "daily_duas": [d.model_dump(mode="json") for d in self.daily_duas],
        }

"""Models for the miqaat calendar."""

from miqaat.models.calendar import CalendarDay, CalendarState
from miqaat.models.daily_dua import DailyDua, LibraryRef
from miqaat.models.hijri import HijriDate
from miqaat.models.miqaat import Miqaat, MiqaatType, Phase

__all__ = [
    "CalendarDay",
    "CalendarState",
    "DailyDua",
    "HijriDate",
    "LibraryRef",
    "Miqaat",
    "MiqaatType",
    "Phase",
]

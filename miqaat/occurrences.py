"""Resolve miqaats to Gregorian dates within a Hijri year."""

import logging
from datetime import date
from typing import Iterable, Optional

from pydantic import BaseModel

from miqaat.exceptions import ValidationError
from miqaat.models.hijri import HijriDate
from miqaat.models.miqaat import Miqaat, Phase
from miqaat.overlay import night_cell_for

logger = logging.getLogger(__name__)


class Occurrence(BaseModel):
    """A miqaat slot placed on a Gregorian date.

    For night slots ``gregorian`` is the evening on which the night begins,
    while ``hijri_day``/``hijri_month`` keep the night's own date.
    """

    miqaat_id: Optional[int] = None
    name: str
    description: Optional[str] = None
    location: Optional[str] = None
    important: bool = False
    phase: Phase
    hijri_year: int
    hijri_month: int
    hijri_day: int
    gregorian: date

    @property
    def title(self) -> str:
        if self.phase == Phase.NIGHT:
            return f"{self.name} (night)"
        return self.name


def year_occurrences(year: int, miqaats: Iterable[Miqaat]) -> list[Occurrence]:
    """Day and night occurrences of every miqaat in a Hijri year.

    Slots that do not exist in the year (e.g. day 30 of a 29-day month) are
    skipped with a warning.

    Returns:
        Occurrences sorted by Gregorian date, nights before days.
    """
    occurrences = []
    for miqaat in miqaats:
        if not miqaat.is_renderable:
            logger.warning(f"Skipping miqaat '{miqaat.name}': no day or night date")
            continue

        if miqaat.has_day_slot:
            try:
                day = HijriDate(year, miqaat.month - 1, miqaat.date)
            except ValidationError as e:
                logger.warning(f"Skipping day of '{miqaat.name}': {e}")
            else:
                occurrences.append(_occurrence(miqaat, Phase.DAY, day, day.to_gregorian()))

        if miqaat.has_night_slot:
            try:
                night = HijriDate(year, miqaat.month_night - 1, miqaat.date_night)
                evening = night_cell_for(miqaat.date_night, miqaat.month_night, year)
            except ValidationError as e:
                logger.warning(f"Skipping night of '{miqaat.name}': {e}")
            else:
                occurrences.append(
                    _occurrence(miqaat, Phase.NIGHT, night, evening.to_gregorian())
                )

    return sorted(
        occurrences, key=lambda o: (o.gregorian, o.phase != Phase.NIGHT, o.name)
    )


def _occurrence(miqaat: Miqaat, phase: Phase, day: HijriDate, gregorian: date) -> Occurrence:
    return Occurrence(
        miqaat_id=miqaat.id,
        name=miqaat.name,
        description=miqaat.description,
        location=miqaat.location,
        important=miqaat.important,
        phase=phase,
        hijri_year=day.year,
        hijri_month=day.month + 1,
        hijri_day=day.day,
        gregorian=gregorian,
    )

"""ICS file writer for miqaat occurrences."""

import uuid
from datetime import datetime, timedelta
from pathlib import Path

from icalendar import Calendar, Event

from miqaat.exceptions import ExportError
from miqaat.occurrences import Occurrence

UID_NAMESPACE = uuid.uuid5(uuid.NAMESPACE_DNS, "miqaat-calendar")


class ICSWriter:
    """Writer for ICS calendar files."""

    def write(self, occurrences: list[Occurrence], path: Path, name: str) -> None:
        """Write occurrences as all-day events.

        UIDs are derived from the miqaat, slot and Hijri date so that
        re-exporting a year updates rather than duplicates subscribed events.

        Raises:
            ExportError: If the file cannot be written.
        """
        content = self.to_ical(occurrences, name)
        try:
            path.write_bytes(content)
        except OSError as e:
            raise ExportError(f"Failed to write {path}: {e}") from e

    def to_ical(self, occurrences: list[Occurrence], name: str) -> bytes:
        """Build ICS content."""
        cal = Calendar()
        cal.add("prodid", "-//Miqaat Calendar//EN")
        cal.add("version", "2.0")
        cal.add("X-WR-CALNAME", name)

        for occurrence in occurrences:
            event = Event()
            event.add("summary", occurrence.title)
            event.add("uid", self._uid(occurrence))
            event.add("dtstamp", datetime.now())
            event.add("dtstart", occurrence.gregorian)
            # End date is exclusive in iCalendar
            event.add("dtend", occurrence.gregorian + timedelta(days=1))

            description = (
                f"{occurrence.hijri_day}/{occurrence.hijri_month}/{occurrence.hijri_year}H"
            )
            if occurrence.description:
                description = f"{occurrence.description}\n{description}"
            event.add("description", description)

            if occurrence.location:
                event.add("location", occurrence.location)
            if occurrence.important:
                event.add("priority", 1)

            cal.add_component(event)

        ical_content = cal.to_ical()
        if not ical_content:
            raise ExportError("Calendar.to_ical() returned empty content")
        return ical_content

    def _uid(self, occurrence: Occurrence) -> str:
        source = occurrence.miqaat_id if occurrence.miqaat_id is not None else occurrence.name
        seed = (
            f"{source}:{occurrence.phase.value}:"
            f"{occurrence.hijri_year}-{occurrence.hijri_month}-{occurrence.hijri_day}"
        )
        return f"{uuid.uuid5(UID_NAMESPACE, seed)}@miqaat-calendar"

    def get_extension(self) -> str:
        """Returns file extension."""
        return "ics"

"""Tests for year occurrences and output writers."""

import json
from datetime import date

import pytest
from icalendar import Calendar as ICalendar

from miqaat.exceptions import ExportError, UnsupportedFormatError
from miqaat.models.miqaat import Miqaat, Phase
from miqaat.occurrences import year_occurrences
from miqaat.output import setup_writer
from miqaat.output.ics_writer import ICSWriter
from miqaat.output.json_writer import JSONWriter


def test_year_occurrences(sample_miqaats):
    occurrences = year_occurrences(1446, sample_miqaats)
    summary = [(o.gregorian, o.title) for o in occurrences]
    assert summary == [
        (date(2024, 7, 15), "Ashura (night)"),
        (date(2024, 7, 16), "Ashura"),
        (date(2024, 9, 8), "Urs Mubarak"),
        (date(2025, 2, 27), "Pehli Raat (night)"),
    ]


def test_night_occurrence_keeps_hijri_date(sample_miqaats):
    night = next(o for o in year_occurrences(1446, sample_miqaats) if o.name == "Pehli Raat")
    assert night.phase == Phase.NIGHT
    assert (night.hijri_day, night.hijri_month, night.hijri_year) == (1, 9, 1446)


def test_missing_day_is_skipped():
    miqaat = Miqaat(name="Day 30", date=30, month=2)
    assert year_occurrences(1446, [miqaat]) == []


def test_setup_writer():
    assert isinstance(setup_writer("ics"), ICSWriter)
    assert isinstance(setup_writer("json"), JSONWriter)
    with pytest.raises(UnsupportedFormatError):
        setup_writer("docx")


def test_ics_writer(tmp_path, sample_miqaats):
    """Test ICSWriter creates valid ICS file."""
    occurrences = year_occurrences(1446, sample_miqaats)
    path = tmp_path / "miqaat.ics"
    ICSWriter().write(occurrences, path, name="Miqaats 1446H")

    cal = ICalendar.from_ical(path.read_bytes())
    assert str(cal.get("X-WR-CALNAME")) == "Miqaats 1446H"
    events = cal.walk("VEVENT")
    assert len(events) == 4

    ashura = next(e for e in events if str(e.get("summary")) == "Ashura")
    assert ashura.decoded("dtstart") == date(2024, 7, 16)
    assert ashura.decoded("dtend") == date(2024, 7, 17)
    assert "10/1/1446H" in str(ashura.get("description"))
    assert int(ashura.get("priority")) == 1

    urs = next(e for e in events if str(e.get("summary")) == "Urs Mubarak")
    assert str(urs.get("location")) == "Mumbai"


def test_ics_uids_are_stable(sample_miqaats):
    writer = ICSWriter()
    occurrences = year_occurrences(1446, sample_miqaats)
    first = [str(e.get("uid")) for e in ICalendar.from_ical(writer.to_ical(occurrences, "a")).walk("VEVENT")]
    second = [str(e.get("uid")) for e in ICalendar.from_ical(writer.to_ical(occurrences, "a")).walk("VEVENT")]
    assert first == second
    assert len(set(first)) == len(first)


def test_ics_writer_unwritable_path(tmp_path, sample_miqaats):
    with pytest.raises(ExportError):
        ICSWriter().write(year_occurrences(1446, sample_miqaats), tmp_path / "missing" / "x.ics", "x")


def test_json_writer(tmp_path, sample_miqaats):
    path = tmp_path / "miqaat.json"
    JSONWriter().write(year_occurrences(1446, sample_miqaats), path, name="Miqaats 1446H")

    data = json.loads(path.read_text(encoding="utf-8"))
    assert data["name"] == "Miqaats 1446H"
    assert data["occurrences"][0]["gregorian"] == "2024-07-15"
    assert data["occurrences"][0]["phase"] == "NIGHT"

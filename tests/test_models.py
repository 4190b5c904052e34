"""Tests for miqaat and daily dua models."""

import pytest
from pydantic import ValidationError

from miqaat.models.daily_dua import DailyDua, LibraryRef
from miqaat.models.miqaat import Miqaat, MiqaatType, Phase


def test_miqaat_defaults():
    miqaat = Miqaat(name="Majlis")
    assert miqaat.phase == Phase.DAY
    assert miqaat.type is None
    assert miqaat.important is False
    assert not miqaat.is_renderable


def test_miqaat_type_normalized():
    assert Miqaat(name="Urs", type="urs").type == MiqaatType.URS
    assert Miqaat(name="Urs", type="").type is None


def test_miqaat_phase_normalized():
    assert Miqaat(name="Raat", phase="night").phase == Phase.NIGHT
    assert Miqaat(name="Raat", phase="").phase == Phase.DAY


def test_miqaat_unknown_type_rejected():
    with pytest.raises(ValidationError):
        Miqaat(name="Urs", type="picnic")


@pytest.mark.parametrize("field, value", [("date", 0), ("date", 31), ("month", 13), ("month_night", 0)])
def test_miqaat_slot_ranges(field, value):
    with pytest.raises(ValidationError):
        Miqaat(name="Out of range", **{field: value})


def test_slots():
    miqaat = Miqaat(name="Ashura", date=10, month=1, date_night=10)
    assert miqaat.has_day_slot
    assert not miqaat.has_night_slot
    assert miqaat.is_renderable


def test_matches_use_one_based_months():
    miqaat = Miqaat(name="Ashura", date=10, month=1, date_night=10, month_night=1)
    assert miqaat.matches_day(10, 1)
    assert not miqaat.matches_day(10, 0)
    assert miqaat.matches_night(10, 1)
    assert not miqaat.matches_night(9, 1)


def test_daily_dua_title_and_match():
    dua = DailyDua(
        library_id=7,
        date=5,
        month=3,
        library=LibraryRef(id=7, name="Dua-e-Kamil"),
    )
    assert dua.title == "Dua-e-Kamil"
    assert dua.matches(5, 3)
    assert not dua.matches(5, 2)


def test_daily_dua_requires_date():
    with pytest.raises(ValidationError):
        DailyDua(library_id=1, date=0, month=1)


def test_daily_dua_month_range_is_zero_based():
    assert DailyDua(library_id=1, date=1, month=0).month == 0
    with pytest.raises(ValidationError):
        DailyDua(library_id=1, date=1, month=12)

"""Tests for the month grid, miqaat overlay and navigation."""

from datetime import date

import pytest

from miqaat.calendar import Calendar
from miqaat.config import WeekStart
from miqaat.exceptions import ValidationError
from miqaat.models.calendar import CalendarState
from miqaat.models.hijri import HijriDate
from miqaat.models.daily_dua import DailyDua
from miqaat.models.miqaat import Miqaat

# 10 Moharram 1446
TODAY = date(2024, 7, 16)


def cells_for(calendar, name, night=False):
    """Keys of the cells carrying a miqaat."""
    return [
        day.key
        for day in calendar.days()
        if any(m.name == name for m in (day.night_miqaats if night else day.miqaats))
    ]


def test_defaults_to_current_month():
    calendar = Calendar(today=TODAY)
    assert calendar.state == CalendarState(year=1446, month=0)


def test_grid_is_whole_weeks():
    for year in (1445, 1446, 1447):
        calendar = Calendar(year, 0, today=TODAY)
        for _ in range(12):
            assert len(calendar.days()) % 7 == 0
            assert all(len(week) == 7 for week in calendar.weeks())
            calendar = calendar.next_month()


def test_grid_is_whole_weeks_monday_start():
    calendar = Calendar(1446, 0, week_start=WeekStart.MONDAY, today=TODAY)
    for _ in range(12):
        assert len(calendar.days()) % 7 == 0
        calendar = calendar.next_month()


def test_moharram_1446_layout():
    """1 Moharram 1446 is a Sunday, so the grid has no leading filler."""
    calendar = Calendar(1446, 0, today=TODAY)
    days = calendar.days()
    assert days[0].date == HijriDate(1446, 0, 1)
    assert not days[0].filler
    assert len(days) == 35
    assert [d.filler for d in days].count(False) == 30


def test_monday_start_shifts_columns():
    calendar = Calendar(1446, 0, week_start=WeekStart.MONDAY, today=TODAY)
    assert calendar.weekday_names[0] == "Mon"
    assert calendar.day_of_week(HijriDate(1446, 0, 1)) == 6
    assert len(calendar.days()) == 42


def test_fillers_come_from_neighbouring_months():
    calendar = Calendar(1446, 1, today=TODAY)
    days = calendar.days()
    leading = [d for d in days if d.filler and d.date < calendar.first_day]
    trailing = [d for d in days if d.filler and d.date > calendar.last_day]
    assert leading[-1].date == HijriDate(1446, 0, 30)
    assert trailing[0].date == HijriDate(1446, 2, 1)
    assert all(not d.is_current_month for d in leading + trailing)


def test_month_days_excludes_fillers():
    calendar = Calendar(1446, 1, today=TODAY)
    month_days = calendar.month_days()
    assert len(month_days) == 29
    assert all(d.is_current_month and not d.filler for d in month_days)


def test_is_today():
    calendar = Calendar(1446, 0, today=TODAY)
    todays = [d for d in calendar.days() if d.is_today]
    assert [d.date for d in todays] == [HijriDate(1446, 0, 10)]


def test_day_miqaat_on_exactly_one_cell(sample_miqaats):
    calendar = Calendar(1446, 2, miqaats=sample_miqaats, today=TODAY)
    assert cells_for(calendar, "Urs Mubarak") == ["5-2-1446"]


def test_night_miqaat_on_previous_evening(sample_miqaats):
    """The night of 10 Moharram is shown on 9 Moharram."""
    calendar = Calendar(1446, 0, miqaats=sample_miqaats, today=TODAY)
    assert cells_for(calendar, "Ashura", night=True) == ["9-0-1446"]
    assert cells_for(calendar, "Ashura") == ["10-0-1446"]


def test_first_night_of_month_on_previous_month(sample_miqaats):
    """The night of 1 Ramadaan falls on the last day of Shabaan."""
    shabaan = Calendar(1446, 7, miqaats=sample_miqaats, today=TODAY)
    assert cells_for(shabaan, "Pehli Raat", night=True) == ["29-7-1446"]

    # Also visible on the leading filler of the Ramadaan grid
    ramadaan = shabaan.next_month()
    assert cells_for(ramadaan, "Pehli Raat", night=True) == ["29-7-1446"]


def test_night_rule_wraps_year():
    first_night = Miqaat(name="Raat", date_night=1, month_night=1)
    calendar = Calendar(1445, 11, miqaats=[first_night], today=TODAY)
    assert cells_for(calendar, "Raat", night=True) == ["30-11-1445"]


def test_incomplete_miqaat_never_shown(sample_miqaats):
    calendar = Calendar(1446, 0, miqaats=sample_miqaats, today=TODAY)
    for _ in range(12):
        assert cells_for(calendar, "Undated Majlis") == []
        calendar = calendar.next_month()


def test_day_30_in_short_month_is_not_shown():
    miqaat = Miqaat(name="Missing Day", date=30, month=2)
    calendar = Calendar(1446, 1, miqaats=[miqaat], today=TODAY)
    assert cells_for(calendar, "Missing Day") == []


def test_daily_duas_attach_by_date(sample_daily_duas):
    calendar = Calendar(1446, 2, daily_duas=sample_daily_duas, today=TODAY)
    matched = [d.key for d in calendar.days() if d.has_daily_duas]
    assert matched == ["5-2-1446"]


def test_daily_dua_month_is_zero_based():
    """A dua stored for 5 Safar (month 1) attaches to 5 Safar, not 5 Moharram."""
    dua = DailyDua(library_id=1, date=5, month=1)
    safar = Calendar(1446, 1, daily_duas=[dua], today=TODAY)
    assert [d.key for d in safar.days() if d.has_daily_duas] == ["5-1-1446"]

    moharram = Calendar(1446, 0, daily_duas=[dua], today=TODAY)
    assert [d.key for d in moharram.days() if d.has_daily_duas] == []


def test_daily_dua_in_moharram():
    dua = DailyDua.model_validate({"library_id": 1, "date": 5, "month": 0})
    calendar = Calendar(1446, 0, daily_duas=[dua], today=TODAY)
    assert [d.key for d in calendar.days() if d.has_daily_duas] == ["5-0-1446"]


def test_next_and_previous_month_round_trip():
    calendar = Calendar(1446, 5, today=TODAY)
    assert calendar.next_month().previous_month() == calendar
    assert calendar.previous_month().next_month() == calendar


def test_month_navigation_wraps_year():
    calendar = Calendar(1446, 11, today=TODAY)
    assert calendar.next_month().state == CalendarState(1447, 0)
    assert Calendar(1446, 0, today=TODAY).previous_month().state == CalendarState(1445, 11)


def test_year_navigation_keeps_month():
    calendar = Calendar(1446, 4, today=TODAY)
    assert calendar.next_year().state == CalendarState(1447, 4)
    assert calendar.previous_year().state == CalendarState(1445, 4)


def test_navigation_keeps_events_and_settings(sample_miqaats):
    calendar = Calendar(
        1446, 0, miqaats=sample_miqaats, week_start=WeekStart.MONDAY, today=TODAY
    )
    moved = calendar.next_month()
    assert moved.miqaats == calendar.miqaats
    assert moved.week_start == WeekStart.MONDAY


def test_navigation_does_not_modify_original():
    calendar = Calendar(1446, 3, today=TODAY)
    calendar.next_month()
    calendar.next_year()
    assert calendar.state == CalendarState(1446, 3)


def test_today_returns_current_month():
    calendar = Calendar(1400, 6, today=TODAY)
    assert calendar.today().state == CalendarState(1446, 0)
    assert calendar.today() == calendar.today()


@pytest.mark.parametrize(
    "year, month, expected",
    [
        (1446, 12, CalendarState(1446, 11)),
        (1446, -3, CalendarState(1446, 0)),
        (500, 3, CalendarState(1000, 3)),
        (5000, 3, CalendarState(3000, 3)),
    ],
)
def test_constructor_clamps(year, month, expected):
    assert Calendar(year, month, today=TODAY).state == expected


def test_navigation_clamps_at_bounds():
    first = Calendar(1000, 0, today=TODAY)
    assert first.previous_month().state == CalendarState(1000, 0)
    assert first.previous_year().state == CalendarState(1000, 0)

    last = Calendar(3000, 11, today=TODAY)
    assert last.next_month().state == CalendarState(3000, 11)
    assert last.next_year().state == CalendarState(3000, 11)


def test_grid_at_lower_bound_is_whole_weeks():
    assert len(Calendar(1000, 0, today=TODAY).days()) % 7 == 0


def test_with_events_replaces_lists(sample_miqaats):
    calendar = Calendar(1446, 0, today=TODAY)
    updated = calendar.with_events(miqaats=sample_miqaats)
    assert updated.state == calendar.state
    assert len(updated.miqaats) == len(sample_miqaats)
    assert calendar.miqaats == ()


@pytest.mark.parametrize(
    "year, month, label",
    [
        (1446, 0, "July / August 2024"),
        (1446, 6, "December 2024 / January 2025"),
    ],
)
def test_gregorian_label(year, month, label):
    assert Calendar(year, month, today=TODAY).gregorian_label == label


def test_month_names():
    calendar = Calendar(1446, 8, today=TODAY)
    assert calendar.month_name == "Ramadaan al-Moazzam"
    assert calendar.short_month_name == "Ramadaan"


def test_cell_to_dict(sample_miqaats):
    calendar = Calendar(1446, 0, miqaats=sample_miqaats, today=TODAY)
    cell = next(d for d in calendar.days() if d.key == "10-0-1446")
    data = cell.to_dict()
    assert data["hijri"] == {"day": 10, "month": 0, "year": 1446, "arabic": "١٠"}
    assert data["gregorian"] == "2024-07-16"
    assert data["is_today"] is True
    assert [m["name"] for m in data["miqaats"]] == ["Ashura"]


def test_days_is_repeatable(sample_miqaats, sample_daily_duas):
    calendar = Calendar(
        1446, 0, miqaats=sample_miqaats, daily_duas=sample_daily_duas, today=TODAY
    )
    assert calendar.days() == calendar.days()


def test_equal_state_gives_equal_grid(sample_miqaats):
    first = Calendar(1446, 0, miqaats=sample_miqaats, today=TODAY)
    second = Calendar(1446, 0, miqaats=list(sample_miqaats), today=TODAY)
    assert first.state == second.state
    assert first.days() == second.days()


def test_min_year_above_max_year_rejected():
    with pytest.raises(ValidationError, match="min_year"):
        Calendar(1446, 0, today=TODAY, min_year=2000, max_year=1500)


def test_single_year_range_is_allowed():
    calendar = Calendar(1300, 5, today=TODAY, min_year=1446, max_year=1446)
    assert calendar.year == 1446

"""Tests for selection key sets."""

from datetime import date

import pytest

from miqaat import selection
from miqaat.calendar import Calendar
from miqaat.exceptions import ValidationError
from miqaat.models.hijri import HijriDate

TODAY = date(2024, 7, 16)


def test_month_keys_cover_grid():
    calendar = Calendar(1446, 1, today=TODAY)
    keys = selection.month_keys(calendar)
    assert len(keys) == len(calendar.days())
    assert "1-1-1446" in keys
    assert "30-0-1446" in keys  # leading filler


def test_year_keys():
    assert len(selection.year_keys(1446)) == 354
    assert len(selection.year_keys(1445)) == 355
    assert "30-11-1445" in selection.year_keys(1445)
    assert "30-11-1446" not in selection.year_keys(1446)


def test_range_keys_inclusive():
    keys = selection.range_keys("28-0-1446", "2-1-1446")
    assert keys == {"28-0-1446", "29-0-1446", "30-0-1446", "1-1-1446", "2-1-1446"}


def test_range_keys_any_order():
    assert selection.range_keys("2-1-1446", "28-0-1446") == selection.range_keys(
        "28-0-1446", "2-1-1446"
    )


def test_range_keys_single_day():
    assert selection.range_keys("5-3-1446", "5-3-1446") == {"5-3-1446"}


def test_range_keys_invalid():
    with pytest.raises(ValidationError):
        selection.range_keys("not-a-key", "5-3-1446")


def test_toggle_adds_and_removes():
    selected = selection.toggle(frozenset(), "5-3-1446")
    assert selected == {"5-3-1446"}
    assert selection.toggle(selected, "5-3-1446") == frozenset()


def test_toggle_does_not_mutate():
    original = frozenset({"1-0-1446"})
    selection.toggle(original, "2-0-1446")
    assert original == {"1-0-1446"}


def test_extend():
    assert selection.extend({"1-0-1446"}, {"2-0-1446"}) == {"1-0-1446", "2-0-1446"}


def test_selected_dates_sorted():
    dates = selection.selected_dates({"1-1-1446", "30-0-1446", "1-0-1447"})
    assert dates == [HijriDate(1446, 0, 30), HijriDate(1446, 1, 1), HijriDate(1447, 0, 1)]

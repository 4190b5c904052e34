"""Miqaat query module for filtering, sorting and paginating records."""

import math
from typing import Iterable

from pydantic import BaseModel

from miqaat.exceptions import ValidationError
from miqaat.models.hijri import HijriDate
from miqaat.models.miqaat import Miqaat, MiqaatType
from miqaat.overlay import day_miqaats, night_miqaats


class Page(BaseModel):
    """One page of query results."""

    data: list[Miqaat]
    total: int
    page: int
    page_size: int
    total_pages: int


class MiqaatQuery:
    """Filter and select miqaats.

    Provides the lookups used by the calendar search box and the miqaat
    list screen: text/type/date filters, per-day lookups and pagination.
    """

    def __init__(self, miqaats: Iterable[Miqaat]):
        """Initialize with miqaats.

        Args:
            miqaats: Miqaats to query.
        """
        self.miqaats = list(miqaats)

    def search(
        self,
        name: str | None = None,
        miqaat_type: str | MiqaatType | None = None,
        date: int | None = None,
        month: int | None = None,
        important: bool | None = None,
    ) -> list[Miqaat]:
        """Search miqaats by name, type, date or importance.

        All criteria are combined with AND logic. Name search is
        case-insensitive and matches anywhere in the name or description.

        Args:
            name: Text to search for.
            miqaat_type: Filter by type (case-insensitive).
            date: Day of the day slot.
            month: One-based month of the day slot.
            important: Filter by the important flag.

        Returns:
            Matching miqaats in calendar order.

        Raises:
            ValidationError: If ``miqaat_type`` is not a known type.
        """
        matching = list(self.miqaats)

        if name:
            needle = name.lower()
            matching = [
                m
                for m in matching
                if needle in m.name.lower()
                or (m.description and needle in m.description.lower())
            ]

        if miqaat_type:
            try:
                wanted = MiqaatType(miqaat_type.upper())
            except ValueError:
                raise ValidationError(f"Unknown miqaat type: {miqaat_type}")
            matching = [
                m
                for m in matching
                if m.type == wanted or (m.type is None and wanted == MiqaatType.OTHER)
            ]

        if date is not None:
            matching = [m for m in matching if m.date == date]

        if month is not None:
            matching = [m for m in matching if m.month == month]

        if important is not None:
            matching = [m for m in matching if m.important == important]

        return self._sort(matching)

    def on_date(self, day: HijriDate) -> list[Miqaat]:
        """Miqaats shown on a day: day slots first, then the evening's nights."""
        return day_miqaats(day, self.miqaats) + night_miqaats(day, self.miqaats)

    def for_month(self, month: int) -> list[Miqaat]:
        """Miqaats with a day or night slot in a one-based month."""
        matching = [
            m for m in self.miqaats if m.month == month or m.month_night == month
        ]
        return self._sort(matching)

    def unrenderable(self) -> list[Miqaat]:
        """Miqaats with neither a complete day nor a complete night slot."""
        return [m for m in self.miqaats if not m.is_renderable]

    def paginate(
        self, page: int = 1, page_size: int = 10, miqaats: list[Miqaat] | None = None
    ) -> Page:
        """Slice results into a page.

        Args:
            page: One-based page number.
            page_size: Items per page.
            miqaats: Results to paginate (defaults to all miqaats, sorted).

        Raises:
            ValidationError: If page or page_size is less than 1.
        """
        if page < 1 or page_size < 1:
            raise ValidationError("page and page_size must be >= 1")

        items = self._sort(self.miqaats) if miqaats is None else miqaats
        start = (page - 1) * page_size
        return Page(
            data=items[start : start + page_size],
            total=len(items),
            page=page,
            page_size=page_size,
            total_pages=math.ceil(len(items) / page_size),
        )

    def _sort(self, miqaats: list[Miqaat]) -> list[Miqaat]:
        """Sort by month, date, then priority (missing values last)."""

        def sort_key(m: Miqaat):
            month = m.month if m.month is not None else m.month_night
            date = m.date if m.date is not None else m.date_night
            return (
                month if month is not None else 99,
                date if date is not None else 99,
                m.priority if m.priority is not None else 99,
                m.name,
            )

        return sorted(miqaats, key=sort_key)

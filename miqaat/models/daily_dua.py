"""Daily dua assignment model."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class LibraryRef(BaseModel):
    """Library item attached to a daily dua."""

    id: int
    name: str
    description: Optional[str] = None
    audio_url: Optional[str] = None
    pdf_url: Optional[str] = None
    youtube_url: Optional[str] = None
    album: Optional[str] = None


class DailyDua(BaseModel):
    """Library item assigned to a Hijri day.

    Unlike miqaats, ``month`` is zero-based (0 = Moharram), matching
    ``HijriDate.month`` and the stored assignments.
    """

    id: Optional[int] = None
    library_id: int
    date: int = Field(ge=1, le=30)
    month: int = Field(ge=0, le=11)
    note: Optional[str] = None
    library: Optional[LibraryRef] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def title(self) -> str:
        """Library name, or a placeholder when the library is not loaded."""
        if self.library is not None:
            return self.library.name
        return f"Library #{self.library_id}"

    def matches(self, day: int, month: int) -> bool:
        return self.date == day and self.month == month

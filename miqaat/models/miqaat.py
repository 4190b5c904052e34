"""Miqaat model with Pydantic v2 validation."""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, computed_field, field_validator


class Phase(str, Enum):
    """Primary slot of a miqaat."""

    DAY = "DAY"
    NIGHT = "NIGHT"


class MiqaatType(str, Enum):
    """Miqaat type enumeration."""

    URS = "URS"
    MILAD = "MILAD"
    WASHEQ = "WASHEQ"
    PEHLI_RAAT = "PEHLI_RAAT"
    SHAHADAT = "SHAHADAT"
    ASHARA = "ASHARA"
    IMPORTANT_NIGHT = "IMPORTANT_NIGHT"
    EID = "EID"
    OTHER = "OTHER"


class Miqaat(BaseModel):
    """A calendar occasion.

    ``month`` and ``month_night`` are one-based (1 = Moharram), matching the
    stored records. A miqaat occupies a day slot through ``date``/``month``
    and may contribute a night slot through ``date_night``/``month_night``.
    """

    id: Optional[int] = None
    name: str
    description: Optional[str] = None
    date: Optional[int] = Field(default=None, ge=1, le=30)
    month: Optional[int] = Field(default=None, ge=1, le=12)
    location: Optional[str] = None
    type: Optional[MiqaatType] = None
    date_night: Optional[int] = Field(default=None, ge=1, le=30)
    month_night: Optional[int] = Field(default=None, ge=1, le=12)
    priority: Optional[int] = None
    important: bool = False
    phase: Phase = Phase.DAY
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @field_validator("type", mode="before")
    @classmethod
    def normalize_type(cls, v):
        """Accept lowercase names; blank becomes None."""
        if v is None or v == "":
            return None
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @field_validator("phase", mode="before")
    @classmethod
    def normalize_phase(cls, v):
        if v is None or v == "":
            return Phase.DAY
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @computed_field
    @property
    def has_day_slot(self) -> bool:
        """True if date and month are both set."""
        return self.date is not None and self.month is not None

    @computed_field
    @property
    def has_night_slot(self) -> bool:
        """True if date_night and month_night are both set."""
        return self.date_night is not None and self.month_night is not None

    @property
    def is_renderable(self) -> bool:
        return self.has_day_slot or self.has_night_slot

    def matches_day(self, day: int, month: int) -> bool:
        """True if the day slot is ``day`` of one-based ``month``."""
        return self.has_day_slot and self.date == day and self.month == month

    def matches_night(self, day: int, month: int) -> bool:
        """True if the night slot is the night of ``day`` of one-based ``month``."""
        return (
            self.has_night_slot
            and self.date_night == day
            and self.month_night == month
        )

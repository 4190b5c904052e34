"""Configuration for the miqaat calendar."""

import os
from enum import Enum
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from miqaat.constants import (
    DAILY_DUA_FILENAME,
    DEFAULT_PAGE_SIZE,
    MAX_CALENDAR_YEAR,
    MIN_CALENDAR_YEAR,
    MIQAAT_FILENAME,
)


class WeekStart(str, Enum):
    """First column of the month grid."""

    SUNDAY = "sunday"
    MONDAY = "monday"


class CalendarConfig(BaseModel):
    """Calendar configuration with Pydantic validation."""

    # Storage paths
    data_dir: Path = Field(default=Path("data"))
    log_dir: Path = Field(default=Path("logs"))

    # File naming
    miqaat_filename: str = Field(default=MIQAAT_FILENAME)
    daily_dua_filename: str = Field(default=DAILY_DUA_FILENAME)
    log_filename: str = Field(default="miqaat_calendar.log")

    # Grid
    week_start: WeekStart = Field(default=WeekStart.SUNDAY)
    min_year: int = Field(default=MIN_CALENDAR_YEAR)
    max_year: int = Field(default=MAX_CALENDAR_YEAR)

    # CLI / API defaults
    page_size: int = Field(default=DEFAULT_PAGE_SIZE, ge=1)

    @classmethod
    def from_env(cls) -> "CalendarConfig":
        """Load configuration from environment variables and .env file."""
        load_dotenv()

        config_dict = {}

        # Storage paths
        if "MIQAAT_DATA_DIR" in os.environ:
            config_dict["data_dir"] = Path(os.environ["MIQAAT_DATA_DIR"])
        if "LOG_DIR" in os.environ:
            config_dict["log_dir"] = Path(os.environ["LOG_DIR"])

        # File naming
        if "LOG_FILENAME" in os.environ:
            config_dict["log_filename"] = os.environ["LOG_FILENAME"]

        # Grid
        if "WEEK_START" in os.environ:
            try:
                config_dict["week_start"] = WeekStart(
                    os.environ["WEEK_START"].strip().lower()
                )
            except ValueError:
                pass  # Keep default if invalid

        # CLI / API defaults
        if "PAGE_SIZE" in os.environ:
            try:
                page_size = int(os.environ["PAGE_SIZE"])
                if page_size >= 1:
                    config_dict["page_size"] = page_size
            except ValueError:
                pass  # Keep default if invalid

        return cls(**config_dict)

    @property
    def miqaat_path(self) -> Path:
        """Path of the miqaat entity file."""
        return self.data_dir / self.miqaat_filename

    @property
    def daily_dua_path(self) -> Path:
        """Path of the daily dua entity file."""
        return self.data_dir / self.daily_dua_filename

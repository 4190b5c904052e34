"""Shared constants for the miqaat calendar."""

# Supported Hijri year range; navigation clamps to it
MIN_CALENDAR_YEAR = 1000
MAX_CALENDAR_YEAR = 3000

WEEKDAYS = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]
ISO_WEEKDAYS = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]

# Entity store file names
MIQAAT_FILENAME = "miqaat.json"
DAILY_DUA_FILENAME = "daily_dua.json"

DEFAULT_PAGE_SIZE = 10

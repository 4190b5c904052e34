"""Exception hierarchy for calendar operations."""


class CalendarError(Exception):
    """Base exception for calendar operations."""

    pass


class ValidationError(CalendarError):
    """Invalid Hijri date, selection key or query argument."""

    pass


class EntityNotFoundError(CalendarError):
    """Entity not found in the store."""

    pass


class UnsupportedFormatError(CalendarError):
    """File format not supported."""

    pass


class IngestionError(CalendarError):
    """Error while reading miqaat or daily dua records."""

    pass


class ExportError(CalendarError):
    """Error during calendar export."""

    pass


class StorageError(CalendarError):
    """Entity store file is unreadable or corrupt."""

    pass

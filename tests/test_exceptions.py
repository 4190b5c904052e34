"""Tests for exception classes."""

import pytest

from miqaat.exceptions import (
    CalendarError,
    EntityNotFoundError,
    ExportError,
    IngestionError,
    StorageError,
    UnsupportedFormatError,
    ValidationError,
)


def test_calendar_error():
    """Test CalendarError base exception."""
    error = CalendarError("Test error")
    assert str(error) == "Test error"
    assert isinstance(error, Exception)


@pytest.mark.parametrize(
    "error_class",
    [
        EntityNotFoundError,
        ExportError,
        IngestionError,
        StorageError,
        UnsupportedFormatError,
        ValidationError,
    ],
)
def test_subclasses_are_calendar_errors(error_class):
    error = error_class("Something failed")
    assert str(error) == "Something failed"
    assert isinstance(error, CalendarError)


def test_validation_error_is_not_builtin_value_error():
    assert not issubclass(ValidationError, ValueError)

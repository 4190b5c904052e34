"""Base classes for occurrence writers."""

from pathlib import Path
from typing import Protocol

from miqaat.occurrences import Occurrence


class OccurrenceWriter(Protocol):
    """Protocol for occurrence writers."""

    def write(self, occurrences: list[Occurrence], path: Path, name: str) -> None:
        """Write occurrences to file path under a calendar name."""
        ...

    def get_extension(self) -> str:
        """Returns file extension (e.g., 'ics', 'json')."""
        ...

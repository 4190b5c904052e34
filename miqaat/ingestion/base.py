"""Reader protocol, ingestion result and extension registry."""

from pathlib import Path
from typing import Dict, List, Protocol

from pydantic import BaseModel

from miqaat.exceptions import UnsupportedFormatError
from miqaat.models.daily_dua import DailyDua
from miqaat.models.miqaat import Miqaat


class IngestionResult(BaseModel):
    """Records read from a file, plus the number of rows skipped."""

    miqaats: list[Miqaat] = []
    daily_duas: list[DailyDua] = []
    skipped: int = 0


class RecordReader(Protocol):
    """Protocol for miqaat/daily dua readers."""

    def read(self, path: Path) -> IngestionResult:
        """Read records from file path."""
        ...


class ReaderRegistry:
    """Pick a reader from a file's extension (case-insensitive)."""

    def __init__(self):
        self._readers: Dict[str, RecordReader] = {}

    @property
    def extensions(self) -> List[str]:
        """Registered extensions without the leading dot, sorted."""
        return sorted(self._readers)

    def register(self, reader: RecordReader, extensions: List[str]) -> None:
        for ext in extensions:
            self._readers[ext.lstrip(".").lower()] = reader

    def get_reader(self, path: Path) -> RecordReader:
        """Reader for ``path``.

        Raises:
            UnsupportedFormatError: If no reader handles the extension.
        """
        ext = path.suffix.lstrip(".").lower()
        reader = self._readers.get(ext)
        if reader is None:
            raise UnsupportedFormatError(
                f"Unsupported file format: .{ext}. "
                f"Supported formats: {', '.join(self.extensions)}"
            )
        return reader

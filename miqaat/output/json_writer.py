"""JSON file writer for miqaat occurrences."""

import json
from pathlib import Path

from miqaat.exceptions import ExportError
from miqaat.occurrences import Occurrence


class JSONWriter:
    """Writer for JSON occurrence files."""

    def write(self, occurrences: list[Occurrence], path: Path, name: str) -> None:
        """Write occurrences to a JSON file."""
        data = {
            "name": name,
            "occurrences": [o.model_dump(mode="json", exclude_none=True) for o in occurrences],
        }
        try:
            with open(path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
        except OSError as e:
            raise ExportError(f"Failed to write {path}: {e}") from e

    def get_extension(self) -> str:
        """Returns file extension."""
        return "json"

"""CSV reader for the miqaat table export."""

import csv
import logging
from pathlib import Path

from pydantic import ValidationError as PydanticValidationError

from miqaat.exceptions import IngestionError
from miqaat.ingestion.base import IngestionResult
from miqaat.models.miqaat import Miqaat, MiqaatType, Phase

logger = logging.getLogger(__name__)

TEXT_COLUMNS = ("description", "location")
INTEGER_COLUMNS = ("date", "month", "date_night", "month_night", "priority")


def _is_null(value: str | None) -> bool:
    return value is None or value.strip() in ("", "NULL")


def _parse_integer(value: str | None) -> int | None:
    if _is_null(value):
        return None
    try:
        return int(value.strip())
    except ValueError:
        return None


def _parse_boolean(value: str | None) -> bool:
    if _is_null(value):
        return False
    return value.strip().lower() == "true"


class CSVReader:
    """Reader for ``miqaat.csv`` exports.

    Columns outside the miqaat schema (``id``, ``html``, ``is_night``, ...)
    are ignored; ids are assigned by the store on import.
    """

    def read(self, path: Path) -> IngestionResult:
        """Read miqaats from a CSV file with a header row."""
        try:
            with open(path, "r", encoding="utf-8", newline="") as f:
                rows = list(csv.DictReader(f))
        except (OSError, UnicodeDecodeError, csv.Error) as e:
            raise IngestionError(f"Failed to read CSV file: {e}") from e

        if not rows:
            raise IngestionError("CSV file must have a header and at least one data row")

        miqaats = []
        skipped = 0
        # Row numbers are 1-based and include the header line
        for line_number, row in enumerate(rows, start=2):
            values = self._transform(row)
            if not values.get("name"):
                logger.warning(f"Skipping row {line_number}: missing name")
                skipped += 1
                continue
            try:
                miqaats.append(Miqaat.model_validate(values))
            except PydanticValidationError as e:
                logger.warning(f"Skipping row {line_number}: {e.errors()[0]['msg']}")
                skipped += 1

        logger.info(f"Read {len(miqaats)} miqaats from {path} (skipped {skipped})")
        return IngestionResult(miqaats=miqaats, skipped=skipped)

    def _transform(self, row: dict[str, str]) -> dict:
        """Map a CSV row to miqaat fields."""
        values: dict = {"name": (row.get("name") or "").strip()}

        for column in TEXT_COLUMNS:
            if not _is_null(row.get(column)):
                values[column] = row[column].strip()

        for column in INTEGER_COLUMNS:
            values[column] = _parse_integer(row.get(column))

        phase = (row.get("phase") or "").strip().upper()
        values["phase"] = phase if phase in Phase.__members__ else Phase.DAY

        miqaat_type = (row.get("type") or "").strip().upper()
        values["type"] = miqaat_type if miqaat_type in MiqaatType.__members__ else None

        values["important"] = _parse_boolean(row.get("important"))
        return values

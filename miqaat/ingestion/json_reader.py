"""JSON file reader for miqaat exports."""

import json
from pathlib import Path

from pydantic import ValidationError as PydanticValidationError

from miqaat.exceptions import IngestionError
from miqaat.ingestion.base import IngestionResult
from miqaat.models.daily_dua import DailyDua
from miqaat.models.miqaat import Miqaat


class JSONReader:
    """Reader for JSON exports of the miqaat and daily dua tables."""

    def read(self, path: Path) -> IngestionResult:
        """Read records from a JSON file.

        Supports two formats:
        - Array of miqaats: [{miqaat1}, {miqaat2}, ...]
        - Object with ``miqaats`` and/or ``daily_duas`` keys
        """
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            raise IngestionError(f"Failed to read JSON file: {e}") from e

        if isinstance(data, list):
            return IngestionResult(miqaats=self._parse(Miqaat, data))

        if isinstance(data, dict) and ("miqaats" in data or "daily_duas" in data):
            return IngestionResult(
                miqaats=self._parse(Miqaat, data.get("miqaats", [])),
                daily_duas=self._parse(DailyDua, data.get("daily_duas", [])),
            )

        raise IngestionError(
            "JSON format not recognized. Expected array of miqaats or "
            "object with 'miqaats'/'daily_duas' keys."
        )

    def _parse(self, model, items: list) -> list:
        try:
            return [model.model_validate(item) for item in items]
        except PydanticValidationError as e:
            raise IngestionError(f"Failed to parse {model.__name__} records: {e}") from e

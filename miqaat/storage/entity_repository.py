"""JSON-file repository with a uniform interface per entity type."""

from __future__ import annotations

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Callable, Generic, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from miqaat.exceptions import EntityNotFoundError, StorageError, ValidationError

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)

# Computed fields are derived on load and never stored
EXCLUDED_FIELDS = {"has_day_slot", "has_night_slot"}


class EntityRepository(Generic[T]):
    """Store records of one entity type in a JSON file.

    The file holds a JSON array of records. Ids are assigned incrementally
    and ``created_at``/``updated_at`` are maintained on write.

    Usage:
        repo = EntityRepository("miqaat", Miqaat, Path("data/miqaat.json"))
        created = repo.create({"name": "Ashura", "date": 10, "month": 1})
    """

    def __init__(
        self,
        entity_type: str,
        model: Type[T],
        path: Path,
        clock: Callable[[], datetime] = datetime.now,
    ):
        """Initialize the repository.

        Args:
            entity_type: Entity name used in messages (e.g. "miqaat").
            model: Pydantic model of the records.
            path: JSON file holding the records.
            clock: Source of timestamps.
        """
        self.entity_type = entity_type
        self.model = model
        self.path = path
        self.clock = clock

    def list(self) -> list[T]:
        """All records in id order."""
        return sorted(self._load(), key=lambda record: record.id or 0)

    def get(self, entity_id: int) -> T:
        """Record by id.

        Raises:
            EntityNotFoundError: If no record has this id.
        """
        for record in self._load():
            if record.id == entity_id:
                return record
        raise EntityNotFoundError(f"{self.entity_type} {entity_id} not found")

    def create(self, data: dict[str, Any] | T) -> T:
        """Add a record and return it with id and timestamps set.

        Raises:
            ValidationError: If the data does not validate.
        """
        records = self._load()
        now = self.clock()
        values = self._as_dict(data)
        values.update(
            id=max((r.id or 0 for r in records), default=0) + 1,
            created_at=now,
            updated_at=now,
        )
        record = self._validate(values)
        records.append(record)
        self._save(records)
        logger.info(f"Created {self.entity_type} {record.id}")
        return record

    def create_many(self, items: list[dict[str, Any] | T]) -> list[T]:
        """Add several records in one write."""
        records = self._load()
        created = self._build(items, max((r.id or 0 for r in records), default=0) + 1)
        self._save(records + created)
        logger.info(f"Created {len(created)} {self.entity_type} records")
        return created

    def update(self, entity_id: int, changes: dict[str, Any]) -> T:
        """Apply changes to a record.

        Raises:
            EntityNotFoundError: If no record has this id.
            ValidationError: If the result does not validate.
        """
        records = self._load()
        for index, record in enumerate(records):
            if record.id == entity_id:
                values = self._as_dict(record)
                values.update(changes)
                values.update(id=entity_id, updated_at=self.clock())
                updated = self._validate(values)
                records[index] = updated
                self._save(records)
                logger.info(f"Updated {self.entity_type} {entity_id}")
                return updated
        raise EntityNotFoundError(f"{self.entity_type} {entity_id} not found")

    def delete(self, entity_id: int) -> None:
        """Remove a record.

        Raises:
            EntityNotFoundError: If no record has this id.
        """
        records = self._load()
        remaining = [r for r in records if r.id != entity_id]
        if len(remaining) == len(records):
            raise EntityNotFoundError(f"{self.entity_type} {entity_id} not found")
        self._save(remaining)
        logger.info(f"Deleted {self.entity_type} {entity_id}")

    def replace_all(self, items: list[dict[str, Any] | T]) -> list[T]:
        """Drop every record, then add ``items`` with ids starting at 1.

        Nothing is written if any item fails validation.
        """
        created = self._build(items, 1)
        self._save(created)
        logger.info(f"Replaced all {self.entity_type} records with {len(created)}")
        return created

    def _build(self, items: list[dict[str, Any] | T], first_id: int) -> list[T]:
        now = self.clock()
        built = []
        for offset, item in enumerate(items):
            values = self._as_dict(item)
            values.update(id=first_id + offset, created_at=now, updated_at=now)
            built.append(self._validate(values))
        return built

    def _as_dict(self, data: dict[str, Any] | T) -> dict[str, Any]:
        if isinstance(data, BaseModel):
            return data.model_dump(exclude=EXCLUDED_FIELDS)
        return dict(data)

    def _validate(self, values: dict[str, Any]) -> T:
        try:
            return self.model.model_validate(values)
        except PydanticValidationError as e:
            raise ValidationError(f"Invalid {self.entity_type}: {e}") from e

    def _load(self) -> list[T]:
        """Read every record from the store file.

        Raises:
            StorageError: If the file cannot be read or does not hold a
                JSON array of valid records.
        """
        if not self.path.exists():
            return []
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            raise StorageError(f"Cannot read {self.entity_type} store {self.path}: {e}") from e
        if not isinstance(data, list):
            raise StorageError(f"{self.entity_type} store {self.path} must hold a JSON array")
        try:
            return [self.model.model_validate(item) for item in data]
        except PydanticValidationError as e:
            raise StorageError(f"Invalid record in {self.path}: {e}") from e

    def _save(self, records: list[T]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        data = [
            record.model_dump(mode="json", exclude_none=True, exclude=EXCLUDED_FIELDS)
            for record in records
        ]
        self.path.write_text(json.dumps(data, indent=2), encoding="utf-8")
        logger.debug(f"Wrote {len(records)} {self.entity_type} records to {self.path}")

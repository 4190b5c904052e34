"""Readers for miqaat and daily dua exports."""

from miqaat.ingestion.base import IngestionResult, ReaderRegistry
from miqaat.ingestion.csv_reader import CSVReader
from miqaat.ingestion.json_reader import JSONReader


def setup_reader_registry() -> ReaderRegistry:
    """Set up reader registry with all readers."""
    registry = ReaderRegistry()
    registry.register(JSONReader(), [".json"])
    registry.register(CSVReader(), [".csv"])
    return registry


__all__ = [
    "CSVReader",
    "IngestionResult",
    "JSONReader",
    "ReaderRegistry",
    "setup_reader_registry",
]

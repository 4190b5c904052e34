"""Writers for exported miqaat occurrences."""

from miqaat.exceptions import UnsupportedFormatError
from miqaat.output.base import OccurrenceWriter
from miqaat.output.ics_writer import ICSWriter
from miqaat.output.json_writer import JSONWriter


def setup_writer(format: str) -> OccurrenceWriter:
    """Get writer for format."""
    if format == "ics":
        return ICSWriter()
    elif format == "json":
        return JSONWriter()
    else:
        raise UnsupportedFormatError(f"Unsupported output format: {format}")


__all__ = ["ICSWriter", "JSONWriter", "OccurrenceWriter", "setup_writer"]

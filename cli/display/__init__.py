"""Display module for rendering calendar output.

This module provides renderers for the terminal:
- GridRenderer: Hijri month grid with miqaat overlay
- MiqaatRenderer: Miqaat tables, day details and export previews

It also provides:
- console: Shared Rich console instance
- Formatting functions for Hijri/Gregorian dates and miqaat labels
"""

from cli.display.console import console
from cli.display.formatters import (
    format_gregorian,
    format_hijri,
    format_miqaat_label,
    format_slot,
)
from cli.display.grid_renderer import GridRenderer
from cli.display.miqaat_renderer import MiqaatRenderer

__all__ = [
    # Console
    "console",
    # Renderers
    "GridRenderer",
    "MiqaatRenderer",
    # Formatters
    "format_gregorian",
    "format_hijri",
    "format_miqaat_label",
    "format_slot",
]

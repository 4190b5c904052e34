"""Shared Rich console for terminal output."""

from rich.console import Console

# Automatic highlighting would recolour every day number in the grid
console = Console(highlight=False)

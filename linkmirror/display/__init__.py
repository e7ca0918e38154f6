"""Display utilities for the CLI."""

from .base import Display
from .cli import CLIDisplay
from .context import get_display

__all__ = ["CLIDisplay", "Display", "get_display"]

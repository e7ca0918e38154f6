"""Display factory."""

from typing import Literal

from .base import Display
from .cli import CLIDisplay

DisplayMode = Literal["cli"]


def get_display(mode: DisplayMode = "cli") -> Display:
    """Get the display implementation for ``mode``.

    Raises:
        ValueError: For an unknown mode
    """
    if mode == "cli":
        return CLIDisplay()
    raise ValueError(f"Invalid display mode: {mode}. Must be 'cli'")

"""Utility helpers shared across linkmirror."""

from .get_home_dir import get_home_dir
from .logger import configure_logging
from .normalize_path import normalize_path

__all__ = [
    "configure_logging",
    "get_home_dir",
    "normalize_path",
]

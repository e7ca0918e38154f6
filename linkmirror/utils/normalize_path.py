"""Normalize a path for linkmirror.

Expands user home directory (~), makes the path absolute and collapses
``.`` and ``..`` segments lexically WITHOUT resolving symlinks, so that
cache keys and link targets compare equal regardless of how they were spelled.
"""

import os
from pathlib import Path


def normalize_path(path: str | Path) -> Path:
    """Expand user, make absolute and collapse dot segments (no symlink resolution)."""
    if path is None:
        raise TypeError("path must not be None")
    return Path(os.path.normpath(Path(path).expanduser().absolute()))

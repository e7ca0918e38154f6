"""Locate the enclosing git repository root."""

from pathlib import Path

from ...utils.normalize_path import normalize_path


def find_git_root(start: Path) -> Path:
    """Walk up from ``start`` to the first directory containing ``.git``.

    Raises:
        ValueError: If ``start`` is not inside a git repository
    """
    current = normalize_path(start)
    for candidate in (current, *current.parents):
        if (candidate / ".git").exists():
            return candidate
    raise ValueError(f"Not inside a git repository: {start}")

"""Per-run anchor caches keyed by absolute path (UNO: single class)."""

import threading
from collections.abc import Callable
from pathlib import Path
from typing import TypeVar

from ...utils.normalize_path import normalize_path
from .HeadingAnchorIndex import HeadingAnchorIndex

T = TypeVar("T")


class AnchorCache:
    """Anchor sets and heading indexes computed once per file for one run.

    Entries are never invalidated. Concurrent lookups of the same missing
    key may both compute it; the first stored value wins.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._anchor_sets: dict[Path, frozenset[str]] = {}
        self._anchor_indexes: dict[Path, HeadingAnchorIndex] = {}

    def anchor_set(self, path: Path, compute: Callable[[], frozenset[str]]) -> frozenset[str]:
        """Cached anchor-existence set for ``path``, computed by ``compute`` on a miss."""
        return self._get_or_compute(self._anchor_sets, path, compute)

    def anchor_index(self, path: Path, compute: Callable[[], HeadingAnchorIndex]) -> HeadingAnchorIndex:
        """Cached ordered heading index for ``path``, computed by ``compute`` on a miss."""
        return self._get_or_compute(self._anchor_indexes, path, compute)

    def has_anchor_set(self, path: Path) -> bool:
        with self._lock:
            return normalize_path(path) in self._anchor_sets

    def has_anchor_index(self, path: Path) -> bool:
        with self._lock:
            return normalize_path(path) in self._anchor_indexes

    def __len__(self) -> int:
        with self._lock:
            return len(self._anchor_sets) + len(self._anchor_indexes)

    def _get_or_compute(self, store: dict[Path, T], path: Path, compute: Callable[[], T]) -> T:
        key = normalize_path(path)
        with self._lock:
            if key in store:
                return store[key]
        # Compute outside the lock; the computation only reads the file
        value = compute()
        with self._lock:
            return store.setdefault(key, value)

"""Selection of translatable documents (UNO: single class)."""

import re
from collections.abc import Iterable
from pathlib import Path

from ...constants import DEFAULT_FILE_REGEX
from ...utils.normalize_path import normalize_path


def _compile(pattern: str) -> re.Pattern[str]:
    try:
        return re.compile(pattern)
    except re.error as exc:
        raise ValueError(f"Invalid file pattern '{pattern}': {exc}") from exc


class DocumentSelector:
    """Decides which files under a source root are documents to translate.

    Patterns are full-matched against the path relative to the root, written
    with ``/`` separators. A file is selected when it matches ``file_regex``
    and none of ``excluded_patterns``.
    """

    def __init__(
        self,
        source_root: Path,
        file_regex: str = DEFAULT_FILE_REGEX,
        excluded_patterns: Iterable[str] = (),
    ):
        if source_root is None or file_regex is None:
            raise TypeError("source_root and file_regex must not be None")
        self.source_root = normalize_path(source_root)
        self.file_regex = file_regex
        self.excluded_patterns = tuple(excluded_patterns)
        self._pattern = _compile(file_regex)
        self._excluded = tuple(_compile(p) for p in self.excluded_patterns)

    def matches(self, relative_path: str) -> bool:
        """Check a root-relative posix path against the pattern and exclusions."""
        if not self._pattern.fullmatch(relative_path):
            return False
        return not any(excluded.fullmatch(relative_path) for excluded in self._excluded)

    def is_translatable(self, path: Path) -> bool:
        """Check whether ``path`` is a selected document under the source root."""
        absolute = normalize_path(path)
        if not absolute.is_relative_to(self.source_root):
            return False
        return self.matches(absolute.relative_to(self.source_root).as_posix())

    def __repr__(self) -> str:
        return (
            f"DocumentSelector(source_root={str(self.source_root)!r}, file_regex={self.file_regex!r}, "
            f"excluded_patterns={list(self.excluded_patterns)!r})"
        )

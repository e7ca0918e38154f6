"""Mutable bookkeeping for correcting one translated document."""

from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from .HeadingAnchorIndex import HeadingAnchorIndex


@dataclass
class _CorrectionState:
    """Counters, errors and lazily built indexes of one ``correct_links`` call."""

    translated_file: Path
    source_file: Path
    load_source_index: Callable[[], HeadingAnchorIndex]
    load_translated_index: Callable[[], HeadingAnchorIndex]
    asset_corrections: int = 0
    anchor_corrections: int = 0
    front_matter_corrections: int = 0
    errors: list[str] = field(default_factory=list)
    _source_index: HeadingAnchorIndex | None = field(default=None, init=False, repr=False)
    _source_error: Exception | None = field(default=None, init=False, repr=False)
    _translated_index: HeadingAnchorIndex | None = field(default=None, init=False, repr=False)

    def source_index(self) -> HeadingAnchorIndex:
        """Heading index of the source document; a read failure is raised again on later calls."""
        if self._source_error is not None:
            raise self._source_error
        if self._source_index is None:
            try:
                self._source_index = self.load_source_index()
            except (OSError, UnicodeDecodeError) as exc:
                self._source_error = exc
                raise
        return self._source_index

    def translated_index(self) -> HeadingAnchorIndex:
        if self._translated_index is None:
            self._translated_index = self.load_translated_index()
        return self._translated_index

    def add_error(self, message: str) -> None:
        if message not in self.errors:
            self.errors.append(message)

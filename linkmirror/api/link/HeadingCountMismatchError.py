"""Structural mismatch between a source document and its translation (UNO: single exception)."""

from pathlib import Path


class HeadingCountMismatchError(ValueError):
    """Source and translated documents have different numbers of headings.

    Anchors are mapped by heading position, so no mapping exists in this case.
    """

    def __init__(self, source_file: Path, source_count: int, translated_file: Path, translated_count: int):
        self.source_file = Path(source_file)
        self.source_count = source_count
        self.translated_file = Path(translated_file)
        self.translated_count = translated_count
        super().__init__(
            f"Heading count mismatch: source '{self.source_file.name}' has {source_count} headings, "
            f"translated '{self.translated_file.name}' has {translated_count} headings. "
            "Cannot map anchors by index."
        )

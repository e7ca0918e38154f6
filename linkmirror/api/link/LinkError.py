"""Broken link found during an integrity check (UNO: single model)."""

from dataclasses import dataclass
from pathlib import Path

from .LinkErrorKind import LinkErrorKind


@dataclass(frozen=True)
class LinkError:
    """A link whose target file or heading anchor does not exist.

    ``resolved_target`` is None for anchor-only links into the same file.
    """

    source_file: Path
    raw_destination: str
    resolved_target: Path | None
    anchor: str | None
    kind: LinkErrorKind

    def __str__(self) -> str:
        if self.kind is LinkErrorKind.FILE_NOT_FOUND:
            return f"{self.source_file}: link '{self.raw_destination}' points to missing file {self.resolved_target}"
        return f"{self.source_file}: link '{self.raw_destination}' points to missing anchor '#{self.anchor}'"

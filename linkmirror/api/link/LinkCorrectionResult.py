"""Outcome of correcting one translated document (UNO: single model)."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class LinkCorrectionResult:
    """Corrected content plus per-kind counters for one translated file.

    ``corrected_content`` is usable even when ``errors`` is non-empty:
    links that could not be corrected are left as they were.
    """

    target_file: Path
    corrected_content: str
    asset_corrections: int = 0
    anchor_corrections: int = 0
    front_matter_corrections: int = 0
    errors: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if self.target_file is None or self.corrected_content is None:
            raise TypeError("target_file and corrected_content must not be None")
        object.__setattr__(self, "errors", tuple(self.errors))

    @property
    def is_success(self) -> bool:
        return not self.errors

    @property
    def total_corrections(self) -> int:
        return self.asset_corrections + self.anchor_corrections + self.front_matter_corrections

    @classmethod
    def unchanged(cls, target_file: Path, content: str) -> "LinkCorrectionResult":
        """Result for a file that needed no corrections."""
        return cls(target_file=target_file, corrected_content=content)

    @classmethod
    def failed(cls, target_file: Path, content: str, error: str) -> "LinkCorrectionResult":
        """Result for a file that could not be processed; ``content`` is returned as given."""
        return cls(target_file=target_file, corrected_content=content, errors=(error,))

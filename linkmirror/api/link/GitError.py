"""Git status error for one file (UNO: single model)."""

from dataclasses import dataclass
from pathlib import Path

from .GitErrorKind import GitErrorKind


@dataclass(frozen=True)
class GitError:
    """A source file that is not tracked or has local modifications."""

    file: Path
    kind: GitErrorKind

    def __str__(self) -> str:
        return f"{self.file}: {self.kind.value}"

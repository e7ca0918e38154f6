"""Outcome of an integrity check run (UNO: single model)."""

from dataclasses import dataclass

from .GitError import GitError
from .LinkError import LinkError


@dataclass(frozen=True)
class CheckResult:
    """Git status errors and link errors accumulated over a run."""

    git_errors: tuple[GitError, ...] = ()
    link_errors: tuple[LinkError, ...] = ()

    def __post_init__(self) -> None:
        if self.git_errors is None or self.link_errors is None:
            raise TypeError("git_errors and link_errors must not be None")
        object.__setattr__(self, "git_errors", tuple(self.git_errors))
        object.__setattr__(self, "link_errors", tuple(self.link_errors))

    @property
    def is_success(self) -> bool:
        return not self.git_errors and not self.link_errors

    @property
    def error_count(self) -> int:
        return len(self.git_errors) + len(self.link_errors)

    @classmethod
    def success(cls) -> "CheckResult":
        """Result with no errors."""
        return cls()

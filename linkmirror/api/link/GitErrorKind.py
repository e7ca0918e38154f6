"""Git status error kinds."""

from enum import Enum


class GitErrorKind(str, Enum):
    UNTRACKED = "untracked"
    UNCOMMITTED = "uncommitted"

"""Version-control collaborator: git queries for single files."""

from .find_git_root import find_git_root
from .GitCommandError import GitCommandError
from .GitService import GitService

__all__ = [
    "GitCommandError",
    "GitService",
    "find_git_root",
]

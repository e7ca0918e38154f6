"""Synchronous git queries for single files."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from ...constants import DEFAULT_GIT_TIMEOUT_SECS
from ...utils.normalize_path import normalize_path
from .GitCommandError import GitCommandError

logger = logging.getLogger(__name__)


class GitService:
    """Run git commands against a repository root."""

    def __init__(self, repository_root: Path, timeout_secs: float = DEFAULT_GIT_TIMEOUT_SECS):
        """
        Initialize git service.

        Args:
            repository_root: Path to the repository root directory
            timeout_secs: Upper bound for a single git invocation
        """
        if repository_root is None:
            raise TypeError("repository_root must not be None")
        self.repository_root = normalize_path(repository_root)
        self.timeout_secs = timeout_secs

    def is_committed(self, path: Path) -> bool:
        """Check whether a file is tracked and has no local modifications.

        Empty ``git status --porcelain`` output means tracked and clean.
        """
        output = self._run("status", "--porcelain", "--", self._relative(path))
        return not output.strip()

    def current_commit_hash(self, path: Path) -> str | None:
        """Hash of the last commit touching ``path``, or None if it has no history."""
        output = self._run("log", "-1", "--format=%H", "--", self._relative(path))
        return output.strip() or None

    def diff(self, path: Path, from_commit: str, to_commit: str) -> str | None:
        """Unified diff of ``path`` between two commits, or None when unchanged."""
        if from_commit is None or to_commit is None:
            raise TypeError("from_commit and to_commit must not be None")
        output = self._run("diff", f"{from_commit}..{to_commit}", "--", self._relative(path))
        return output if output.strip() else None

    def commit_count(self, path: Path, from_commit: str, to_commit: str) -> int:
        """Number of commits touching ``path`` between two commits."""
        if from_commit is None or to_commit is None:
            raise TypeError("from_commit and to_commit must not be None")
        output = self._run("rev-list", "--count", f"{from_commit}..{to_commit}", "--", self._relative(path))
        return int(output.strip()) if output.strip() else 0

    def file_content_at_commit(self, path: Path, commit: str) -> str | None:
        """Content of ``path`` at ``commit``, or None if it did not exist there."""
        if commit is None:
            raise TypeError("commit must not be None")
        try:
            output = self._run("show", f"{commit}:{self._relative(path)}")
        except GitCommandError as exc:
            # git show exits non-zero for paths missing at that commit
            if exc.returncode is not None:
                return None
            raise
        return output or None

    def _relative(self, path: Path) -> str:
        absolute = normalize_path(path)
        if absolute.is_relative_to(self.repository_root):
            return absolute.relative_to(self.repository_root).as_posix()
        return str(absolute)

    def _run(self, *args: str) -> str:
        """Run a git command in the repository root and return stdout.

        Raises:
            GitCommandError: On timeout, non-zero exit, or a missing git binary
        """
        command = ["git", *args]
        try:
            result = subprocess.run(
                command,
                cwd=self.repository_root,
                capture_output=True,
                text=True,
                encoding="utf-8",
                timeout=self.timeout_secs,
            )
        except subprocess.TimeoutExpired as exc:
            raise GitCommandError(f"Git command timed out after {self.timeout_secs} seconds: {' '.join(command)}") from exc
        except OSError as exc:
            raise GitCommandError(f"Cannot run git: {exc}") from exc

        if result.returncode != 0:
            logger.debug(f"git {' '.join(args)} failed: {result.stderr.strip()}")
            raise GitCommandError(
                f"Git command failed with exit code {result.returncode}: {result.stderr.strip()}",
                returncode=result.returncode,
            )
        return result.stdout

"""Link integrity checker for a source document tree (UNO: single class)."""

import logging
import threading
from pathlib import Path
from urllib.parse import unquote

from ...utils.normalize_path import normalize_path
from ..git.GitCommandError import GitCommandError
from ..git.GitService import GitService
from ..markdown.MarkdownDocument import MarkdownDocument
from .AnchorCache import AnchorCache
from .CheckResult import CheckResult
from .collect_anchors import collect_anchors
from .collect_links import collect_links
from .GitError import GitError
from .GitErrorKind import GitErrorKind
from .LinkError import LinkError
from .LinkErrorKind import LinkErrorKind
from .LinkReference import LinkReference

logger = logging.getLogger(__name__)


class IntegrityChecker:
    """Verify git status and internal links of documents under a source root.

    Errors are accumulated across ``check_file`` calls and never raised.
    ``check_file`` may be called from several threads at once.
    """

    def __init__(
        self,
        source_root: Path,
        repository_root: Path,
        git: GitService | None = None,
        cache: AnchorCache | None = None,
    ):
        """
        Args:
            source_root: Directory containing the documents to check
            repository_root: Base for root-absolute link paths (``/docs/a.md``)
            git: Git service; None skips the git status check
            cache: Anchor cache shared for this run; a private one if None
        """
        if source_root is None or repository_root is None:
            raise TypeError("source_root and repository_root must not be None")
        self.source_root = normalize_path(source_root)
        self.repository_root = normalize_path(repository_root)
        self.git = git
        self.cache = cache if cache is not None else AnchorCache()
        self._lock = threading.Lock()
        self._git_errors: list[GitError] = []
        self._link_errors: list[LinkError] = []

    def check_file(self, file: Path, content: str) -> None:
        """Check one document and record its errors.

        Args:
            file: Path of the document under the source root
            content: Document text (front matter included)

        Raises:
            ValueError: If ``file`` is outside the source root
        """
        if file is None or content is None:
            raise TypeError("file and content must not be None")
        file = normalize_path(file)
        if not file.is_relative_to(self.source_root):
            raise ValueError(f"File {file} is outside source root {self.source_root}")

        git_error = self._check_git(file)
        tree = MarkdownDocument(content).tree
        own_anchors = collect_anchors(tree)
        link_errors = [error for ref in collect_links(tree) if (error := self._check_link(file, own_anchors, ref))]

        with self._lock:
            if git_error is not None:
                self._git_errors.append(git_error)
            self._link_errors.extend(link_errors)

    def record_unreadable(self, file: Path, error: Exception) -> None:
        """Record a document that could not be read as ``UNTRACKED``, the most conservative status."""
        if file is None:
            raise TypeError("file must not be None")
        logger.error(f"Cannot check {file}: {error}")
        with self._lock:
            self._git_errors.append(GitError(file=normalize_path(file), kind=GitErrorKind.UNTRACKED))

    def result(self) -> CheckResult:
        """Snapshot of all errors recorded so far."""
        with self._lock:
            return CheckResult(git_errors=tuple(self._git_errors), link_errors=tuple(self._link_errors))

    def _check_git(self, file: Path) -> GitError | None:
        if self.git is None:
            return None
        try:
            if self.git.is_committed(file):
                return None
            if self.git.current_commit_hash(file) is not None:
                return GitError(file=file, kind=GitErrorKind.UNCOMMITTED)
            return GitError(file=file, kind=GitErrorKind.UNTRACKED)
        except GitCommandError as exc:
            logger.error(f"Git status failed for {file}: {exc}")
            return GitError(file=file, kind=GitErrorKind.UNTRACKED)

    def _check_link(self, file: Path, own_anchors: frozenset[str], ref: LinkReference) -> LinkError | None:
        if ref.is_external:
            return None

        if ref.is_anchor_only:
            if not ref.anchor:
                return None
            if unquote(ref.anchor).lower() in own_anchors:
                return None
            return LinkError(
                source_file=file,
                raw_destination=ref.raw,
                resolved_target=None,
                anchor=ref.anchor,
                kind=LinkErrorKind.ANCHOR_NOT_FOUND,
            )

        target = self._resolve(file, ref)
        if not target.exists():
            return LinkError(
                source_file=file,
                raw_destination=ref.raw,
                resolved_target=target,
                anchor=ref.anchor,
                kind=LinkErrorKind.FILE_NOT_FOUND,
            )

        if not ref.anchor:
            return None
        try:
            anchors = self.cache.anchor_set(target, lambda: _read_anchors(target))
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning(f"Cannot read anchors of {target}: {exc}")
            return None
        if unquote(ref.anchor).lower() in anchors:
            return None
        return LinkError(
            source_file=file,
            raw_destination=ref.raw,
            resolved_target=target,
            anchor=ref.anchor,
            kind=LinkErrorKind.ANCHOR_NOT_FOUND,
        )

    def _resolve(self, file: Path, ref: LinkReference) -> Path:
        decoded = unquote(ref.path or "")
        if ref.is_absolute:
            return normalize_path(self.repository_root / decoded.lstrip("/"))
        return normalize_path(file.parent / decoded)


def _read_anchors(path: Path) -> frozenset[str]:
    return collect_anchors(MarkdownDocument(path.read_text(encoding="utf-8")).tree)

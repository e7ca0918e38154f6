"""Directory traversal collaborator."""

import logging
from collections.abc import Callable, Iterator
from pathlib import Path

from ...utils.normalize_path import normalize_path
from .DocumentSelector import DocumentSelector

logger = logging.getLogger(__name__)


def iter_documents(
    root: Path,
    selector: DocumentSelector,
    on_error: Callable[[Path, Exception], None] | None = None,
) -> Iterator[tuple[Path, str]]:
    """Yield ``(path, content)`` for every selected regular file below ``root``.

    Files are visited in lexicographic order of their path string. The
    selector is applied to paths relative to ``root``, so the same selector
    serves the source tree and every mirrored translated tree. A file that
    cannot be read or decoded as UTF-8 is logged, passed to ``on_error`` and
    skipped.

    Raises:
        ValueError: If ``root`` is not a directory
    """
    if root is None or selector is None:
        raise TypeError("root and selector must not be None")
    base = normalize_path(root)
    if not base.is_dir():
        raise ValueError(f"Not a directory: {base}")

    candidates = sorted((p for p in base.rglob("*") if p.is_file()), key=str)
    for path in candidates:
        if not selector.matches(path.relative_to(base).as_posix()):
            continue
        logger.debug(f"Reading {path}")
        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            logger.error(f"Cannot read {path}: {exc}")
            if on_error is not None:
                on_error(path, exc)
            continue
        yield path, content

"""Repository root lookup with a plain-directory fallback."""

import logging
from pathlib import Path

from ..git.find_git_root import find_git_root

logger = logging.getLogger(__name__)


def _repository_root(root: Path) -> Path | None:
    """Enclosing git root of ``root``, or None when it is not in a repository."""
    try:
        return find_git_root(root)
    except ValueError:
        logger.warning(f"{root} is not inside a git repository")
        return None

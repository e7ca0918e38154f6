"""Unit test fixtures.

Most configuration helpers are in tests/conftest.py.
This file contains unit-test-specific helpers.
"""

from pathlib import Path

import pytest

# Re-export commonly used helpers from root conftest
from tests.conftest import (
    minimal_config_dict,
    run_cmd,
    write_config,
    write_tree,
)
from linkmirror.api.link.DocumentSelector import DocumentSelector
from linkmirror.api.link.LinkCorrector import LinkCorrector

__all__ = [
    "minimal_config_dict",
    "run_cmd",
    "write_config",
    "write_tree",
]


@pytest.fixture
def trees(tmp_path: Path) -> tuple[Path, Path]:
    """Empty source tree and mirrored translated tree (source_dir, target_dir)."""
    source_dir = tmp_path / "docs"
    target_dir = tmp_path / "i18n" / "cs" / "docs"
    source_dir.mkdir()
    target_dir.mkdir(parents=True)
    return source_dir, target_dir


@pytest.fixture
def corrector(trees: tuple[Path, Path]) -> LinkCorrector:
    """LinkCorrector over ``trees`` selecting Markdown files, with title/description translatable."""
    source_dir, target_dir = trees
    return LinkCorrector(
        source_dir,
        target_dir,
        DocumentSelector(source_dir),
        translatable_fields=("title", "description"),
    )

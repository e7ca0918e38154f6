"""Unit tests for linkmirror.api.link.DocumentSelector."""

import pytest

from linkmirror.api.link.DocumentSelector import DocumentSelector


def test_default_pattern_selects_markdown(tmp_path):
    selector = DocumentSelector(tmp_path)
    assert selector.is_translatable(tmp_path / "guide.md")
    assert selector.is_translatable(tmp_path / "sub" / "README.MD")
    assert not selector.is_translatable(tmp_path / "img" / "arch.png")


def test_exclusions(tmp_path):
    selector = DocumentSelector(tmp_path, excluded_patterns=[r"drafts/.*", r".*CHANGELOG\.md"])
    assert selector.is_translatable(tmp_path / "guide.md")
    assert not selector.is_translatable(tmp_path / "drafts" / "wip.md")
    assert not selector.is_translatable(tmp_path / "sub" / "CHANGELOG.md")


def test_files_outside_root_are_not_translatable(tmp_path):
    selector = DocumentSelector(tmp_path / "docs")
    assert not selector.is_translatable(tmp_path / "other" / "guide.md")
    assert selector.is_translatable(tmp_path / "docs" / "sub" / ".." / "guide.md")


def test_matches_uses_full_match(tmp_path):
    selector = DocumentSelector(tmp_path, file_regex=r".*\.md")
    assert selector.matches("a/b.md")
    assert not selector.matches("a/b.md.bak")


def test_invalid_pattern_raises_value_error(tmp_path):
    with pytest.raises(ValueError, match="Invalid file pattern"):
        DocumentSelector(tmp_path, file_regex="(")
    with pytest.raises(ValueError):
        DocumentSelector(tmp_path, excluded_patterns=["["])

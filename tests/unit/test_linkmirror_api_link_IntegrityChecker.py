"""Unit tests for linkmirror.api.link.IntegrityChecker."""

from concurrent.futures import ThreadPoolExecutor
from unittest.mock import MagicMock

import pytest

from linkmirror.api.git.GitCommandError import GitCommandError
from linkmirror.api.git.GitService import GitService
from linkmirror.api.link.AnchorCache import AnchorCache
from linkmirror.api.link.GitErrorKind import GitErrorKind
from linkmirror.api.link.IntegrityChecker import IntegrityChecker
from linkmirror.api.link.LinkErrorKind import LinkErrorKind
from tests.unit.conftest import write_tree

INDEX = """# Home

[Guide](guide.md#setup)
[Guide upper](guide.md#SETUP)
[Missing](missing.md)
[Missing anchor](missing.md#setup)
[Bad anchor](guide.md#nope)
[Self](#home)
[Self bad](#none)
[Site](https://example.com/nowhere.md)
[Mail](mailto:someone@example.com)
![Logo](img/logo.png)

```md
[In code](nowhere.md)
```
"""


@pytest.fixture
def docs(tmp_path):
    write_tree(
        tmp_path,
        {
            "docs/index.md": INDEX,
            "docs/guide.md": "# Guide\n\n## Setup\n",
            "docs/img/logo.png": "png",
        },
    )
    return tmp_path / "docs"


def _check(checker, path):
    checker.check_file(path, path.read_text(encoding="utf-8"))
    return checker.result()


def test_reports_missing_files_and_anchors(docs):
    checker = IntegrityChecker(docs, docs.parent)
    result = _check(checker, docs / "index.md")

    found = sorted((e.raw_destination, e.kind) for e in result.link_errors)
    assert found == [
        ("#none", LinkErrorKind.ANCHOR_NOT_FOUND),
        ("guide.md#nope", LinkErrorKind.ANCHOR_NOT_FOUND),
        ("missing.md", LinkErrorKind.FILE_NOT_FOUND),
        ("missing.md#setup", LinkErrorKind.FILE_NOT_FOUND),
    ]
    assert result.git_errors == ()


def test_error_details(docs):
    result = _check(IntegrityChecker(docs, docs.parent), docs / "index.md")
    by_raw = {e.raw_destination: e for e in result.link_errors}

    assert by_raw["missing.md"].resolved_target == docs / "missing.md"
    assert by_raw["missing.md"].source_file == docs / "index.md"
    assert by_raw["#none"].resolved_target is None
    assert by_raw["#none"].anchor == "none"
    assert by_raw["guide.md#nope"].anchor == "nope"


def test_valid_document_passes(docs):
    result = _check(IntegrityChecker(docs, docs.parent), docs / "guide.md")
    assert result.is_success


def test_absolute_links_resolve_against_repository_root(tmp_path):
    write_tree(
        tmp_path,
        {
            "docs/a.md": "[ok](/docs/b.md#b) [bad](/docs/c.md)\n",
            "docs/b.md": "# B\n",
        },
    )
    docs = tmp_path / "docs"
    result = _check(IntegrityChecker(docs, tmp_path), docs / "a.md")
    assert [(e.raw_destination, e.kind) for e in result.link_errors] == [("/docs/c.md", LinkErrorKind.FILE_NOT_FOUND)]


def test_percent_encoded_paths_and_anchors(tmp_path):
    write_tree(
        tmp_path,
        {
            "docs/a.md": "[space](my%20file.md#%C3%BAvod)\n",
            "docs/my file.md": "# Úvod\n",
        },
    )
    docs = tmp_path / "docs"
    assert _check(IntegrityChecker(docs, tmp_path), docs / "a.md").is_success


def test_front_matter_is_not_part_of_the_document(tmp_path):
    write_tree(tmp_path, {"docs/a.md": "---\ntitle: A\n---\n# Real\n\n[x](#real)\n"})
    docs = tmp_path / "docs"
    assert _check(IntegrityChecker(docs, tmp_path), docs / "a.md").is_success


def test_target_anchor_sets_are_cached(docs):
    cache = AnchorCache()
    checker = IntegrityChecker(docs, docs.parent, cache=cache)
    _check(checker, docs / "index.md")
    assert cache.has_anchor_set(docs / "guide.md")


def test_unreadable_target_yields_no_anchor_error(tmp_path):
    write_tree(tmp_path, {"docs/a.md": "[dir](sub#x)\n", "docs/sub/b.md": "# B\n"})
    docs = tmp_path / "docs"
    assert _check(IntegrityChecker(docs, tmp_path), docs / "a.md").is_success


def test_unreadable_document_is_recorded_as_untracked(docs):
    checker = IntegrityChecker(docs, docs.parent)
    checker.record_unreadable(docs / "broken.md", UnicodeDecodeError("utf-8", b"\xe9", 0, 1, "invalid"))
    result = checker.result()
    assert [(e.file, e.kind) for e in result.git_errors] == [(docs / "broken.md", GitErrorKind.UNTRACKED)]
    assert not result.is_success


def test_errors_accumulate_across_files(docs):
    checker = IntegrityChecker(docs, docs.parent)
    checker.check_file(docs / "a.md", "[x](nope.md)\n")
    checker.check_file(docs / "b.md", "[y](nope.md)\n")
    assert checker.result().error_count == 2


def test_file_outside_source_root_is_rejected(docs, tmp_path):
    with pytest.raises(ValueError, match="outside source root"):
        IntegrityChecker(docs, tmp_path).check_file(tmp_path / "other.md", "")


def test_none_arguments_rejected(docs):
    with pytest.raises(TypeError):
        IntegrityChecker(None, docs)  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        IntegrityChecker(docs, docs).check_file(docs / "a.md", None)  # type: ignore[arg-type]


def test_concurrent_checks(docs):
    checker = IntegrityChecker(docs, docs.parent)
    files = [(docs / f"f{i}.md", f"# F{i}\n\n[broken](missing{i}.md)\n") for i in range(20)]
    with ThreadPoolExecutor(max_workers=4) as executor:
        list(executor.map(lambda item: checker.check_file(*item), files))
    assert len(checker.result().link_errors) == 20


class TestGitStatus:
    def _git(self, committed=True, commit_hash="abc123"):
        git = MagicMock(spec=GitService)
        git.is_committed.return_value = committed
        git.current_commit_hash.return_value = commit_hash
        return git

    def test_clean_file(self, docs):
        checker = IntegrityChecker(docs, docs.parent, git=self._git())
        assert _check(checker, docs / "guide.md").git_errors == ()

    def test_modified_file_is_uncommitted(self, docs):
        checker = IntegrityChecker(docs, docs.parent, git=self._git(committed=False))
        [error] = _check(checker, docs / "guide.md").git_errors
        assert error.kind is GitErrorKind.UNCOMMITTED
        assert error.file == docs / "guide.md"

    def test_new_file_is_untracked(self, docs):
        checker = IntegrityChecker(docs, docs.parent, git=self._git(committed=False, commit_hash=None))
        [error] = _check(checker, docs / "guide.md").git_errors
        assert error.kind is GitErrorKind.UNTRACKED

    def test_git_failure_is_untracked(self, docs):
        git = self._git()
        git.is_committed.side_effect = GitCommandError("Git command timed out after 30 seconds")
        checker = IntegrityChecker(docs, docs.parent, git=git)
        result = _check(checker, docs / "guide.md")
        assert [e.kind for e in result.git_errors] == [GitErrorKind.UNTRACKED]
        assert result.link_errors == ()

    def test_git_is_skipped_without_service(self, docs):
        result = _check(IntegrityChecker(docs, docs.parent, git=None), docs / "guide.md")
        assert result.is_success

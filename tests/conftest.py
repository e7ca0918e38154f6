"""Shared pytest configuration and fixtures for all tests."""

import json
import shutil
import subprocess
from pathlib import Path

import pytest


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests without external processes")
    config.addinivalue_line("markers", "integration: tests that run git or the CLI end to end")
    for domain in ("config", "git", "link", "markdown"):
        config.addinivalue_line("markers", f"{domain}: tests for the {domain} API domain")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


# =============================================================================
# Configuration Helpers
# =============================================================================


def minimal_config_dict(source_dir: str = "~/docs") -> dict:
    """Minimal valid linkmirror configuration dict for testing."""
    return {
        "source_dir": source_dir,
        "file_regex": r"(?i).*\.md",
        "excluded_file_patterns": [],
        "translatable_front_matter_fields": ["title", "description"],
        "targets": [],
        "parallelism": 2,
        "git": {"timeout_secs": 10},
        "log": {"level": "DEBUG"},
    }


def write_config(home: Path, config: dict) -> Path:
    """Write ``config`` as config.json under ``home``."""
    home.mkdir(parents=True, exist_ok=True)
    config_path = home / "config.json"
    config_path.write_text(json.dumps(config, indent=2), encoding="utf-8")
    return config_path


def write_tree(root: Path, files: dict[str, str]) -> None:
    """Create files below ``root`` from a relative path -> content mapping."""
    for relative, content in files.items():
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture(name="minimal_config_dict")
def minimal_config_dict_fixture() -> dict:
    """Pytest fixture returning a fresh minimal config dict."""
    return minimal_config_dict()


@pytest.fixture
def linkmirror_home(tmp_path: Path, monkeypatch) -> Path:
    """Point LINKMIRROR_HOME at an empty temporary directory."""
    home = tmp_path / ".linkmirror"
    home.mkdir()
    monkeypatch.setenv("LINKMIRROR_HOME", str(home))
    return home


@pytest.fixture
def mirrored_trees(tmp_path: Path, linkmirror_home: Path) -> dict:
    """Source tree ``docs`` and Czech translation ``i18n/cs/docs`` with a config file.

    Returns dict with:
        - source_dir / target_dir: tree roots
        - config: the config dict written to LINKMIRROR_HOME
    """
    source_dir = tmp_path / "docs"
    target_dir = tmp_path / "i18n" / "cs" / "docs"
    source_dir.mkdir()
    target_dir.mkdir(parents=True)

    config = minimal_config_dict(str(source_dir))
    config["targets"] = [{"locale": "cs", "target_dir": str(target_dir)}]
    write_config(linkmirror_home, config)
    return {"source_dir": source_dir, "target_dir": target_dir, "config": config}


def _git(repo: Path, *args: str) -> None:
    subprocess.run(["git", *args], cwd=repo, check=True, capture_output=True, text=True)


@pytest.fixture
def git_repo(tmp_path: Path) -> Path:
    """A real, empty git repository with a committer identity."""
    if not shutil.which("git"):
        pytest.skip("git is not installed")
    repo = tmp_path / "repo"
    repo.mkdir()
    _git(repo, "init", "-q")
    _git(repo, "config", "user.email", "test@example.com")
    _git(repo, "config", "user.name", "Test")
    _git(repo, "config", "commit.gpgsign", "false")
    return repo


def git_commit_all(repo: Path, message: str = "commit") -> None:
    """Stage and commit everything in ``repo``."""
    _git(repo, "add", "-A")
    _git(repo, "commit", "-q", "-m", message)


# =============================================================================
# Test Helpers
# =============================================================================


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result



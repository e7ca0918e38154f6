"""Unit tests for linkmirror.api.config.LinkmirrorConfig."""

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from linkmirror.api.config.LinkmirrorConfig import LinkmirrorConfig
from linkmirror.api.config.TargetConfig import TargetConfig
from linkmirror.utils.normalize_path import normalize_path
from tests.unit.conftest import minimal_config_dict, write_config

pytestmark = pytest.mark.config


class TestValidation:
    def test_minimal_config(self, tmp_path):
        config = LinkmirrorConfig(**minimal_config_dict(str(tmp_path / "docs")))
        assert config.source_dir == str(normalize_path(tmp_path / "docs"))
        assert config.parallelism == 2
        assert config.git.timeout_secs == 10
        assert config.log.level == "DEBUG"

    def test_defaults(self, tmp_path):
        config = LinkmirrorConfig(source_dir=str(tmp_path))
        assert config.file_regex == r"(?i).*\.md"
        assert config.excluded_file_patterns == []
        assert config.targets == []
        assert config.parallelism == 4
        assert config.git.timeout_secs == 30
        assert config.log.level == "INFO"

    def test_paths_are_normalized(self, tmp_path):
        config = LinkmirrorConfig(
            source_dir=str(tmp_path / "docs" / ".." / "docs"),
            targets=[{"locale": "cs", "target_dir": str(tmp_path / "i18n" / "." / "cs")}],
        )
        assert config.source_dir == str(normalize_path(tmp_path / "docs"))
        assert config.targets[0].target_dir == str(normalize_path(tmp_path / "i18n" / "cs"))

    def test_unknown_field_rejected(self, tmp_path):
        with pytest.raises(ValidationError):
            LinkmirrorConfig(source_dir=str(tmp_path), unexpected=True)

    def test_invalid_regex_rejected(self, tmp_path):
        with pytest.raises(ValidationError, match="invalid regex"):
            LinkmirrorConfig(source_dir=str(tmp_path), file_regex="[unclosed")
        with pytest.raises(ValidationError, match="invalid regex"):
            LinkmirrorConfig(source_dir=str(tmp_path), excluded_file_patterns=["ok", "(bad"])

    def test_duplicate_locales_rejected(self, tmp_path):
        targets = [
            {"locale": "cs", "target_dir": str(tmp_path / "a")},
            {"locale": "cs", "target_dir": str(tmp_path / "b")},
        ]
        with pytest.raises(ValidationError, match="duplicate target locale"):
            LinkmirrorConfig(source_dir=str(tmp_path), targets=targets)

    @pytest.mark.parametrize(
        "overrides",
        [
            {"parallelism": 0},
            {"git": {"timeout_secs": 0}},
            {"log": {"level": "TRACE"}},
            {"targets": [{"locale": "", "target_dir": "/tmp/x"}]},
        ],
    )
    def test_out_of_range_values_rejected(self, tmp_path, overrides):
        with pytest.raises(ValidationError):
            LinkmirrorConfig(source_dir=str(tmp_path), **overrides)


class TestLoad:
    def test_load_from_home(self, linkmirror_home, tmp_path):
        write_config(linkmirror_home, minimal_config_dict(str(tmp_path / "docs")))
        assert LinkmirrorConfig.get_config_path() == linkmirror_home / "config.json"
        config = LinkmirrorConfig.load()
        assert config.source_dir == str(normalize_path(tmp_path / "docs"))

    def test_load_explicit_path(self, tmp_path):
        path = write_config(tmp_path / "elsewhere", minimal_config_dict(str(tmp_path)))
        assert LinkmirrorConfig.load(path).source_dir == str(normalize_path(tmp_path))

    def test_missing_file(self, linkmirror_home):
        with pytest.raises(ValueError, match="Configuration file not found"):
            LinkmirrorConfig.load()

    def test_invalid_json(self, linkmirror_home):
        (linkmirror_home / "config.json").write_text("{invalid json", encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON"):
            LinkmirrorConfig.load()

    def test_non_object_json(self, linkmirror_home):
        (linkmirror_home / "config.json").write_text(json.dumps(["a"]), encoding="utf-8")
        with pytest.raises(ValueError, match="must be a JSON object"):
            LinkmirrorConfig.load()

    def test_validation_error_names_field(self, linkmirror_home, tmp_path):
        config = minimal_config_dict(str(tmp_path))
        config["git"] = {"timeout_secs": -1}
        write_config(linkmirror_home, config)
        with pytest.raises(ValueError, match=r"Configuration validation error: git\.timeout_secs"):
            LinkmirrorConfig.load()


class TestAccessors:
    @pytest.fixture
    def config(self, tmp_path) -> LinkmirrorConfig:
        data = minimal_config_dict(str(tmp_path / "docs"))
        data["excluded_file_patterns"] = [r"drafts/.*"]
        data["targets"] = [
            {"locale": "cs", "target_dir": str(tmp_path / "i18n" / "cs")},
            {"locale": "de", "target_dir": str(tmp_path / "i18n" / "de")},
        ]
        return LinkmirrorConfig(**data)

    def test_target_lookup(self, config, tmp_path):
        target = config.target("de")
        assert isinstance(target, TargetConfig)
        assert Path(target.target_dir) == normalize_path(tmp_path / "i18n" / "de")

    def test_unknown_target(self, config):
        with pytest.raises(ValueError, match=r"Unknown target locale 'fr' \(configured: cs, de\)"):
            config.target("fr")

    def test_selector(self, config, tmp_path):
        selector = config.selector()
        assert selector.matches("guide/intro.md")
        assert not selector.matches("drafts/intro.md")
        assert not selector.matches("image.png")
        assert selector.is_translatable(tmp_path / "docs" / "a.md")

    def test_to_dict_sections(self, config):
        assert list(config.to_dict()) == [
            "source_dir",
            "file_regex",
            "excluded_file_patterns",
            "translatable_front_matter_fields",
            "targets",
            "parallelism",
            "git",
            "log",
        ]

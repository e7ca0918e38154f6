"""Top-level linkmirror configuration."""

import json
import re
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ...constants import CONFIG_FILE_NAME, DEFAULT_FILE_REGEX, DEFAULT_PARALLELISM
from ...utils.get_home_dir import get_home_dir
from ...utils.normalize_path import normalize_path
from ..link.DocumentSelector import DocumentSelector
from .GitConfig import GitConfig
from .LogConfig import LogConfig
from .TargetConfig import TargetConfig


class LinkmirrorConfig(BaseModel):
    """Source tree, translated targets and run settings."""

    model_config = ConfigDict(extra="forbid")

    source_dir: str = Field(..., description="Root of the source document tree")
    file_regex: str = Field(DEFAULT_FILE_REGEX, description="Regex full-matched against root-relative paths")
    excluded_file_patterns: list[str] = Field(default_factory=list, description="Regexes of excluded paths")
    translatable_front_matter_fields: list[str] = Field(
        default_factory=list, description="Front matter fields whose text contains translated links"
    )
    targets: list[TargetConfig] = Field(default_factory=list, description="Translated trees")
    parallelism: int = Field(DEFAULT_PARALLELISM, ge=1, description="Worker threads for per-file processing")
    git: GitConfig = Field(default_factory=GitConfig)
    log: LogConfig = Field(default_factory=LogConfig)

    @field_validator("source_dir")
    @classmethod
    def _normalize_source_dir(cls, v: str) -> str:
        return str(normalize_path(v))

    @field_validator("file_regex")
    @classmethod
    def _validate_file_regex(cls, v: str) -> str:
        try:
            re.compile(v)
        except re.error as e:
            raise ValueError(f"invalid regex '{v}': {e}") from e
        return v

    @field_validator("excluded_file_patterns")
    @classmethod
    def _validate_excluded_patterns(cls, v: list[str]) -> list[str]:
        for pattern in v:
            try:
                re.compile(pattern)
            except re.error as e:
                raise ValueError(f"invalid regex '{pattern}': {e}") from e
        return v

    @field_validator("targets")
    @classmethod
    def _unique_locales(cls, v: list[TargetConfig]) -> list[TargetConfig]:
        locales = [target.locale for target in v]
        duplicates = sorted({locale for locale in locales if locales.count(locale) > 1})
        if duplicates:
            raise ValueError(f"duplicate target locale(s): {', '.join(duplicates)}")
        return v

    @classmethod
    def get_config_path(cls) -> Path:
        """Get path to config file based on LINKMIRROR_HOME or default to ~/.linkmirror."""
        return get_home_dir(CONFIG_FILE_NAME)

    @classmethod
    def load(cls, path: Path | None = None) -> "LinkmirrorConfig":
        """Load and validate config from file.

        Raises:
            ValueError: If config file not found, invalid JSON, or validation error
        """
        path = Path(path) if path is not None else cls.get_config_path()

        if not path.exists():
            raise ValueError(f"Configuration file not found at {path}")

        try:
            with path.open(encoding="utf-8") as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}: {e}") from e

        if not isinstance(raw, dict):
            raise ValueError(f"Configuration in {path} must be a JSON object")

        try:
            return cls(**raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": (), "type": "value_error", "input": None}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ValueError(f"Configuration validation error: {detail}") from e

    def selector(self) -> DocumentSelector:
        """Document selector over the source directory."""
        return DocumentSelector(Path(self.source_dir), self.file_regex, self.excluded_file_patterns)

    def target(self, locale: str) -> TargetConfig:
        """Configured target for ``locale``.

        Raises:
            ValueError: If no target has that locale
        """
        for target in self.targets:
            if target.locale == locale:
                return target
        known = ", ".join(t.locale for t in self.targets) or "none"
        raise ValueError(f"Unknown target locale '{locale}' (configured: {known})")

    def to_dict(self) -> dict[str, Any]:
        """Convert the configuration to a dictionary keyed by section."""
        return self.model_dump(mode="python")

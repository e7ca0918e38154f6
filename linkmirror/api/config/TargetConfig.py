"""Translated tree configuration."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ...utils.normalize_path import normalize_path


class TargetConfig(BaseModel):
    """One translated variant of the source tree."""

    model_config = ConfigDict(extra="forbid")

    locale: str = Field(..., min_length=1, description="Locale code of the translation (e.g. 'cs')")
    target_dir: str = Field(..., description="Root of the translated tree mirroring the source directory")

    @field_validator("target_dir")
    @classmethod
    def _normalize_target_dir(cls, v: str) -> str:
        return str(normalize_path(v))

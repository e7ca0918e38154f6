"""Output schemas for link commands."""

from pydantic import BaseModel, Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class GitErrorEntry(BaseModel):
    file: str = Field(..., description="File with a git status problem")
    kind: str = Field(..., description="'untracked' or 'uncommitted'")


class LinkErrorEntry(BaseModel):
    source_file: str = Field(..., description="File containing the broken link")
    raw_destination: str = Field(..., description="Link destination as written")
    resolved_target: str | None = Field(..., description="Resolved target path, null for anchor-only links")
    anchor: str | None = Field(..., description="Anchor part of the link, null if none")
    kind: str = Field(..., description="'file_not_found' or 'anchor_not_found'")


class TargetFixReport(BaseModel):
    """Correction report for one translated tree."""

    locale: str = Field(..., description="Locale of the translated tree")
    target_dir: str = Field(..., description="Root of the translated tree")
    files_processed: int = Field(..., ge=0)
    files_changed: int = Field(..., ge=0, description="Files whose content changed")
    asset_corrections: int = Field(..., ge=0)
    anchor_corrections: int = Field(..., ge=0)
    front_matter_corrections: int = Field(..., ge=0)
    correction_errors: list[str] = Field(default_factory=list, description="Per-file correction problems")
    link_errors: list[LinkErrorEntry] = Field(default_factory=list, description="Links still broken after correction")


class LinkCheckOutput(BaseOutputSchema):
    """Output schema for link check command.

    Output structure:
    - errors / warnings: list[str]
    - root: str - checked tree
    - locale: str - target locale, empty string for the source tree
    - files_checked: int
    - git_errors: list of {file, kind}
    - link_errors: list of {source_file, raw_destination, resolved_target, anchor, kind}
    """

    root: str = Field(..., description="Root of the checked tree")
    locale: str = Field(..., description="Target locale, empty string for the source tree")
    files_checked: int = Field(..., ge=0)
    git_errors: list[GitErrorEntry] = Field(default_factory=list)
    link_errors: list[LinkErrorEntry] = Field(default_factory=list)


class LinkFixOutput(BaseOutputSchema):
    """Output schema for link fix command."""

    dry_run: bool = Field(..., description="True if no files were written")
    targets: list[TargetFixReport] = Field(default_factory=list)
    total_corrections: int = Field(..., ge=0)


register_output_schema("link", "check", LinkCheckOutput)
register_output_schema("link", "fix", LinkFixOutput)

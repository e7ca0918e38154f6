"""Git invocation configuration."""

from pydantic import BaseModel, ConfigDict, Field

from ...constants import DEFAULT_GIT_TIMEOUT_SECS


class GitConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    timeout_secs: float = Field(DEFAULT_GIT_TIMEOUT_SECS, gt=0, description="Upper bound for one git command")

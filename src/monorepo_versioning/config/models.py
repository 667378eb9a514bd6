"""Configuration models for monorepo-versioning."""

from __future__ import annotations

import re
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, SecretStr, field_validator

_COMPONENT_PATTERN = re.compile(r"^[A-Za-z0-9][A-Za-z0-9_.-]*$")
_REPOSITORY_PATTERN = re.compile(r"^[^/\s]+/[^/\s]+$")


class GitHubConfig(BaseModel):
    """GitHub API access."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    token: SecretStr | None = Field(default=None, description="API token")
    api_url: str = Field(
        default="https://api.github.com",
        description="API base URL (GitHub Enterprise Server uses <host>/api/v3)",
    )
    timeout: float = Field(default=30.0, gt=0, description="Request timeout in seconds")


class ActionConfig(BaseModel):
    """Everything a versioning run needs to know about its component and revision."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    repository: str = Field(description="Repository as owner/name")
    component: str = Field(description="Component identifier, matched against commit scopes")
    label: str | None = Field(default=None, description="Human-readable component name")
    branch: str = Field(description="Branch or tag being built")
    revision: str = Field(description="Full hash of the commit being released")
    initial_version: str = Field(default="1.0.0", description="First version of a component")
    default_branch: str = Field(default="main", description="Branch that produces final versions")
    dry_run: bool = Field(default=False, description="Compute the version without releasing")
    output_path: Path | None = Field(default=None, description="GitHub Actions output file")
    github: GitHubConfig = Field(default_factory=GitHubConfig)

    @field_validator("repository")
    @classmethod
    def _validate_repository(cls, value: str) -> str:
        if not _REPOSITORY_PATTERN.match(value):
            raise ValueError(f"repository must be in the form owner/name, got {value!r}")
        return value

    @field_validator("component")
    @classmethod
    def _validate_component(cls, value: str) -> str:
        if not _COMPONENT_PATTERN.match(value):
            raise ValueError(
                "component may only contain letters, digits, '.', '_' and '-', "
                f"got {value!r}"
            )
        return value

    @field_validator("branch", "revision", "default_branch")
    @classmethod
    def _validate_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be empty")
        return value

    @property
    def owner(self) -> str:
        return self.repository.split("/", 1)[0]

    @property
    def repo(self) -> str:
        return self.repository.split("/", 1)[1]

    @property
    def is_prerelease_branch(self) -> bool:
        """True when versions built from this branch are pre-releases."""
        return self.branch != self.default_branch

    @property
    def display_name(self) -> str:
        """Name used in release titles: the label if set, else the component."""
        return (self.label or self.component).title()

"""Configuration management for monorepo-versioning."""

from __future__ import annotations

from monorepo_versioning.config.loader import is_truthy, load_config
from monorepo_versioning.config.models import ActionConfig, GitHubConfig

__all__ = [
    "ActionConfig",
    "GitHubConfig",
    "is_truthy",
    "load_config",
]

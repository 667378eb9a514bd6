"""Core business logic for monorepo-versioning.

This module contains the fundamental building blocks:
- Semantic version parsing and bumping
- Conventional commit classification
- Component release/commit selection and the commit window
- Next-version decision
- Release notes generation
"""

from __future__ import annotations

from monorepo_versioning.core.changelog import format_changelog_entry, generate_release_notes
from monorepo_versioning.core.commits import (
    ConventionalCommit,
    ConventionalCommitParser,
    parse_conventional_commit,
)
from monorepo_versioning.core.components import (
    component_prefix,
    filter_commits_for_component,
    filter_releases_for_component,
    prefix_with_component,
    strip_component_prefix,
)
from monorepo_versioning.core.resolver import (
    VersionDecision,
    calculate_bump,
    existing_version_or_initial,
    resolve_version,
)
from monorepo_versioning.core.version import BumpType, Version, parse_version
from monorepo_versioning.core.window import ChangeWindow, resolve_change_window

__all__ = [
    # Version
    "BumpType",
    # Window
    "ChangeWindow",
    # Commits
    "ConventionalCommit",
    "ConventionalCommitParser",
    "Version",
    # Resolver
    "VersionDecision",
    "calculate_bump",
    # Components
    "component_prefix",
    "existing_version_or_initial",
    "filter_commits_for_component",
    "filter_releases_for_component",
    # Changelog
    "format_changelog_entry",
    "generate_release_notes",
    "parse_conventional_commit",
    "parse_version",
    "prefix_with_component",
    "resolve_change_window",
    "resolve_version",
    "strip_component_prefix",
]

"""Selection of the releases and commits that belong to one component.

Component releases are tagged ``<component>-<version>`` with the component
name lowercased; commits belong to a component when their conventional
commit scope names it. Both comparisons are case-insensitive.
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from monorepo_versioning.core.commits import ConventionalCommit
    from monorepo_versioning.vcs.models import Release

logger = logging.getLogger(__name__)

# Drafts have no publish date and sort after every published release
_UNPUBLISHED = datetime.min.replace(tzinfo=UTC)


def component_prefix(component: str) -> str:
    """Tag prefix for a component, e.g. ``Foo`` -> ``foo-``."""
    return f"{component.lower()}-"


def prefix_with_component(component: str, value: str) -> str:
    """Prefix a version string with the component's tag prefix."""
    return f"{component_prefix(component)}{value}"


def strip_component_prefix(tag: str, component: str) -> str:
    """Remove the component's tag prefix from a tag, if present."""
    prefix = component_prefix(component)
    if tag.lower().startswith(prefix):
        return tag[len(prefix) :]
    return tag


def filter_releases_for_component(component: str, releases: Iterable[Release]) -> list[Release]:
    """Select the releases of a component, latest first.

    Releases are sorted by publish date, newest first. Releases published at
    the same instant are ordered by tag name (descending) so the "latest"
    release is always the same one for the same input.

    Args:
        component: Component identifier
        releases: All releases of the repository

    Returns:
        Matching releases, newest first
    """
    prefix = component_prefix(component)
    matching = [release for release in releases if release.tag_name.lower().startswith(prefix)]

    matching.sort(
        key=lambda release: (release.published_at or _UNPUBLISHED, release.tag_name),
        reverse=True,
    )
    return matching


def filter_commits_for_component(
    component: str, commits: Iterable[ConventionalCommit]
) -> list[ConventionalCommit]:
    """Select the conventional commits scoped to a component.

    Commits without a scope never match.
    """
    matching = []
    for commit in commits:
        if commit.matches_scope(component):
            matching.append(commit)
        else:
            logger.debug("Ignoring commit scoped to %r: %s", commit.scope, commit.description)
    return matching

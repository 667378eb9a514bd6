"""Next-version decision for a component.

The bump level is derived from the conventional commits scoped to the
component since its latest release:

- any breaking change -> MAJOR
- otherwise any ``feat`` -> MINOR
- otherwise any ``fix`` -> PATCH
- otherwise no new version

Versions built from a branch other than the default branch get a
pre-release label made of the short revision hash.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from monorepo_versioning.core.components import strip_component_prefix
from monorepo_versioning.core.version import BumpType, Version
from monorepo_versioning.exceptions import RevisionTooShortError

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from monorepo_versioning.core.commits import ConventionalCommit
    from monorepo_versioning.vcs.models import Release

logger = logging.getLogger(__name__)

SHORT_REVISION_LENGTH = 7


@dataclass(frozen=True)
class VersionDecision:
    """A new version to release.

    Attributes:
        version: The version to create
        first_version: True if the component had no release before and
            ``version`` is the configured initial version
    """

    version: Version
    first_version: bool

    @property
    def is_prerelease(self) -> bool:
        return self.version.is_prerelease


def existing_version_or_initial(
    component: str,
    releases: Sequence[Release],
    initial_version: str,
) -> tuple[Version, bool]:
    """Get the latest released version of a component, or its initial version.

    Args:
        component: Component identifier
        releases: The component's releases, newest first
        initial_version: Version to use when there is no release yet

    Returns:
        Tuple of (version, first_version)

    Raises:
        VersionParseError: If the initial version or the latest tag is not
            a valid version
    """
    if not releases:
        logger.info("No existing releases for component, will use initial version")
        return Version.parse(initial_version), True

    latest_release = releases[0]
    logger.info("Using %s as latest release for version comparison", latest_release.tag_name)
    return Version.parse(strip_component_prefix(latest_release.tag_name, component)), False


def calculate_bump(commits: Iterable[ConventionalCommit]) -> BumpType:
    """Determine the bump level from a component's commits.

    Only breaking changes, features and fixes count; every other commit
    type is ignored.
    """
    feature_found = False
    fix_found = False

    for commit in commits:
        if commit.is_breaking:
            # Nothing outranks a breaking change
            return BumpType.MAJOR

        if commit.is_feat:
            feature_found = True

        if commit.is_fix:
            fix_found = True

    if feature_found:
        return BumpType.MINOR
    if fix_found:
        return BumpType.PATCH
    return BumpType.NONE


def prerelease_identifier(revision: str) -> str:
    """Short revision hash used as pre-release label.

    Raises:
        RevisionTooShortError: If the revision has fewer than 7 characters
    """
    if len(revision) < SHORT_REVISION_LENGTH:
        raise RevisionTooShortError(revision, SHORT_REVISION_LENGTH)
    return revision[:SHORT_REVISION_LENGTH]


def resolve_version(
    current_version: Version,
    commits: Sequence[ConventionalCommit],
    *,
    first_version: bool,
    branch: str,
    default_branch: str,
    revision: str,
) -> VersionDecision | None:
    """Decide the next version of a component.

    Args:
        current_version: Latest released version, or the initial version
        commits: Conventional commits scoped to the component
        first_version: Whether the component has no release yet
        branch: Branch the version is built from
        default_branch: The repository's default branch
        revision: Full hash of the revision being released

    Returns:
        The decision, or None if no new version is warranted

    Raises:
        RevisionTooShortError: If a pre-release label is needed and the
            revision is too short
        VersionParseError: If the short revision is not a valid pre-release
            label, such as an all-digit hash with a leading zero
    """
    if first_version:
        # The initial version is used as-is, whatever the commits contain
        next_version = current_version
        logger.info("No existing version found for component, will generate %s", next_version)
    else:
        bump_type = calculate_bump(commits)
        if bump_type == BumpType.NONE:
            logger.info("No releasable changes found for component")
            return None
        next_version = current_version.bump(bump_type)
        logger.info("Bumping %s version: %s -> %s", bump_type, current_version, next_version)

    if branch != default_branch:
        logger.info(
            "Current branch (%s) is not the default branch (%s), this version will be a pre-release",
            branch,
            default_branch,
        )
        next_version = next_version.with_prerelease(prerelease_identifier(revision))

    return VersionDecision(version=next_version, first_version=first_version)

"""Versioning run for one component.

Ties the core together with the release and commit stores: find the
component's latest release, list the commits made since, decide the next
version and publish it as a release with generated notes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from monorepo_versioning.core.changelog import generate_release_notes
from monorepo_versioning.core.commits import ConventionalCommitParser
from monorepo_versioning.core.components import (
    filter_commits_for_component,
    filter_releases_for_component,
    prefix_with_component,
)
from monorepo_versioning.core.resolver import existing_version_or_initial, resolve_version
from monorepo_versioning.core.window import resolve_change_window
from monorepo_versioning.exceptions import ReleaseExistsError
from monorepo_versioning.vcs.models import NewRelease

if TYPE_CHECKING:
    from monorepo_versioning.config.models import ActionConfig
    from monorepo_versioning.core.version import Version
    from monorepo_versioning.vcs.models import Release
    from monorepo_versioning.vcs.protocols import CommitStore, MessageClassifier, ReleaseStore

logger = logging.getLogger(__name__)

NO_VERSION = "0.0.0-none"


@dataclass(frozen=True)
class ReleaseOutcome:
    """Result of a versioning run.

    Attributes:
        created: Whether a new version was generated
        version: The new version, None if no version was generated
        first_version: Whether this is the component's first version
        tag: Release tag of the new version
        dry_run: Whether release creation was skipped
        release_notes: Generated release notes (empty on dry runs)
    """

    created: bool
    version: Version | None = None
    first_version: bool = False
    tag: str | None = None
    dry_run: bool = False
    release_notes: str = ""

    @property
    def prerelease(self) -> bool:
        return self.version is not None and self.version.is_prerelease

    @property
    def version_string(self) -> str:
        return str(self.version) if self.version is not None else NO_VERSION


def release_tag(component: str, version: Version) -> str:
    """Release tag of a component version, e.g. ``foo-1.2.3``."""
    return prefix_with_component(component, str(version)).lower()


def release_title(config: ActionConfig, version: Version) -> str:
    """Release title, e.g. ``Foo: 1.2.3``."""
    return f"{config.display_name}: {version}"


def generate_version(
    config: ActionConfig,
    releases: ReleaseStore,
    commits: CommitStore,
    classifier: MessageClassifier | None = None,
    *,
    dry_run: bool | None = None,
) -> ReleaseOutcome:
    """Generate the next version of a component and release it.

    Args:
        config: Run configuration
        releases: Release store to read existing releases from and create
            the new one in
        commits: Commit store
        classifier: Commit message classifier, defaults to the
            conventional commit parser
        dry_run: Skip release creation, defaults to ``config.dry_run``

    Returns:
        The outcome of the run

    Raises:
        MonorepoVersioningError: On any fatal condition; no release is
            created in that case
    """
    if classifier is None:
        classifier = ConventionalCommitParser()
    if dry_run is None:
        dry_run = config.dry_run

    all_releases = releases.list_releases()
    component_releases = filter_releases_for_component(config.component, all_releases)
    current_version, first_version = existing_version_or_initial(
        config.component, component_releases, config.initial_version
    )

    previous_change_time = None
    if component_releases:
        latest_release = component_releases[0]
        logger.info("Using %s as latest release for change time comparison", latest_release.tag_name)
        previous_change_time = commits.get_commit_time(latest_release.target_commitish)
    current_change_time = commits.get_commit_time(config.revision)

    window = resolve_change_window(previous_change_time, current_change_time)
    new_commits = commits.list_commits(config.branch, window.since, window.until)

    classified = [classifier.classify(commit.message) for commit in new_commits]
    component_commits = filter_commits_for_component(
        config.component, [commit for commit in classified if commit is not None]
    )

    decision = resolve_version(
        current_version,
        component_commits,
        first_version=first_version,
        branch=config.branch,
        default_branch=config.default_branch,
        revision=config.revision,
    )
    if decision is None:
        return ReleaseOutcome(created=False, dry_run=dry_run)

    tag = release_tag(config.component, decision.version)
    if dry_run:
        logger.info("Dry run, not creating release %s", tag)
        return ReleaseOutcome(
            created=True,
            version=decision.version,
            first_version=decision.first_version,
            tag=tag,
            dry_run=True,
        )

    _ensure_tag_available(tag, all_releases)

    release_notes = generate_release_notes(
        new_commits, config.component, classifier, version=decision.version
    )
    releases.create_release(
        NewRelease(
            tag_name=tag,
            name=release_title(config, decision.version),
            target_commitish=config.revision,
            body=release_notes,
            prerelease=config.is_prerelease_branch,
        )
    )

    return ReleaseOutcome(
        created=True,
        version=decision.version,
        first_version=decision.first_version,
        tag=tag,
        release_notes=release_notes,
    )


def _ensure_tag_available(tag: str, releases: list[Release]) -> None:
    # Only guards against releases visible when the run started
    if any(release.tag_name.lower() == tag for release in releases):
        raise ReleaseExistsError(tag)

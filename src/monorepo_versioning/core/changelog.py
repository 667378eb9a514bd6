"""Release notes generation for a component version.

GitHub's auto-generated release notes cover the whole repository, so the
notes are built here from the commits scoped to the component. Changes
are grouped into breaking changes, features and fixes, followed by the
list of contributors. Sections without entries are left out.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from monorepo_versioning.core.commits import parse_conventional_commit

if TYPE_CHECKING:
    from collections.abc import Iterable

    from monorepo_versioning.core.commits import ConventionalCommit
    from monorepo_versioning.core.version import Version
    from monorepo_versioning.vcs.models import Commit
    from monorepo_versioning.vcs.protocols import MessageClassifier

logger = logging.getLogger(__name__)

RELEASE_NOTES_TEMPLATE = """
> Below is the changelog for this version. Changes are categorised by the type of change (breaking change, new feature, or bugfix). If there isn't a heading for a type of change, there were no relevant changes.
{breaking}
{features}
{fixes}
{contributors}
"""

BREAKING_HEADER = (
    "### :hammer: Breaking Changes\n"
    "_Breaking changes indicate that an existing behaviour or feature no longer works as "
    "before. Pay close attention to any listed breaking changes, and make sure they are "
    "acknowledged or mitigated before deploying this version._\n"
)

FEATURES_HEADER = (
    "### :bulb: Features\n"
    "_Feature changes contain some new functionality. Existing behaviour should not be "
    "affected._\n"
)

FIXES_HEADER = (
    "### :construction_worker: Fixes\n"
    "_Fixes some unintended behaviour from a previous version. You should familiarise "
    "yourself with these changes to understand any problems you may have experienced in "
    "previous versions._\n"
)

CONTRIBUTORS_HEADER = (
    "### :heart_eyes: Contributors\n"
    "_These people contributed to this version of the component - thank you! Note: "
    "GitHub's auto-generated contributor list may also include contributors to other "
    "components._\n"
)


def format_changelog_entry(commit: Commit, conventional_commit: ConventionalCommit) -> str:
    """Format a commit as a release notes entry.

    Args:
        commit: The commit
        conventional_commit: Its classified message

    Returns:
        Markdown list item, newline terminated
    """
    if commit.sha:
        # Shortened SHA, as GitHub displays it
        return (
            f"* [`{commit.short_sha}`]({commit.html_url}) "
            f"{conventional_commit.description} (@{commit.author_login})\n"
        )
    return f"* [{commit.html_url}] {conventional_commit.description} (@{commit.author_login})\n"


def _section(header: str, entries: list[str]) -> str:
    if not entries:
        return ""
    return header + "".join(entries)


def generate_release_notes(
    commits: Iterable[Commit],
    component: str,
    classifier: MessageClassifier | None = None,
    *,
    version: Version | None = None,
) -> str:
    """Generate release notes from the commits of a release window.

    The version is only logged; the notes do not name it.

    Args:
        commits: All commits in the window, of every component
        component: Component the release is for
        classifier: Commit message classifier, defaults to the conventional
            commit parser
        version: Version the notes are for

    Returns:
        Markdown release notes
    """
    classify = classifier.classify if classifier is not None else parse_conventional_commit
    logger.debug("Generating release notes for %s %s", component, version or "(unknown version)")

    breaking: list[str] = []
    features: list[str] = []
    fixes: list[str] = []
    contributors: dict[str, None] = {}

    for commit in commits:
        conventional_commit = classify(commit.message)
        if conventional_commit is None:
            logger.debug("Skipping non-conventional commit %s", commit.short_sha)
            continue

        if not conventional_commit.matches_scope(component):
            continue

        entry = format_changelog_entry(commit, conventional_commit)
        if conventional_commit.is_breaking:
            breaking.append(entry)
        if conventional_commit.is_feat:
            features.append(entry)
        if conventional_commit.is_fix:
            fixes.append(entry)

        contributors.setdefault(commit.author_login, None)

    return RELEASE_NOTES_TEMPLATE.format(
        breaking=_section(BREAKING_HEADER, breaking),
        features=_section(FEATURES_HEADER, features),
        fixes=_section(FIXES_HEADER, fixes),
        contributors=_section(CONTRIBUTORS_HEADER, [f"* @{login}\n" for login in contributors]),
    )

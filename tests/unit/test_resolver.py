"""Tests for the next-version decision."""

from __future__ import annotations

import itertools

import pytest
from helpers import make_release

from monorepo_versioning.core.commits import ConventionalCommit
from monorepo_versioning.core.resolver import (
    VersionDecision,
    calculate_bump,
    existing_version_or_initial,
    prerelease_identifier,
    resolve_version,
)
from monorepo_versioning.core.version import BumpType, Version
from monorepo_versioning.exceptions import RevisionTooShortError, VersionParseError

REVISION = "abcdef1234"

FEAT = ConventionalCommit("feat", "add feature", scope="foo")
FIX = ConventionalCommit("fix", "fix bug", scope="foo")
BREAKING = ConventionalCommit("feat", "redesign", scope="foo", is_breaking=True)
CHORE = ConventionalCommit("chore", "tidy up", scope="foo")
REFACTOR = ConventionalCommit("refactor", "restructure", scope="foo")


def _resolve(commits, *, current="1.2.3", first_version=False, branch="main"):
    return resolve_version(
        Version.parse(current),
        commits,
        first_version=first_version,
        branch=branch,
        default_branch="main",
        revision=REVISION,
    )


class TestExistingVersionOrInitial:
    """Tests for existing_version_or_initial()."""

    def test_no_releases_uses_initial(self):
        """The initial version is used when there is no release."""
        assert existing_version_or_initial("foo", [], "1.0.0") == (Version(1, 0, 0), True)

    def test_latest_release_version(self):
        """The version comes from the first (latest) release's tag."""
        releases = [make_release("foo-1.2.3"), make_release("foo-1.2.2")]

        assert existing_version_or_initial("foo", releases, "1.0.0") == (Version(1, 2, 3), False)

    def test_prerelease_tag(self):
        releases = [make_release("foo-1.2.4-abcdef1")]

        version, _ = existing_version_or_initial("foo", releases, "1.0.0")
        assert version == Version(1, 2, 4, prerelease="abcdef1")

    def test_invalid_initial_version(self):
        """A malformed initial version is fatal."""
        with pytest.raises(VersionParseError):
            existing_version_or_initial("foo", [], "one")

    def test_invalid_tag(self):
        """A tag that is not a version after stripping the prefix is fatal."""
        with pytest.raises(VersionParseError):
            existing_version_or_initial("foo", [make_release("foo-bar-1.0.0")], "1.0.0")


class TestCalculateBump:
    """Tests for calculate_bump()."""

    def test_empty_commits_returns_none(self):
        assert calculate_bump([]) == BumpType.NONE

    def test_feat_returns_minor(self):
        assert calculate_bump([FEAT]) == BumpType.MINOR

    def test_fix_returns_patch(self):
        assert calculate_bump([FIX]) == BumpType.PATCH

    def test_breaking_returns_major(self):
        assert calculate_bump([BREAKING]) == BumpType.MAJOR

    def test_feat_takes_precedence_over_fix(self):
        assert calculate_bump([FIX, FEAT]) == BumpType.MINOR
        assert calculate_bump([FEAT, FIX]) == BumpType.MINOR

    @pytest.mark.parametrize(
        "commits",
        [list(p) for p in itertools.permutations([FEAT, FIX, BREAKING, CHORE])],
    )
    def test_breaking_always_wins(self, commits):
        """Any breaking change means MAJOR, regardless of order."""
        assert calculate_bump(commits) == BumpType.MAJOR

    def test_breaking_fix(self):
        """Breaking changes of any type are MAJOR."""
        assert calculate_bump([ConventionalCommit("fix", "x", "foo", is_breaking=True)]) == (
            BumpType.MAJOR
        )

    def test_other_types_ignored(self):
        """Non feat/fix types never bump."""
        assert calculate_bump([CHORE]) == BumpType.NONE

    def test_refactor_does_not_bump(self):
        """Refactor commits alone do not produce a version."""
        assert calculate_bump([REFACTOR]) == BumpType.NONE


class TestPrereleaseIdentifier:
    """Tests for prerelease_identifier()."""

    def test_short_hash(self):
        assert prerelease_identifier("abcdef1234567890") == "abcdef1"

    def test_exactly_seven(self):
        assert prerelease_identifier("abcdef1") == "abcdef1"

    def test_too_short(self):
        with pytest.raises(RevisionTooShortError):
            prerelease_identifier("abc")


class TestResolveVersion:
    """Tests for resolve_version()."""

    def test_first_version_on_default_branch(self):
        """The initial version is released as-is on the default branch."""
        decision = _resolve([], current="1.0.0", first_version=True)

        assert decision == VersionDecision(version=Version(1, 0, 0), first_version=True)
        assert not decision.is_prerelease

    def test_first_version_ignores_commits(self):
        """No bump is applied to the initial version."""
        decision = _resolve([BREAKING, FEAT], current="1.0.0", first_version=True)

        assert decision is not None
        assert decision.version == Version(1, 0, 0)

    def test_first_version_on_other_branch(self):
        """The initial version is a pre-release off the default branch."""
        decision = _resolve([], current="1.0.0", first_version=True, branch="feature-1")

        assert decision is not None
        assert str(decision.version) == "1.0.0-abcdef1"
        assert decision.is_prerelease

    def test_patch(self):
        decision = _resolve([FIX])

        assert decision == VersionDecision(version=Version(1, 2, 4), first_version=False)

    def test_minor(self):
        assert _resolve([FIX, FEAT]).version == Version(1, 3, 0)

    def test_major(self):
        assert str(_resolve([FIX, BREAKING]).version) == "2.0.0"

    def test_prerelease_on_other_branch(self):
        """Versions off the default branch get the short revision as pre-release."""
        decision = _resolve([FIX], branch="feature-1")

        assert str(decision.version) == "1.2.4-abcdef1"

    def test_branch_comparison_is_case_sensitive(self):
        """'Main' is not the default branch 'main'."""
        assert _resolve([FIX], branch="Main").version.is_prerelease

    def test_no_change(self):
        """Without feat/fix/breaking commits there is no new version."""
        assert _resolve([CHORE, REFACTOR]) is None
        assert _resolve([]) is None

    def test_no_change_skips_revision_check(self):
        """The revision is only checked when a pre-release label is needed."""
        assert (
            resolve_version(
                Version(1, 2, 3),
                [CHORE],
                first_version=False,
                branch="feature-1",
                default_branch="main",
                revision="abc",
            )
            is None
        )

    def test_short_revision_on_other_branch(self):
        """A revision shorter than seven characters is fatal for pre-releases."""
        with pytest.raises(RevisionTooShortError):
            resolve_version(
                Version(1, 2, 3),
                [FIX],
                first_version=False,
                branch="feature-1",
                default_branch="main",
                revision="abc",
            )

    def test_idempotent(self):
        """Identical inputs always give the identical decision."""
        assert _resolve([FIX, FEAT], branch="feature-1") == _resolve([FIX, FEAT], branch="feature-1")

    def test_numeric_revision_with_leading_zero(self):
        """A short revision that is a number with a leading zero is not a valid label."""
        with pytest.raises(VersionParseError):
            resolve_version(
                Version(1, 2, 3),
                [FIX],
                first_version=False,
                branch="feature-1",
                default_branch="main",
                revision="0123456789abcdef",
            )

    def test_revision_with_leading_zero_and_letters(self):
        decision = resolve_version(
            Version(1, 2, 3),
            [FIX],
            first_version=False,
            branch="feature-1",
            default_branch="main",
            revision="0abc1234",
        )

        assert str(decision.version) == "1.2.4-0abc123"

"""Interfaces of the collaborators the versioning core depends on."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from datetime import datetime

    from monorepo_versioning.core.commits import ConventionalCommit
    from monorepo_versioning.vcs.models import Commit, NewRelease, Release


class ReleaseStore(Protocol):
    """Lists and creates releases. Pagination is handled by the store."""

    def list_releases(self) -> list[Release]: ...

    def create_release(self, new_release: NewRelease) -> Release: ...


class CommitStore(Protocol):
    """Lists commits and resolves commit timestamps."""

    def list_commits(self, branch: str, since: datetime, until: datetime) -> list[Commit]: ...

    def get_commit_time(self, revision: str) -> datetime: ...


class MessageClassifier(Protocol):
    """Classifies commit messages, returning None for unparseable ones."""

    def classify(self, message: str) -> ConventionalCommit | None: ...

"""Source-control collaborators: entities, store interfaces and GitHub."""

from __future__ import annotations

from monorepo_versioning.vcs.github import GitHubClient
from monorepo_versioning.vcs.models import Commit, NewRelease, Release
from monorepo_versioning.vcs.protocols import CommitStore, MessageClassifier, ReleaseStore

__all__ = [
    "Commit",
    "CommitStore",
    "GitHubClient",
    "MessageClassifier",
    "NewRelease",
    "Release",
    "ReleaseStore",
]

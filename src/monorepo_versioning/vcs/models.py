"""Source-control entities read from, and written to, the release store."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Commit:
    """A commit on the branch being released.

    Attributes:
        sha: Full commit hash
        message: Full commit message
        committed_at: Committer timestamp
        author_login: Login of the commit author, empty if unknown
        html_url: Link to the commit on the web
    """

    sha: str
    message: str
    committed_at: datetime
    author_login: str = ""
    html_url: str = ""

    @property
    def short_sha(self) -> str:
        return self.sha[:7]


@dataclass(frozen=True)
class Release:
    """A published release, tagged ``<component>-<version>``."""

    tag_name: str
    published_at: datetime | None
    target_commitish: str
    name: str = ""
    body: str = ""
    prerelease: bool = False


@dataclass(frozen=True)
class NewRelease:
    """A release to be created."""

    tag_name: str
    name: str
    target_commitish: str
    body: str
    prerelease: bool

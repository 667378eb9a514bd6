"""Test data factories and in-memory stores."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

from monorepo_versioning.vcs.models import Commit, NewRelease, Release

BASE_TIME = datetime(2024, 1, 1, 12, 0, 0, tzinfo=UTC)


def make_commit(
    message: str,
    sha: str = "0123456789abcdef0123456789abcdef01234567",
    author: str = "octocat",
    offset: int = 0,
) -> Commit:
    """Create a commit made ``offset`` minutes after BASE_TIME."""
    return Commit(
        sha=sha,
        message=message,
        committed_at=BASE_TIME + timedelta(minutes=offset),
        author_login=author,
        html_url=f"https://github.com/acme/monorepo/commit/{sha}",
    )


def make_release(
    tag: str,
    published_at: datetime | None = BASE_TIME,
    target: str = "prev0000000000000000000000000000000000000",
) -> Release:
    return Release(tag_name=tag, published_at=published_at, target_commitish=target, name=tag)


class FakeStore:
    """In-memory release and commit store."""

    def __init__(
        self,
        releases: list[Release] | None = None,
        commits: list[Commit] | None = None,
        commit_times: dict[str, datetime] | None = None,
    ) -> None:
        self.releases = list(releases or [])
        self.commits = list(commits or [])
        self.commit_times = commit_times or {}
        self.created: list[NewRelease] = []
        self.list_commits_calls: list[tuple[str, datetime, datetime]] = []

    def list_releases(self) -> list[Release]:
        return list(self.releases)

    def create_release(self, new_release: NewRelease) -> Release:
        self.created.append(new_release)
        release = Release(
            tag_name=new_release.tag_name,
            published_at=BASE_TIME + timedelta(days=2),
            target_commitish=new_release.target_commitish,
            name=new_release.name,
            body=new_release.body,
            prerelease=new_release.prerelease,
        )
        self.releases.append(release)
        return release

    def list_commits(self, branch: str, since: datetime, until: datetime) -> list[Commit]:
        self.list_commits_calls.append((branch, since, until))
        return [commit for commit in self.commits if since <= commit.committed_at < until]

    def get_commit_time(self, revision: str) -> datetime:
        # Unknown revisions are "now": one day after BASE_TIME
        return self.commit_times.get(revision, BASE_TIME + timedelta(days=1))

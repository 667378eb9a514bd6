"""GitHub REST API client.

Implements the release and commit stores on top of ``httpx``. List
endpoints are paginated by requesting pages of 100 items until an empty
page is returned.
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any, Self

import httpx

from monorepo_versioning.exceptions import GitHubError
from monorepo_versioning.vcs.models import Commit, Release

if TYPE_CHECKING:
    from types import TracebackType

    from monorepo_versioning.vcs.models import NewRelease

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api.github.com"
PER_PAGE = 100


def _parse_timestamp(value: str | None) -> datetime | None:
    if not value:
        return None
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


def _format_timestamp(value: datetime) -> str:
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return value.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _release_from_json(data: dict[str, Any]) -> Release:
    return Release(
        tag_name=data["tag_name"],
        published_at=_parse_timestamp(data.get("published_at")),
        target_commitish=data.get("target_commitish") or "",
        name=data.get("name") or "",
        body=data.get("body") or "",
        prerelease=bool(data.get("prerelease", False)),
    )


def _commit_from_json(data: dict[str, Any]) -> Commit:
    git_commit = data.get("commit") or {}
    committer = git_commit.get("committer") or {}
    # "author" is null when the commit email is not linked to an account
    author = data.get("author") or {}

    return Commit(
        sha=data.get("sha") or "",
        message=git_commit.get("message") or "",
        committed_at=_parse_timestamp(committer.get("date")) or datetime.fromtimestamp(0, UTC),
        author_login=author.get("login") or "",
        html_url=data.get("html_url") or "",
    )


class GitHubClient:
    """Release and commit store backed by the GitHub REST API.

    Args:
        owner: Repository owner
        repo: Repository name
        token: API token
        api_url: API base URL
        timeout: Request timeout in seconds
        client: Pre-configured httpx client (used instead of creating one)
    """

    def __init__(
        self,
        owner: str,
        repo: str,
        token: str | None = None,
        *,
        api_url: str = DEFAULT_API_URL,
        timeout: float = 30.0,
        client: httpx.Client | None = None,
    ) -> None:
        self.owner = owner
        self.repo = repo

        headers = {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
        }
        if token:
            headers["Authorization"] = f"Bearer {token}"

        if client is None:
            client = httpx.Client(base_url=api_url.rstrip("/"), timeout=timeout)
        client.headers.update(headers)
        self._client = client

    @property
    def _repo_path(self) -> str:
        return f"/repos/{self.owner}/{self.repo}"

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        try:
            response = self._client.request(method, path, **kwargs)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise GitHubError(
                f"GitHub API {method} {path} failed with status {e.response.status_code}: "
                f"{e.response.text}",
                status_code=e.response.status_code,
            ) from e
        except httpx.HTTPError as e:
            raise GitHubError(f"GitHub API {method} {path} failed: {e}") from e
        return response.json()

    def _paginate(self, path: str, params: dict[str, Any] | None = None) -> list[dict[str, Any]]:
        items: list[dict[str, Any]] = []
        page = 1
        while True:
            data = self._request(
                "GET", path, params={**(params or {}), "per_page": PER_PAGE, "page": page}
            )
            if not data:
                return items
            items.extend(data)
            page += 1

    # ReleaseStore

    def list_releases(self) -> list[Release]:
        """List every release of the repository."""
        return [_release_from_json(item) for item in self._paginate(f"{self._repo_path}/releases")]

    def create_release(self, new_release: NewRelease) -> Release:
        """Create a release for the given tag and target commit."""
        logger.info("Creating GitHub release: %s", new_release.tag_name)
        data = self._request(
            "POST",
            f"{self._repo_path}/releases",
            json={
                "tag_name": new_release.tag_name,
                "name": new_release.name,
                "target_commitish": new_release.target_commitish,
                "body": new_release.body,
                "prerelease": new_release.prerelease,
                # Notes must only cover the component, not the whole repository
                "generate_release_notes": False,
            },
        )
        return _release_from_json(data)

    # CommitStore

    def list_commits(self, branch: str, since: datetime, until: datetime) -> list[Commit]:
        """List the commits of a branch in the window ``[since, until)``."""
        logger.info("Looking for commits from %s until %s", since, until)
        items = self._paginate(
            f"{self._repo_path}/commits",
            params={
                "sha": branch,
                "since": _format_timestamp(since),
                "until": _format_timestamp(until),
            },
        )
        return [_commit_from_json(item) for item in items]

    def get_commit_time(self, revision: str) -> datetime:
        """Get the committer timestamp of a revision."""
        data = self._request("GET", f"{self._repo_path}/git/commits/{revision}")
        timestamp = _parse_timestamp((data.get("committer") or {}).get("date"))
        if timestamp is None:
            raise GitHubError(f"Commit {revision} has no committer date")
        return timestamp

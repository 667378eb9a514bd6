"""Exception hierarchy for monorepo-versioning.

Every fatal condition raised by the library derives from
:class:`MonorepoVersioningError` so that callers (the CLI, or any other
invoker) can treat a failed run as "nothing happened".
"""

from __future__ import annotations


class MonorepoVersioningError(Exception):
    """Base exception for all monorepo-versioning errors."""


# Configuration


class ConfigError(MonorepoVersioningError):
    """Configuration could not be loaded."""


class ConfigValidationError(ConfigError):
    """Configuration values failed validation."""


# Versioning


class VersionParseError(MonorepoVersioningError):
    """A version string is not a valid semantic version."""

    def __init__(self, value: str, reason: str | None = None) -> None:
        self.value = value
        message = f"Invalid semantic version: {value!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class RevisionTooShortError(MonorepoVersioningError):
    """A revision is too short to derive a pre-release identifier from."""

    def __init__(self, revision: str, required: int) -> None:
        self.revision = revision
        self.required = required
        super().__init__(
            f"Revision {revision!r} must be at least {required} characters "
            "to be used as a pre-release identifier"
        )


# Releases / GitHub


class GitHubError(MonorepoVersioningError):
    """A request to the GitHub API failed."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class ReleaseExistsError(MonorepoVersioningError):
    """A release with the computed tag already exists."""

    def __init__(self, tag: str) -> None:
        self.tag = tag
        super().__init__(f"A release tagged {tag!r} already exists")

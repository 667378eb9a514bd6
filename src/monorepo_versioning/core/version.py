"""Semantic version parsing and manipulation.

Versions follow https://semver.org with a few lenient parsing rules
carried over from the tags this tool has historically produced:

- a leading ``v`` is accepted (``v1.2.3``)
- missing minor/patch parts are treated as ``0`` (``1.2`` -> ``1.2.0``)

Anything else that is not a complete version fails to parse; there are
no partial versions.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from enum import StrEnum

from monorepo_versioning.exceptions import VersionParseError

# Numeric pre-release identifiers must not have leading zeros.
_PRERELEASE_IDENTIFIER = r"(?:0|[1-9]\d*|\d*[A-Za-z-][0-9A-Za-z-]*)"

_VERSION_PATTERN = re.compile(
    rf"""
    ^v?
    (?P<major>0|[1-9]\d*)
    (?:\.(?P<minor>0|[1-9]\d*))?
    (?:\.(?P<patch>0|[1-9]\d*))?
    (?:-(?P<prerelease>{_PRERELEASE_IDENTIFIER}(?:\.{_PRERELEASE_IDENTIFIER})*))?
    (?:\+(?P<build>[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*))?
    $
    """,
    re.VERBOSE,
)

_IDENTIFIER_PATTERN = re.compile(rf"^{_PRERELEASE_IDENTIFIER}(?:\.{_PRERELEASE_IDENTIFIER})*$")


class BumpType(StrEnum):
    """Magnitude of a version increment."""

    MAJOR = "major"
    MINOR = "minor"
    PATCH = "patch"
    NONE = "none"


@dataclass(frozen=True)
class Version:
    """An immutable semantic version.

    Versions are ordered by :attr:`release_tuple` only; the pre-release
    label and build metadata are opaque and do not affect ordering.
    Equality still compares every field, so ``1.2.4-abc1234`` and ``1.2.4``
    are unequal although neither sorts before the other.
    """

    major: int
    minor: int
    patch: int
    prerelease: str | None = None
    build: str | None = None

    def __post_init__(self) -> None:
        for name in ("major", "minor", "patch"):
            if getattr(self, name) < 0:
                raise VersionParseError(str(self), f"{name} must be non-negative")

    @classmethod
    def parse(cls, value: str) -> Version:
        """Parse a version string.

        Args:
            value: Version string such as ``1.2.3`` or ``v1.2.3-abc1234``

        Returns:
            Parsed Version

        Raises:
            VersionParseError: If the string is not a valid version
        """
        match = _VERSION_PATTERN.match(value.strip())
        if match is None:
            raise VersionParseError(value)

        return cls(
            major=int(match.group("major")),
            minor=int(match.group("minor") or 0),
            patch=int(match.group("patch") or 0),
            prerelease=match.group("prerelease"),
            build=match.group("build"),
        )

    @property
    def release_tuple(self) -> tuple[int, int, int]:
        return (self.major, self.minor, self.patch)

    @property
    def is_prerelease(self) -> bool:
        return self.prerelease is not None

    def bump(self, bump_type: BumpType) -> Version:
        """Return the next version for the given bump type.

        MAJOR and MINOR always increment. PATCH on a pre-release only drops
        the pre-release label (``1.2.4-abc1234`` -> ``1.2.4``), since the
        pre-release already anticipates that patch version. Every bump
        clears pre-release and build metadata.

        Raises:
            ValueError: If ``bump_type`` is ``BumpType.NONE``
        """
        if bump_type == BumpType.MAJOR:
            return Version(self.major + 1, 0, 0)
        if bump_type == BumpType.MINOR:
            return Version(self.major, self.minor + 1, 0)
        if bump_type == BumpType.PATCH:
            if self.is_prerelease:
                return Version(self.major, self.minor, self.patch)
            return Version(self.major, self.minor, self.patch + 1)
        raise ValueError(f"Cannot bump version with {bump_type!r}")

    def with_prerelease(self, prerelease: str) -> Version:
        """Return a copy of this version with the given pre-release label.

        Raises:
            VersionParseError: If the label is not a valid pre-release,
                including a numeric identifier with a leading zero
        """
        if not _IDENTIFIER_PATTERN.match(prerelease):
            raise VersionParseError(
                f"{self.major}.{self.minor}.{self.patch}-{prerelease}",
                "not a valid pre-release identifier",
            )
        return replace(self, prerelease=prerelease)

    def __str__(self) -> str:
        version = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease:
            version = f"{version}-{self.prerelease}"
        if self.build:
            version = f"{version}+{self.build}"
        return version

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.release_tuple < other.release_tuple

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.release_tuple <= other.release_tuple

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.release_tuple > other.release_tuple

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.release_tuple >= other.release_tuple


def parse_version(value: str) -> Version:
    """Parse a version string. Shorthand for :meth:`Version.parse`."""
    return Version.parse(value)

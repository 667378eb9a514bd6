"""Conventional commit classification.

Commit messages are parsed according to the Conventional Commits
specification (https://www.conventionalcommits.org):

    <type>[(<scope>)][!]: <description>

    [body]

    [BREAKING CHANGE: <footer>]

Only the standard set of types is recognised. A message that does not
follow the format, or uses an unknown type, has no classification: the
parser returns ``None`` and the commit is left out of both the version
decision and the release notes.
"""

from __future__ import annotations

import re
from dataclasses import dataclass


CONVENTIONAL_TYPES: frozenset[str] = frozenset(
    {
        "build",
        "chore",
        "ci",
        "docs",
        "feat",
        "fix",
        "perf",
        "refactor",
        "revert",
        "style",
        "test",
    }
)

_HEADER_PATTERN = re.compile(
    r"^(?P<type>[A-Za-z]+)"
    r"(?:\((?P<scope>[^()\r\n]+)\))?"
    r"(?P<breaking>!)?"
    r":\s+(?P<description>\S.*?)\s*$"
)

_BREAKING_FOOTER_PATTERN = re.compile(r"^BREAKING[ -]CHANGE:\s", re.MULTILINE)


@dataclass(frozen=True)
class ConventionalCommit:
    """A commit message classified as a conventional commit."""

    commit_type: str
    description: str
    scope: str | None = None
    is_breaking: bool = False

    @property
    def is_feat(self) -> bool:
        return self.commit_type == "feat"

    @property
    def is_fix(self) -> bool:
        return self.commit_type == "fix"

    def matches_scope(self, component: str) -> bool:
        """Check whether this commit is scoped to ``component`` (case-insensitive)."""
        return self.scope is not None and self.scope.casefold() == component.casefold()


class ConventionalCommitParser:
    """Classifies commit messages as conventional commits.

    Args:
        types: Commit types accepted by the parser. Defaults to the
            standard conventional commit types.
    """

    def __init__(self, types: frozenset[str] = CONVENTIONAL_TYPES) -> None:
        self.types = types

    def classify(self, message: str) -> ConventionalCommit | None:
        """Classify a full commit message.

        Args:
            message: Raw commit message, header line first

        Returns:
            The classified commit, or None if the message is not a
            conventional commit
        """
        header, _, body = message.strip().partition("\n")
        match = _HEADER_PATTERN.match(header)
        if match is None:
            return None

        commit_type = match.group("type").lower()
        if commit_type not in self.types:
            return None

        scope = match.group("scope")
        is_breaking = bool(match.group("breaking")) or bool(
            _BREAKING_FOOTER_PATTERN.search(body)
        )

        return ConventionalCommit(
            commit_type=commit_type,
            description=match.group("description"),
            scope=scope.strip() if scope else None,
            is_breaking=is_breaking,
        )


_default_parser = ConventionalCommitParser()


def parse_conventional_commit(message: str) -> ConventionalCommit | None:
    """Classify a message with the default parser."""
    return _default_parser.classify(message)

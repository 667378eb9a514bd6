"""Shared fixtures for monorepo-versioning tests."""

from __future__ import annotations

import pytest
from helpers import make_commit

from monorepo_versioning.config.models import ActionConfig
from monorepo_versioning.vcs.models import Commit


@pytest.fixture
def config() -> ActionConfig:
    """Configuration for component 'foo' on the default branch."""
    return ActionConfig(
        repository="acme/monorepo",
        component="foo",
        branch="main",
        revision="abcdef1234567890abcdef1234567890abcdef12",
        initial_version="1.0.0",
        default_branch="main",
    )


@pytest.fixture
def feat_commit() -> Commit:
    return make_commit("feat(foo): add user authentication", sha="feat123456789", offset=1)


@pytest.fixture
def fix_commit() -> Commit:
    return make_commit("fix(foo): handle null response", sha="fix1234567890", offset=2)


@pytest.fixture
def breaking_commit() -> Commit:
    return make_commit("feat(foo)!: redesign API", sha="break12345678", offset=3)


@pytest.fixture
def sample_commits() -> list[Commit]:
    return [
        make_commit("feat(foo): add login", sha="a" * 40, author="alice", offset=1),
        make_commit("fix(foo): handle timeout", sha="b" * 40, author="bob", offset=2),
        make_commit("feat(bar): unrelated feature", sha="c" * 40, author="carol", offset=3),
        make_commit("docs(foo): update readme", sha="d" * 40, author="alice", offset=4),
        make_commit("Merge branch 'main'", sha="e" * 40, author="dave", offset=5),
        make_commit("fix(Foo)!: drop legacy flag", sha="f" * 40, author="alice", offset=6),
    ]

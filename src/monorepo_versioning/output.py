"""GitHub Actions step outputs."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

    from monorepo_versioning.action import ReleaseOutcome

logger = logging.getLogger(__name__)


def _yes_no(value: bool) -> str:
    return "yes" if value else "no"


def format_outputs(outcome: ReleaseOutcome) -> dict[str, str]:
    """Step outputs describing a versioning run."""
    return {
        "new_version_created": _yes_no(outcome.created),
        "version": outcome.version_string,
        "prerelease": _yes_no(outcome.prerelease),
    }


def write_github_output(path: Path | None, outcome: ReleaseOutcome) -> bool:
    """Append the step outputs to the GitHub Actions output file.

    Nothing is written when the file does not exist, which is the case
    when running outside of GitHub Actions.

    Returns:
        True if the outputs were written
    """
    if path is None or not path.exists():
        logger.debug("No output file at %s, skipping step outputs", path)
        return False

    with path.open("a", encoding="utf-8") as output:
        for key, value in format_outputs(outcome).items():
            output.write(f"{key}={value}\n")
    return True

"""Configuration loading from the GitHub Actions environment.

Action inputs are exposed to the process as ``INPUT_<NAME>`` variables
(with the input name upper-cased but otherwise verbatim, so hyphens are
kept), and the workflow context as ``GITHUB_*`` variables.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from monorepo_versioning.config.models import ActionConfig, GitHubConfig
from monorepo_versioning.exceptions import ConfigValidationError

if TYPE_CHECKING:
    from collections.abc import Mapping

# Config field -> environment variable
ENVIRONMENT_VARIABLES: dict[str, str] = {
    "repository": "GITHUB_REPOSITORY",
    "component": "INPUT_COMPONENT",
    "label": "INPUT_LABEL",
    "branch": "GITHUB_REF_NAME",
    "revision": "GITHUB_SHA",
    "initial_version": "INPUT_INITIAL-VERSION",
    "default_branch": "INPUT_DEFAULT-BRANCH",
    "dry_run": "INPUT_DRY-RUN",
    "output_path": "GITHUB_OUTPUT",
}

GITHUB_ENVIRONMENT_VARIABLES: dict[str, str] = {
    "token": "INPUT_GITHUB-TOKEN",
    "api_url": "GITHUB_API_URL",
}


def is_truthy(value: str | bool | None) -> bool:
    """Interpret a ``yes``/``true`` style flag (case-insensitive)."""
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    return value.strip().lower() in ("yes", "true")


def _read_environment(environ: Mapping[str, str], variables: dict[str, str]) -> dict[str, Any]:
    values: dict[str, Any] = {}
    for field, variable in variables.items():
        value = environ.get(variable, "").strip()
        # Unset action inputs are passed as empty strings
        if value:
            values[field] = value
    return values


def load_config(environ: Mapping[str, str] | None = None, **overrides: Any) -> ActionConfig:
    """Load the configuration of a versioning run.

    Args:
        environ: Environment to read from, defaults to ``os.environ``
        **overrides: Explicit values (e.g. from CLI options) taking
            precedence over the environment. None values are ignored.

    Returns:
        Validated configuration

    Raises:
        ConfigValidationError: If required values are missing or invalid
    """
    if environ is None:
        environ = os.environ

    values = _read_environment(environ, ENVIRONMENT_VARIABLES)
    github_values = _read_environment(environ, GITHUB_ENVIRONMENT_VARIABLES)

    for field, value in overrides.items():
        if value is None:
            continue
        if field in GitHubConfig.model_fields:
            github_values[field] = value
        else:
            values[field] = value

    if "dry_run" in values:
        values["dry_run"] = is_truthy(values["dry_run"])
    if "output_path" in values:
        values["output_path"] = Path(values["output_path"])

    try:
        return ActionConfig(github=GitHubConfig(**github_values), **values)
    except ValidationError as e:
        raise ConfigValidationError(f"Invalid configuration:\n{e}") from e

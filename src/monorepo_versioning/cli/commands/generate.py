"""Implementation of the 'generate' command.

The generate command computes the next version of a component and, unless
running dry, publishes it as a GitHub release.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.markup import escape
from rich.panel import Panel

from monorepo_versioning.action import generate_version
from monorepo_versioning.config import load_config
from monorepo_versioning.exceptions import ConfigError, MonorepoVersioningError
from monorepo_versioning.output import write_github_output
from monorepo_versioning.vcs import GitHubClient

if TYPE_CHECKING:
    from rich.console import Console

    from monorepo_versioning.action import ReleaseOutcome


def run_generate(
    options: dict[str, Any],
    console: Console,
    err_console: Console,
) -> ReleaseOutcome:
    """Run the generate command.

    Args:
        options: Configuration overrides from the command line
        console: Console for standard output
        err_console: Console for error output

    Returns:
        The outcome of the run
    """
    try:
        config = load_config(**options)
    except ConfigError as e:
        err_console.print(f"[red]Error loading config:[/] {escape(str(e))}")
        raise SystemExit(1) from e

    token = config.github.token.get_secret_value() if config.github.token else None

    try:
        with GitHubClient(
            config.owner,
            config.repo,
            token,
            api_url=config.github.api_url,
            timeout=config.github.timeout,
        ) as client:
            outcome = generate_version(config, client, client)
    except MonorepoVersioningError as e:
        err_console.print(f"[red]Error:[/] {escape(str(e))}")
        raise SystemExit(1) from e

    if outcome.dry_run:
        console.print("Is dry run? Yes", style="yellow")

    if not outcome.created:
        console.print("New version generated? No", style="yellow")
    else:
        console.print("New version generated? Yes", style="green")
        console.print(f"Is pre-release? {'Yes' if outcome.prerelease else 'No'}")
        console.print(f"New version: {outcome.version}", style="bold green", highlight=False)

    write_github_output(config.output_path, outcome)

    if outcome.created and not outcome.dry_run:
        console.print(
            Panel(
                f"[green]Released {outcome.tag}[/]",
                title="[green]Release Created[/]",
                border_style="green",
            )
        )

    return outcome

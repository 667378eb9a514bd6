"""Command-line entry point for monorepo-versioning."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler

from monorepo_versioning import __version__
from monorepo_versioning.cli.commands.generate import run_generate

app = typer.Typer(
    name="monorepo-versioning",
    help="Semantic versions and release notes for monorepo components.",
    no_args_is_help=True,
)

console = Console()
err_console = Console(stderr=True)


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"monorepo-versioning {__version__}")
        raise typer.Exit


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option("--version", callback=_version_callback, is_eager=True, help="Show version."),
    ] = None,
) -> None:
    """Semantic versions and release notes for monorepo components."""


@app.command()
def generate(
    component: Annotated[
        str | None, typer.Option(help="Component identifier (commit scope).")
    ] = None,
    label: Annotated[str | None, typer.Option(help="Human-readable component name.")] = None,
    repository: Annotated[str | None, typer.Option(help="Repository as owner/name.")] = None,
    branch: Annotated[str | None, typer.Option(help="Branch being built.")] = None,
    revision: Annotated[str | None, typer.Option(help="Full hash of the commit.")] = None,
    initial_version: Annotated[
        str | None, typer.Option(help="Version of a component's first release.")
    ] = None,
    default_branch: Annotated[
        str | None, typer.Option(help="Branch producing final (non pre-release) versions.")
    ] = None,
    dry_run: Annotated[
        bool | None,
        typer.Option("--dry-run/--no-dry-run", help="Compute the version without releasing."),
    ] = None,
    output: Annotated[
        Path | None, typer.Option(help="GitHub Actions output file to append to.")
    ] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Debug logging.")] = False,
) -> None:
    """Generate the next version of a component.

    Options not given on the command line are read from the GitHub Actions
    environment (INPUT_* and GITHUB_* variables).
    """
    _setup_logging(verbose)
    run_generate(
        {
            "component": component,
            "label": label,
            "repository": repository,
            "branch": branch,
            "revision": revision,
            "initial_version": initial_version,
            "default_branch": default_branch,
            "dry_run": dry_run,
            "output_path": output,
        },
        console,
        err_console,
    )


if __name__ == "__main__":
    app()

"""Typer-based CLI for git-smart-workspace."""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler

from . import __version__
from .config import load_config
from .exceptions import WorkspaceError
from .resolver import resolve

app = typer.Typer(
    add_completion=False,
    help="Resolve owner/repo[/branch] or a git remote to a directory in the workspace, cloning as needed.",
)
err_console = Console(stderr=True)


def configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_time=False, show_path=verbose)],
        force=True,
    )


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"git-smart-workspace {__version__}")
        raise typer.Exit()


@app.command()
def main(
    reference: str = typer.Argument(..., help="owner/repo, owner/repo/branch, repo/branch or git@host:owner/repo.git"),
    branch: str | None = typer.Option(None, "--branch", "-b", help="Reserved; branches are given as the third segment."),
    root: Path | None = typer.Option(
        None,
        "--root",
        help="Workspace root (defaults to $GIT_WORKSPACE_ROOT or ~/code).",
        file_okay=False,
        dir_okay=True,
    ),
    domain: str | None = typer.Option(
        None,
        "--domain",
        help="Host used for owner/repo references (defaults to $GIT_WORKSPACE_DOMAIN or github.com).",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging."),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the git-smart-workspace version and exit.",
    ),
) -> None:
    """Print the directory for REFERENCE, cloning the repository or adding a worktree when missing."""

    configure_logging(verbose)
    config = load_config(root=root, domain=domain)
    try:
        path = resolve(config, reference)
    except WorkspaceError as err:
        _fail(str(err))
    typer.echo(str(path))


def _fail(message: str, code: int = 1) -> None:
    typer.secho(message, err=True, fg=typer.colors.RED)
    raise typer.Exit(code)


if __name__ == "__main__":
    app()

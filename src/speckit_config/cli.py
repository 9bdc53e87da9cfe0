"""``spec-kit-config`` command line interface.

Prints resolved Spec-Kit paths for shell scripts:

    spec-kit-config root
    spec-kit-config feature-dir [BRANCH]
    spec-kit-config is-migrated && echo migrated
    eval "$(spec-kit-config env)"

Values go to stdout unadorned; errors go to stderr.
"""

from __future__ import annotations

import shlex
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from speckit_config.config import SpecKitConfig, load_config
from speckit_config.core.errors import InvalidBranchNameError, RepoRootNotFoundError
from speckit_config.core.layout import DirKind
from speckit_config.debug import debug_paths

app = typer.Typer(
    name="spec-kit-config",
    help="Resolve Spec-Kit repository paths",
    add_completion=False,
    no_args_is_help=True,
)
console = Console(soft_wrap=True)
err_console = Console(stderr=True)

CwdOption = typer.Option(
    None,
    "--cwd",
    help="Resolve from this directory instead of the current one",
    exists=True,
    file_okay=False,
    resolve_path=True,
)


def _load(cwd: Optional[Path], announce: bool = False) -> SpecKitConfig:
    try:
        return load_config(cwd, announce=announce)
    except RepoRootNotFoundError as e:
        err_console.print(f"[red]ERROR:[/red] {e}")
        raise typer.Exit(1)


@app.command()
def root(cwd: Optional[Path] = CwdOption) -> None:
    """Print the repository root."""
    typer.echo(str(_load(cwd).repo_root))


@app.command()
def branch(cwd: Optional[Path] = CwdOption) -> None:
    """Print the current branch name."""
    typer.echo(_load(cwd).current_branch())


@app.command("feature-dir")
def feature_dir(
    name: Optional[str] = typer.Argument(None, metavar="BRANCH", help="Branch name (default: current branch)"),
    cwd: Optional[Path] = CwdOption,
) -> None:
    """Print the feature directory for a branch."""
    config = _load(cwd)
    try:
        path = config.feature_dir(name)
    except InvalidBranchNameError as e:
        err_console.print(f"[red]ERROR:[/red] {e}")
        raise typer.Exit(2)
    typer.echo(str(path))


@app.command("is-migrated")
def is_migrated(cwd: Optional[Path] = CwdOption) -> None:
    """Print YES or NO; exit status 0 only when migrated."""
    migrated = _load(cwd).is_migrated()
    typer.echo("YES" if migrated else "NO")
    if not migrated:
        raise typer.Exit(1)


@app.command("scripts-dir")
def scripts_dir(cwd: Optional[Path] = CwdOption) -> None:
    """Print the active scripts directory."""
    typer.echo(str(_load(cwd).current_dir(DirKind.SCRIPTS)))


@app.command("templates-dir")
def templates_dir(cwd: Optional[Path] = CwdOption) -> None:
    """Print the active templates directory."""
    typer.echo(str(_load(cwd).current_dir(DirKind.TEMPLATES)))


@app.command("memory-dir")
def memory_dir(cwd: Optional[Path] = CwdOption) -> None:
    """Print the active memory directory."""
    typer.echo(str(_load(cwd).current_dir(DirKind.MEMORY)))


@app.command()
def env(cwd: Optional[Path] = CwdOption) -> None:
    """Print ``export`` lines for every resolved path (for ``eval``)."""
    # Sourcing context: the legacy notice goes to stderr like the shell config did
    config = _load(cwd, announce=True)
    for name, value in config.as_env().items():
        typer.echo(f"export {name}={shlex.quote(value)}")


@app.command()
def debug(cwd: Optional[Path] = CwdOption) -> None:
    """Show every resolved path and the migration status."""
    debug_paths(_load(cwd), console=console)


def main():
    app()


if __name__ == "__main__":
    main()

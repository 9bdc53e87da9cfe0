"""Diagnostic dump of the resolved configuration."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape

from speckit_config.config import SpecKitConfig
from speckit_config.core.errors import InvalidBranchNameError
from speckit_config.core.layout import DirKind

HEADER = "=== Spec-Kit Configuration ==="
FOOTER = "=========================="


def debug_paths(config: SpecKitConfig, console: Console | None = None) -> None:
    """Print every resolved path, the layout, the branch and the migration status."""
    out = console or Console()
    branch = config.current_branch()
    try:
        feature_dir = escape(str(config.feature_dir(branch)))
    except InvalidBranchNameError as e:
        feature_dir = f"[red]{escape(str(e))}[/red]"

    out.print(f"[bold]{HEADER}[/bold]")
    for name, value in config.as_env().items():
        out.print(f"{name}: {escape(value)}")
    out.print(f"Layout: {config.layout.value}")
    for kind in DirKind:
        label = f"Current {kind.value} dir"
        out.print(f"{label}: {escape(str(config.current_dir(kind)))}")
    out.print(f"Current branch: {escape(branch)}")
    out.print(f"Feature dir: {feature_dir}")
    migrated = "[green]YES[/green]" if config.is_migrated() else "[yellow]NO[/yellow]"
    out.print(f"Is migrated: {migrated}")
    out.print(f"[bold]{FOOTER}[/bold]")

"""Resolved Spec-Kit configuration.

:func:`load_config` resolves the repository root once, derives every
directory from it and selects the layout (legacy or migrated). The result
is an immutable :class:`SpecKitConfig` that callers pass around instead of
reading ambient environment variables. Shell scripts that still want the
variables get them through :meth:`SpecKitConfig.export_env` or
``spec-kit-config env``.
"""

from __future__ import annotations

import dataclasses
import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path, PurePosixPath
from typing import MutableMapping, Sequence

from speckit_config.core.branch import resolve_current_branch
from speckit_config.core.constants import CONFIG_MARKER
from speckit_config.core.errors import ConfigNotFoundError, InvalidBranchNameError
from speckit_config.core.layout import DirKind, Layout, SpecKitPaths, detect_layout, is_migrated
from speckit_config.core.repo_root import RootStrategy, resolve_repo_root

logger = logging.getLogger(__name__)

LEGACY_NOTICE = "INFO: Using legacy structure. Migration to .spec-kit/ recommended."

# Env var name -> SpecKitPaths attribute, in export order
ENV_VARS: dict[str, str] = {
    "REPO_ROOT": "repo_root",
    "SPEC_KIT_DIR": "spec_kit_dir",
    "SCRIPTS_DIR": "scripts_dir",
    "TEMPLATES_DIR": "templates_dir",
    "DOCS_DIR": "docs_dir",
    "MEMORY_DIR": "memory_dir",
    "SPECS_DIR": "specs_dir",
    "LEGACY_SCRIPTS_DIR": "legacy_scripts_dir",
    "LEGACY_TEMPLATES_DIR": "legacy_templates_dir",
    "LEGACY_MEMORY_DIR": "legacy_memory_dir",
}


def validate_branch_segment(branch: str) -> str:
    """Check that ``branch`` stays inside the specs directory.

    Slash-separated names such as ``feature/login`` are allowed and map to
    nested directories. Absolute paths, ``.``/``..`` segments, empty
    segments, backslashes and NUL bytes are rejected.

    Raises:
        InvalidBranchNameError: If the name is unsafe as a path segment.
    """
    if not branch or not branch.strip():
        raise InvalidBranchNameError(branch, "name is empty")
    if "\x00" in branch:
        raise InvalidBranchNameError(branch, "name contains a NUL byte")
    if "\\" in branch:
        raise InvalidBranchNameError(branch, "name contains a backslash")
    if branch.startswith("/") or PurePosixPath(branch).is_absolute():
        raise InvalidBranchNameError(branch, "name is an absolute path")
    for segment in branch.split("/"):
        if segment in ("", ".", ".."):
            raise InvalidBranchNameError(branch, f"segment {segment!r} is not allowed")
    return branch


@dataclass(frozen=True)
class SpecKitConfig:
    """Paths and layout for one repository, resolved once."""

    paths: SpecKitPaths
    layout: Layout

    @property
    def repo_root(self) -> Path:
        return self.paths.repo_root

    @property
    def specs_dir(self) -> Path:
        return self.paths.specs_dir

    def current_branch(self) -> str:
        return resolve_current_branch(self.repo_root)

    def feature_dir(self, branch: str | None = None) -> Path:
        """Return ``specs/<branch>``, defaulting to the current branch.

        Raises:
            InvalidBranchNameError: If ``branch`` would escape ``specs/``.
        """
        name = self.current_branch() if branch is None else branch
        validate_branch_segment(name)
        return self.paths.specs_dir / name

    def is_migrated(self) -> bool:
        """Live filesystem check, independent of the layout chosen at load."""
        return is_migrated(self.paths)

    def current_dir(self, kind: DirKind) -> Path:
        return self.paths.dir_for(kind, self.layout)

    def current_scripts_dir(self) -> Path:
        return self.current_dir(DirKind.SCRIPTS)

    def current_templates_dir(self) -> Path:
        return self.current_dir(DirKind.TEMPLATES)

    def current_memory_dir(self) -> Path:
        return self.current_dir(DirKind.MEMORY)

    def refresh_layout(self) -> "SpecKitConfig":
        """Re-detect the layout, e.g. after a migration created ``.spec-kit/``."""
        return dataclasses.replace(self, layout=detect_layout(self.paths))

    def as_env(self) -> dict[str, str]:
        return {name: str(getattr(self.paths, attr)) for name, attr in ENV_VARS.items()}

    def export_env(self, environ: MutableMapping[str, str] | None = None) -> None:
        """Write the resolved paths into ``environ`` (default ``os.environ``).

        Existing values are overwritten.
        """
        target = os.environ if environ is None else environ
        target.update(self.as_env())


# Module-level flag: the legacy notice is printed at most once per process.
_legacy_notice_shown = False


def _emit_legacy_notice() -> None:
    """Print the migration recommendation to stderr once per process."""
    global _legacy_notice_shown  # noqa: PLW0603
    if _legacy_notice_shown:
        return
    _legacy_notice_shown = True
    # Library mode has no console of its own; stderr keeps stdout clean for eval
    logger.info("Legacy layout detected; .spec-kit/ migration recommended")
    print(LEGACY_NOTICE, file=sys.stderr)


def _reset_legacy_notice() -> None:
    """Reset the one-time notice flag (for testing only)."""
    global _legacy_notice_shown  # noqa: PLW0603
    _legacy_notice_shown = False


def load_config(
    cwd: Path | None = None,
    *,
    announce: bool = True,
    root_strategies: Sequence[RootStrategy] | None = None,
) -> SpecKitConfig:
    """Resolve the repository root and build the configuration.

    Args:
        cwd: Directory to resolve from (defaults to the process cwd).
        announce: Emit the legacy-layout notice when applicable. Library
            callers leave this on; commands that print values turn it off.
        root_strategies: Override the root strategy chain.

    Returns:
        The resolved configuration.

    Raises:
        RepoRootNotFoundError: If the repository root cannot be determined.
    """
    root = resolve_repo_root(cwd, strategies=root_strategies)
    paths = SpecKitPaths.from_root(root)
    config = SpecKitConfig(paths=paths, layout=detect_layout(paths))
    logger.debug("Resolved Spec-Kit config at %s (%s layout)", root, config.layout.value)

    if announce and config.layout is Layout.LEGACY:
        _emit_legacy_notice()
    return config


def load_config_for_script(
    script_path: Path | str,
    cwd: Path | None = None,
    *,
    announce: bool = True,
) -> SpecKitConfig:
    """Load the configuration for a script living in ``<spec-kit>/scripts/``.

    The config marker is expected one level above the script's directory
    (``<script dir>/../config.sh``). It only confirms the install; the root
    is resolved from ``cwd`` (default: the process cwd) as in :func:`load_config`.

    Raises:
        ConfigNotFoundError: If the marker is missing. Callers may retry
            with another location.
        RepoRootNotFoundError: If the marker exists but no root is found.
    """
    script_dir = Path(script_path).resolve().parent
    marker = script_dir.parent / CONFIG_MARKER
    if not marker.is_file():
        raise ConfigNotFoundError(marker)
    return load_config(cwd, announce=announce)

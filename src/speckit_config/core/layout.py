"""Directory layout derivation: legacy vs migrated.

Migrated projects keep tool assets under ``.spec-kit/``. Legacy projects
still have ``scripts/``, ``templates/`` and ``memory/`` at the repository
root. :class:`SpecKitPaths` computes both sets from the root alone; the
filesystem is only consulted by :func:`is_migrated`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from . import constants


class Layout(Enum):
    LEGACY = "legacy"
    MIGRATED = "migrated"


class DirKind(Enum):
    SCRIPTS = "scripts"
    TEMPLATES = "templates"
    MEMORY = "memory"


@dataclass(frozen=True)
class SpecKitPaths:
    """Every directory the toolkit knows about, derived from one root."""

    repo_root: Path
    spec_kit_dir: Path
    scripts_dir: Path
    templates_dir: Path
    docs_dir: Path
    memory_dir: Path
    specs_dir: Path
    legacy_scripts_dir: Path
    legacy_templates_dir: Path
    legacy_memory_dir: Path

    @classmethod
    def from_root(cls, repo_root: Path) -> "SpecKitPaths":
        """Derive the directory set. No filesystem access."""
        return cls(
            repo_root=repo_root,
            spec_kit_dir=repo_root / constants.SPEC_KIT_DIR,
            scripts_dir=repo_root / constants.SCRIPTS_DIR,
            templates_dir=repo_root / constants.TEMPLATES_DIR,
            docs_dir=repo_root / constants.DOCS_DIR,
            memory_dir=repo_root / constants.MEMORY_DIR,
            specs_dir=repo_root / constants.SPECS_DIR,
            legacy_scripts_dir=repo_root / constants.LEGACY_SCRIPTS_DIR,
            legacy_templates_dir=repo_root / constants.LEGACY_TEMPLATES_DIR,
            legacy_memory_dir=repo_root / constants.LEGACY_MEMORY_DIR,
        )

    def dir_for(self, kind: DirKind, layout: Layout) -> Path:
        """Look up the directory of ``kind`` for the given layout."""
        table = {
            (Layout.MIGRATED, DirKind.SCRIPTS): self.scripts_dir,
            (Layout.MIGRATED, DirKind.TEMPLATES): self.templates_dir,
            (Layout.MIGRATED, DirKind.MEMORY): self.memory_dir,
            (Layout.LEGACY, DirKind.SCRIPTS): self.legacy_scripts_dir,
            (Layout.LEGACY, DirKind.TEMPLATES): self.legacy_templates_dir,
            (Layout.LEGACY, DirKind.MEMORY): self.legacy_memory_dir,
        }
        return table[(layout, kind)]


def is_migrated(paths: SpecKitPaths) -> bool:
    """Return True if ``.spec-kit/`` and its scripts and templates dirs all exist.

    Not cached: every call stats the three directories again.
    """
    return (
        paths.spec_kit_dir.is_dir()
        and paths.scripts_dir.is_dir()
        and paths.templates_dir.is_dir()
    )


def detect_layout(paths: SpecKitPaths) -> Layout:
    return Layout.MIGRATED if is_migrated(paths) else Layout.LEGACY

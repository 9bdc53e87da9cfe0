"""Shared path constants for the Spec-Kit repository layout."""

from __future__ import annotations

SPEC_KIT_DIR = ".spec-kit"
SCRIPTS_DIR = f"{SPEC_KIT_DIR}/scripts"
TEMPLATES_DIR = f"{SPEC_KIT_DIR}/templates"

DOCS_DIR = "docs"
MEMORY_DIR = f"{DOCS_DIR}/memory"
SPECS_DIR = "specs"

# Pre-migration locations, kept while projects move to .spec-kit/
LEGACY_SCRIPTS_DIR = "scripts"
LEGACY_TEMPLATES_DIR = "templates"
LEGACY_MEMORY_DIR = "memory"

GIT_DIR = ".git"
ROOT_MARKER_FILES = ("pyproject.toml", "README.md")
CONFIG_MARKER = "config.sh"

DEFAULT_BRANCH = "main"

REPO_ROOT_ENV = "SPEC_KIT_REPO_ROOT"
DEFAULT_BRANCH_ENV = "SPEC_KIT_DEFAULT_BRANCH"

__all__ = [
    "CONFIG_MARKER",
    "DEFAULT_BRANCH",
    "DEFAULT_BRANCH_ENV",
    "DOCS_DIR",
    "GIT_DIR",
    "LEGACY_MEMORY_DIR",
    "LEGACY_SCRIPTS_DIR",
    "LEGACY_TEMPLATES_DIR",
    "MEMORY_DIR",
    "REPO_ROOT_ENV",
    "ROOT_MARKER_FILES",
    "SCRIPTS_DIR",
    "SPECS_DIR",
    "SPEC_KIT_DIR",
    "TEMPLATES_DIR",
]

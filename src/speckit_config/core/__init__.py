"""Core path resolution: root, branch and layout discovery."""

from .branch import DEFAULT_BRANCH_STRATEGIES, resolve_current_branch
from .errors import (
    ConfigNotFoundError,
    InvalidBranchNameError,
    RepoRootNotFoundError,
    SpecKitConfigError,
)
from .layout import DirKind, Layout, SpecKitPaths, detect_layout, is_migrated
from .repo_root import DEFAULT_ROOT_STRATEGIES, resolve_repo_root
from .strategies import first_match

__all__ = [
    "ConfigNotFoundError",
    "DEFAULT_BRANCH_STRATEGIES",
    "DEFAULT_ROOT_STRATEGIES",
    "DirKind",
    "InvalidBranchNameError",
    "Layout",
    "RepoRootNotFoundError",
    "SpecKitConfigError",
    "SpecKitPaths",
    "detect_layout",
    "first_match",
    "is_migrated",
    "resolve_current_branch",
    "resolve_repo_root",
]

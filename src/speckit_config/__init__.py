"""Spec-Kit path configuration.

Locates the repository root, derives the Spec-Kit directory set and tells
legacy projects apart from migrated ones.
"""

from speckit_config.config import (
    ENV_VARS,
    SpecKitConfig,
    load_config,
    load_config_for_script,
    validate_branch_segment,
)
from speckit_config.core import (
    ConfigNotFoundError,
    DirKind,
    InvalidBranchNameError,
    Layout,
    RepoRootNotFoundError,
    SpecKitConfigError,
    SpecKitPaths,
    is_migrated,
    resolve_current_branch,
    resolve_repo_root,
)
from speckit_config.debug import debug_paths

__all__ = [
    "ENV_VARS",
    "ConfigNotFoundError",
    "DirKind",
    "InvalidBranchNameError",
    "Layout",
    "RepoRootNotFoundError",
    "SpecKitConfig",
    "SpecKitConfigError",
    "SpecKitPaths",
    "debug_paths",
    "is_migrated",
    "load_config",
    "load_config_for_script",
    "resolve_current_branch",
    "resolve_repo_root",
    "validate_branch_segment",
]

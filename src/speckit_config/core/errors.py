"""Exception hierarchy for Spec-Kit path resolution."""

from __future__ import annotations

from pathlib import Path


class SpecKitConfigError(RuntimeError):
    """Base exception for configuration errors."""
    pass


class RepoRootNotFoundError(SpecKitConfigError):
    """No root strategy could locate the repository root.

    Every other path is derived from the root, so callers must abort
    rather than continue with a guessed value.
    """

    def __init__(self, cwd: Path | None = None):
        self.cwd = cwd
        super().__init__(
            "Cannot find repository root. Please run from within the project directory."
        )


class ConfigNotFoundError(SpecKitConfigError):
    """The Spec-Kit config marker is not where a script expected it."""

    def __init__(self, expected_path: Path):
        self.expected_path = expected_path
        super().__init__(f"Spec-Kit config not found at {expected_path}")


class InvalidBranchNameError(SpecKitConfigError, ValueError):
    """Branch name cannot be used as a feature directory segment."""

    def __init__(self, branch: str, reason: str):
        self.branch = branch
        self.reason = reason
        super().__init__(f"Invalid branch name {branch!r} for feature directory: {reason}")

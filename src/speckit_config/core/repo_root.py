"""Repository root discovery.

Resolution order (first hit wins):
1. SPEC_KIT_REPO_ROOT environment variable
2. ``git rev-parse --show-toplevel``
3. Nearest ancestor containing a ``.git`` directory
4. The working directory itself, if it holds pyproject.toml and README.md

If nothing matches, :class:`RepoRootNotFoundError` is raised.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Callable, Sequence

from .constants import GIT_DIR, REPO_ROOT_ENV, ROOT_MARKER_FILES
from .errors import RepoRootNotFoundError
from .git import git_output
from .strategies import first_match

logger = logging.getLogger(__name__)

RootStrategy = Callable[[Path], "Path | None"]


def root_from_env(cwd: Path) -> Path | None:
    """Use the SPEC_KIT_REPO_ROOT override when it names a directory."""
    override = os.environ.get(REPO_ROOT_ENV)
    if not override:
        return None
    candidate = Path(override).expanduser()
    if not candidate.is_absolute():
        candidate = cwd / candidate
    if not candidate.is_dir():
        logger.warning("Ignoring %s=%s: not a directory", REPO_ROOT_ENV, override)
        return None
    return candidate


def root_from_git(cwd: Path) -> Path | None:
    """Ask git for the top level of the working tree."""
    toplevel = git_output(["rev-parse", "--show-toplevel"], cwd=cwd)
    if not toplevel:
        return None
    return Path(toplevel)


def root_from_git_dir(cwd: Path) -> Path | None:
    """Walk upward until a directory containing ``.git/`` is found."""
    current = cwd.resolve()
    for candidate in [current, *current.parents]:
        if (candidate / GIT_DIR).is_dir():
            return candidate
    return None


def root_from_markers(cwd: Path) -> Path | None:
    """Treat ``cwd`` as the root if it holds every marker file."""
    if all((cwd / marker).is_file() for marker in ROOT_MARKER_FILES):
        return cwd
    return None


DEFAULT_ROOT_STRATEGIES: tuple[RootStrategy, ...] = (
    root_from_env,
    root_from_git,
    root_from_git_dir,
    root_from_markers,
)


def resolve_repo_root(
    cwd: Path | None = None,
    strategies: Sequence[RootStrategy] | None = None,
) -> Path:
    """Locate the repository root.

    Args:
        cwd: Directory to resolve from (defaults to the process cwd).
        strategies: Override the strategy chain (tests inject fakes here).

    Returns:
        Absolute, resolved path to the repository root.

    Raises:
        RepoRootNotFoundError: If no strategy produced a root.
    """
    start = (cwd or Path.cwd()).resolve()
    chain = DEFAULT_ROOT_STRATEGIES if strategies is None else strategies
    root = first_match(chain, start)
    if root is None:
        raise RepoRootNotFoundError(start)
    return Path(root).resolve()

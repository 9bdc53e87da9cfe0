"""Current branch discovery.

Resolution order (first hit wins):
1. ``git rev-parse --abbrev-ref HEAD`` (a detached HEAD is a miss)
2. ``ref: refs/heads/<name>`` parsed from ``.git/HEAD``
3. The default branch name (SPEC_KIT_DEFAULT_BRANCH, else ``main``)

Branch resolution never fails; the last strategy always answers.
"""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path
from typing import Callable, Sequence

from .constants import DEFAULT_BRANCH, DEFAULT_BRANCH_ENV, GIT_DIR
from .git import git_output
from .strategies import first_match

logger = logging.getLogger(__name__)

BranchStrategy = Callable[[Path], "str | None"]

_HEAD_REF_RE = re.compile(r"^ref: refs/heads/(?P<name>.+)$")

# What ``git rev-parse --abbrev-ref HEAD`` prints for a detached HEAD
_DETACHED = "HEAD"


def branch_from_git(repo_root: Path) -> str | None:
    """Ask git for the abbreviated name of HEAD."""
    branch = git_output(["rev-parse", "--abbrev-ref", "HEAD"], cwd=repo_root)
    if not branch:
        return None
    if branch == _DETACHED:
        logger.warning(
            "HEAD is detached in %s; falling back to the default branch name for feature paths",
            repo_root,
        )
        return None
    return branch


def branch_from_head_file(repo_root: Path) -> str | None:
    """Read the symbolic ref straight out of ``.git/HEAD``."""
    head_file = repo_root / GIT_DIR / "HEAD"
    if not head_file.is_file():
        return None
    try:
        content = head_file.read_text(encoding="utf-8", errors="replace").strip()
    except OSError as e:
        logger.debug("Could not read %s: %s", head_file, e)
        return None
    match = _HEAD_REF_RE.match(content)
    if not match:
        return None
    return match.group("name")


def default_branch(repo_root: Path) -> str:
    """Final fallback: SPEC_KIT_DEFAULT_BRANCH or ``main``."""
    return os.environ.get(DEFAULT_BRANCH_ENV) or DEFAULT_BRANCH


DEFAULT_BRANCH_STRATEGIES: tuple[BranchStrategy, ...] = (
    branch_from_git,
    branch_from_head_file,
    default_branch,
)


def resolve_current_branch(
    repo_root: Path,
    strategies: Sequence[BranchStrategy] | None = None,
) -> str:
    """Return the name of the active branch in ``repo_root``.

    An injected strategy chain that misses entirely still yields the
    default branch name.
    """
    chain = DEFAULT_BRANCH_STRATEGIES if strategies is None else strategies
    return first_match(chain, repo_root) or default_branch(repo_root)

"""Git detection and single-shot git queries.

Every query here is best effort: a missing ``git`` binary, a timeout or a
non-zero exit all come back as ``None`` so that the caller can move on to
its next fallback.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
from functools import lru_cache
from pathlib import Path

logger = logging.getLogger(__name__)

GIT_TIMEOUT = 5


@lru_cache(maxsize=1)
def is_git_available() -> bool:
    """
    Check if git is installed and working.

    Returns:
        True if git is installed and responds to --version, False otherwise.
    """
    if shutil.which("git") is None:
        return False
    try:
        result = subprocess.run(
            ["git", "--version"],
            capture_output=True,
            timeout=GIT_TIMEOUT,
        )
        return result.returncode == 0
    except (subprocess.TimeoutExpired, OSError):
        return False


def _clear_detection_cache() -> None:
    """Clear the cached git availability (for testing)."""
    is_git_available.cache_clear()


def git_output(args: list[str], cwd: Path) -> str | None:
    """Run ``git <args>`` in ``cwd`` and return its stripped stdout.

    Returns:
        The output, or None when git is unavailable, fails or times out.
    """
    command = " ".join(args)
    if not is_git_available():
        logger.debug("git not available; skipping git %s", command)
        return None
    try:
        result = subprocess.run(
            ["git", *args],
            cwd=cwd,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            timeout=GIT_TIMEOUT,
        )
    except FileNotFoundError:
        logger.debug("git not found; skipping git %s", command)
        return None
    except subprocess.TimeoutExpired:
        logger.warning("git %s timed out", command)
        return None
    except OSError as e:
        logger.debug("git %s failed: %s", command, e)
        return None

    if result.returncode != 0:
        logger.debug("git %s exited %s", command, result.returncode)
        return None
    return result.stdout.strip()

from __future__ import annotations

import shutil
import subprocess
from pathlib import Path

import pytest

GIT_AVAILABLE = shutil.which("git") is not None

# Skip marker for tests that drive a real git binary
requires_git = pytest.mark.skipif(not GIT_AVAILABLE, reason="git not installed")


def run(cmd: list[str], cwd: Path) -> subprocess.CompletedProcess[str]:
    return subprocess.run(cmd, cwd=str(cwd), check=True, text=True, capture_output=True)


def write_file(path: Path, content: str = "placeholder") -> Path:
    """Create a file (and any missing parent dirs), return its path."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


def make_migrated(root: Path) -> None:
    for rel in (".spec-kit/scripts", ".spec-kit/templates"):
        (root / rel).mkdir(parents=True, exist_ok=True)

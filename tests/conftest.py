from __future__ import annotations

from pathlib import Path
from typing import Iterator

import pytest

from speckit_config.config import _reset_legacy_notice
from speckit_config.core.git import _clear_detection_cache
from tests.utils import run, write_file


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[None]:
    """Keep host overrides and git discovery from leaking into tests."""
    for name in ("SPEC_KIT_REPO_ROOT", "SPEC_KIT_DEFAULT_BRANCH", "GIT_DIR", "GIT_WORK_TREE"):
        monkeypatch.delenv(name, raising=False)
    # Stop git from finding a repository above the test directory
    monkeypatch.setenv("GIT_CEILING_DIRECTORIES", str(tmp_path.parent.resolve()))
    _reset_legacy_notice()
    _clear_detection_cache()
    yield
    _reset_legacy_notice()
    _clear_detection_cache()


@pytest.fixture()
def temp_repo(tmp_path: Path) -> Iterator[Path]:
    """A git repository on branch ``main`` with one commit."""
    repo_dir = tmp_path / "repo"
    repo_dir.mkdir()
    run(["git", "init"], cwd=repo_dir)
    run(["git", "symbolic-ref", "HEAD", "refs/heads/main"], cwd=repo_dir)
    run(["git", "config", "user.name", "Spec Kit"], cwd=repo_dir)
    run(["git", "config", "user.email", "spec@example.com"], cwd=repo_dir)
    run(["git", "config", "commit.gpgsign", "false"], cwd=repo_dir)
    write_file(repo_dir / "README.md", "# demo\n")
    run(["git", "add", "."], cwd=repo_dir)
    run(["git", "commit", "-m", "Initial commit"], cwd=repo_dir)
    yield repo_dir.resolve()


@pytest.fixture()
def outside_repo(tmp_path: Path) -> Path:
    """A plain directory with no ``.git`` anywhere above it."""
    plain = tmp_path / "plain"
    plain.mkdir()
    resolved = plain.resolve()
    if any((parent / ".git").exists() for parent in resolved.parents):
        pytest.skip("temporary directory lives inside a git checkout")
    return resolved


@pytest.fixture()
def marker_project(outside_repo: Path) -> Path:
    """A non-git directory holding pyproject.toml and README.md."""
    write_file(outside_repo / "pyproject.toml", "[project]\nname = 'demo'\n")
    write_file(outside_repo / "README.md", "# demo\n")
    return outside_repo

"""Tests for the git query helper."""

from __future__ import annotations

import subprocess
from pathlib import Path
from unittest.mock import patch

from speckit_config.core import git as git_mod
from speckit_config.core.git import git_output, is_git_available


def test_git_unavailable_when_not_on_path() -> None:
    with patch("speckit_config.core.git.shutil.which", return_value=None):
        assert is_git_available() is False


def test_output_none_when_git_unavailable(tmp_path: Path) -> None:
    with patch.object(git_mod, "is_git_available", return_value=False):
        with patch("speckit_config.core.git.subprocess.run") as mock_run:
            assert git_output(["status"], cwd=tmp_path) is None
    mock_run.assert_not_called()


def test_output_stripped_on_success(tmp_path: Path) -> None:
    completed = subprocess.CompletedProcess(args=[], returncode=0, stdout="main\n", stderr="")
    with patch.object(git_mod, "is_git_available", return_value=True):
        with patch("speckit_config.core.git.subprocess.run", return_value=completed) as mock_run:
            assert git_output(["rev-parse", "--abbrev-ref", "HEAD"], cwd=tmp_path) == "main"
    assert mock_run.call_args.args[0] == ["git", "rev-parse", "--abbrev-ref", "HEAD"]
    assert mock_run.call_args.kwargs["cwd"] == tmp_path


def test_output_none_on_nonzero_exit(tmp_path: Path) -> None:
    completed = subprocess.CompletedProcess(args=[], returncode=128, stdout="", stderr="fatal")
    with patch.object(git_mod, "is_git_available", return_value=True):
        with patch("speckit_config.core.git.subprocess.run", return_value=completed):
            assert git_output(["rev-parse", "--show-toplevel"], cwd=tmp_path) is None


def test_output_none_on_timeout(tmp_path: Path) -> None:
    with patch.object(git_mod, "is_git_available", return_value=True):
        with patch(
            "speckit_config.core.git.subprocess.run",
            side_effect=subprocess.TimeoutExpired(cmd="git", timeout=5),
        ):
            assert git_output(["status"], cwd=tmp_path) is None


def test_output_none_when_binary_vanishes(tmp_path: Path) -> None:
    with patch.object(git_mod, "is_git_available", return_value=True):
        with patch("speckit_config.core.git.subprocess.run", side_effect=FileNotFoundError):
            assert git_output(["status"], cwd=tmp_path) is None

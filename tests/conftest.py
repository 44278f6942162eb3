"""
Shared test fixtures and configuration.
"""

import subprocess
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Keep the user's real config and BRUH_* variables out of every test."""
    xdg = tmp_path / "xdg"
    xdg.mkdir()
    monkeypatch.setenv("XDG_CONFIG_HOME", str(xdg))
    for var in (
        "BRUH_BRANCH_USING_TMUX",
        "BRUH_BRANCH_EDITOR",
        "BRUH_AI_COMMAND",
        "BRUH_ADDCHEAT_CHEAT_DIRECTORY",
        "BRUH_ADDCHEAT_HISTORY_FILE",
        "BRUH_LOG_FILE",
        "BRUH_LOG_LEVEL",
        "TMUX",
    ):
        monkeypatch.delenv(var, raising=False)
    return xdg / "bruh"


@pytest.fixture
def go_project(tmp_path: Path) -> Path:
    """A directory that only looks like a Go module."""
    root = tmp_path / "goproj"
    root.mkdir()
    (root / "go.mod").write_text("module example.com/demo\n")
    return root


def completed(returncode: int = 0, stdout: str = "", stderr: str = "") -> subprocess.CompletedProcess:
    return subprocess.CompletedProcess(args=[], returncode=returncode, stdout=stdout, stderr=stderr)


@pytest.fixture
def cp():
    """Factory for fake ``subprocess.run`` results."""
    return completed

"""
tmux and editor launching for new worktrees.
"""

from __future__ import annotations

import logging
import os
import shlex
import subprocess
from collections.abc import Mapping
from pathlib import Path

from bruh.core.errors import EditorError, TmuxError

logger = logging.getLogger(__name__)


def run_tmux(*args: str) -> subprocess.CompletedProcess[str]:
    """Run a tmux command and return the result."""
    logger.debug("tmux %s", " ".join(args))
    return subprocess.run(["tmux", *args], capture_output=True, text=True)


def inside_tmux(env: Mapping[str, str] | None = None) -> bool:
    """Whether this process runs inside a tmux session."""
    env = os.environ if env is None else env
    return bool(env.get("TMUX"))


def open_in_tmux(path: Path, editor: str) -> str:
    """Open a new tmux window in ``path`` and start ``editor`` there.

    Returns:
        The window name (the worktree directory's basename).
    """
    window = path.name
    r = run_tmux("new-window", "-c", str(path), "-n", window)
    if r.returncode != 0:
        raise TmuxError(f"failed to create tmux window: {(r.stdout + r.stderr).strip()}")

    r = run_tmux("send-keys", "-t", f":{window}", editor, "Enter")
    if r.returncode != 0:
        raise TmuxError(f"failed to start editor in tmux: {(r.stdout + r.stderr).strip()}")

    logger.info("Opened tmux window %s", window)
    return window


def open_editor(path: Path, editor: str) -> None:
    """Run ``editor path`` in the foreground with the terminal attached.

    ``editor`` may carry its own arguments (``code --wait``).
    """
    cmd = [*shlex.split(editor), str(path)]
    logger.debug("Launching editor: %s", " ".join(cmd))
    try:
        r = subprocess.run(cmd, cwd=str(path))
    except OSError as e:
        raise EditorError(f"failed to open editor: {e}") from e
    if r.returncode != 0:
        raise EditorError(f"failed to open editor: {editor} exited with code {r.returncode}")

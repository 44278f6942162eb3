"""
Branch use case — new worktree, then open it in tmux or an editor.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from bruh.core.errors import BruhError
from bruh.core.models.config import BruhConfig
from bruh.core.services import git_ops, tmux_ops

logger = logging.getLogger(__name__)


@dataclass
class BranchResult:
    """Result of the branch use case."""

    branch_name: str = ""
    from_branch: str = ""
    worktree_path: Path | None = None
    opened_with: str | None = None  # "tmux", "editor" or None
    error: str | None = None

    def to_dict(self) -> dict:
        if self.error:
            return {"error": self.error}
        return {
            "branch_name": self.branch_name,
            "from_branch": self.from_branch,
            "worktree_path": str(self.worktree_path) if self.worktree_path else None,
            "opened_with": self.opened_with,
        }


def run_branch(
    config: BruhConfig,
    *,
    from_branch: str | None = None,
    branch_name: str | None = None,
    editor: str | None = None,
    using_tmux: bool | None = None,
    open_worktree: bool = True,
    cwd: Path | None = None,
    env: Mapping[str, str] | None = None,
) -> BranchResult:
    """Create a sibling worktree and open it.

    Command-line values win over ``config.branch``.  tmux is only used
    when requested and the process already runs inside tmux.
    """
    result = BranchResult()

    editor = editor or config.branch.editor
    if using_tmux is None:
        using_tmux = config.branch.using_tmux

    try:
        git_ops.ensure_git_repo(cwd)

        from_branch = from_branch or git_ops.current_branch(cwd)
        branch_name = branch_name or f"{from_branch}-worktree"
        result.from_branch = from_branch
        result.branch_name = branch_name

        root = git_ops.repo_root(cwd)
        path = git_ops.worktree_path_for(root, branch_name)
        result.worktree_path = git_ops.add_worktree(path, branch_name, from_branch, cwd=cwd)

        if not open_worktree:
            return result

        if using_tmux and tmux_ops.inside_tmux(env):
            tmux_ops.open_in_tmux(path, editor)
            result.opened_with = "tmux"
        else:
            if using_tmux:
                logger.info("Not inside tmux, opening %s directly", editor)
            tmux_ops.open_editor(path, editor)
            result.opened_with = "editor"

    except BruhError as e:
        result.error = str(e)

    return result

"""
Git operations — the handful of git calls the commands need.

Query helpers return plain values; mutating helpers raise GitError
with git's own output so the user sees why it failed.
"""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from bruh.core.errors import GitError, PreconditionError

logger = logging.getLogger(__name__)

PROTECTED_BRANCHES = ("main", "master")


# ═══════════════════════════════════════════════════════════════════
#  Low-level runner
# ═══════════════════════════════════════════════════════════════════


def run_git(
    *args: str,
    cwd: Path | None = None,
    check: bool = False,
) -> subprocess.CompletedProcess[str]:
    """Run a git command and return the result."""
    logger.debug("git %s", " ".join(args))
    return subprocess.run(
        ["git", *args],
        cwd=str(cwd) if cwd else None,
        capture_output=True,
        text=True,
        check=check,
    )


def _combined(result: subprocess.CompletedProcess[str]) -> str:
    return (result.stdout + result.stderr).strip()


# ═══════════════════════════════════════════════════════════════════
#  Queries
# ═══════════════════════════════════════════════════════════════════


def is_git_repo(cwd: Path | None = None) -> bool:
    return run_git("rev-parse", "--git-dir", cwd=cwd).returncode == 0


def ensure_git_repo(cwd: Path | None = None) -> None:
    """Raise PreconditionError outside a repository."""
    if not is_git_repo(cwd):
        raise PreconditionError("not in a git repository")


def current_branch(cwd: Path | None = None) -> str:
    r = run_git("branch", "--show-current", cwd=cwd)
    if r.returncode != 0:
        raise GitError(f"failed to get current branch: {_combined(r)}")
    return r.stdout.strip()


def repo_root(cwd: Path | None = None) -> Path:
    r = run_git("rev-parse", "--show-toplevel", cwd=cwd)
    if r.returncode != 0:
        raise GitError(f"failed to get repository root: {_combined(r)}")
    return Path(r.stdout.strip())


def repo_name(cwd: Path | None = None) -> str:
    """Directory name of the repository root."""
    return repo_root(cwd).name


def has_staged_changes(cwd: Path | None = None) -> bool:
    """``git diff --cached --exit-code`` exits non-zero when something is staged."""
    return run_git("diff", "--cached", "--exit-code", "--quiet", cwd=cwd).returncode != 0


def status_porcelain(cwd: Path | None = None) -> str:
    r = run_git("status", "--porcelain", cwd=cwd)
    if r.returncode != 0:
        raise GitError(f"failed to get git status: {_combined(r)}")
    return r.stdout


def staged_name_status(cwd: Path | None = None) -> str:
    r = run_git("diff", "--cached", "--name-status", cwd=cwd)
    if r.returncode != 0:
        raise GitError(f"failed to get git diff: {_combined(r)}")
    return r.stdout


def branch_changes(base: str, cwd: Path | None = None) -> dict[str, str]:
    """Changed files, commit log and diffstat of HEAD against ``base``."""
    queries = {
        "changed_files": ("diff", f"{base}...HEAD", "--name-status"),
        "commit_log": ("log", f"{base}..HEAD", "--oneline"),
        "diff_stat": ("diff", f"{base}...HEAD", "--stat"),
    }
    changes: dict[str, str] = {}
    for key, args in queries.items():
        r = run_git(*args, cwd=cwd)
        if r.returncode != 0:
            raise GitError(f"failed to get {key.replace('_', ' ')}: {_combined(r)}")
        changes[key] = r.stdout
    return changes


# ═══════════════════════════════════════════════════════════════════
#  Mutations
# ═══════════════════════════════════════════════════════════════════


def stage_all(cwd: Path | None = None) -> None:
    r = run_git("add", ".", cwd=cwd)
    if r.returncode != 0:
        raise GitError(f"failed to stage fixed files: {_combined(r)}")


def commit(message: str, cwd: Path | None = None) -> str:
    """Commit staged changes, skipping hooks (cleanup already ran them)."""
    r = run_git("commit", "-m", message, "--no-verify", cwd=cwd)
    if r.returncode != 0:
        raise GitError(f"git commit failed: {_combined(r)}")
    return r.stdout.strip()


def worktree_path_for(root: Path, branch_name: str) -> Path:
    """Sibling directory ``<repo>-<branch>`` next to the repository."""
    return root.parent / f"{root.name}-{branch_name}"


def add_worktree(path: Path, branch_name: str, from_branch: str, cwd: Path | None = None) -> Path:
    r = run_git("worktree", "add", str(path), "-b", branch_name, from_branch, cwd=cwd)
    if r.returncode != 0:
        raise GitError(f"failed to create worktree: {_combined(r)}")
    logger.info("Created worktree %s (%s from %s)", path, branch_name, from_branch)
    return path

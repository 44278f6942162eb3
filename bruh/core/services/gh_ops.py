"""
GitHub CLI operations — availability, auth, default branch.

PR creation itself is delegated to the AI tool, which runs
``gh pr create`` on its own.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
from pathlib import Path

from bruh.core.errors import PreconditionError

logger = logging.getLogger(__name__)

FALLBACK_BASE_BRANCH = "main"


def run_gh(
    *args: str,
    cwd: Path | None = None,
) -> subprocess.CompletedProcess[str]:
    """Run a gh CLI command and return the result."""
    logger.debug("gh %s", " ".join(args))
    return subprocess.run(
        ["gh", *args],
        cwd=str(cwd) if cwd else None,
        capture_output=True,
        text=True,
    )


def ensure_gh_ready(cwd: Path | None = None) -> None:
    """Raise PreconditionError unless gh is installed and logged in."""
    message = "GitHub CLI (gh) is not installed or not authenticated"
    if not shutil.which("gh"):
        raise PreconditionError(message)
    if run_gh("--version", cwd=cwd).returncode != 0:
        raise PreconditionError(message)
    if run_gh("auth", "status", cwd=cwd).returncode != 0:
        raise PreconditionError(message)


def default_branch(cwd: Path | None = None) -> str:
    """The repository's default branch on GitHub, or ``main``."""
    r = run_gh(
        "repo", "view", "--json", "defaultBranchRef", "--jq", ".defaultBranchRef.name",
        cwd=cwd,
    )
    name = r.stdout.strip() if r.returncode == 0 else ""
    if not name:
        logger.debug("Could not resolve default branch, using %s", FALLBACK_BASE_BRANCH)
        return FALLBACK_BASE_BRANCH
    return name

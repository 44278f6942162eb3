"""
Pre-commit cleanup loop — run hooks, let the AI fix what fails, repeat.

Each attempt is one ``pre-commit run --all-files``.  A failed attempt
hands the hook output to the AI tool, then restages everything.  The
loop gives up after MAX_CLEANUP_ATTEMPTS failed runs.
"""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Callable
from pathlib import Path

from bruh.core.errors import CleanupExhaustedError, PreconditionError
from bruh.core.reliability.retry import AttemptBudget
from bruh.core.services import ai_ops, git_ops

logger = logging.getLogger(__name__)

MAX_CLEANUP_ATTEMPTS = 5


def run_precommit(cwd: Path | None = None) -> subprocess.CompletedProcess[str]:
    """Run every pre-commit hook against all files."""
    logger.debug("pre-commit run --all-files")
    try:
        return subprocess.run(
            ["pre-commit", "run", "--all-files"],
            cwd=str(cwd) if cwd else None,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
            errors="replace",
        )
    except OSError as e:
        raise PreconditionError(f"pre-commit is not available: {e}") from e


def run_precommit_cleanup(
    *,
    ai_command: str = ai_ops.DEFAULT_AI_COMMAND,
    cwd: Path | None = None,
    max_attempts: int = MAX_CLEANUP_ATTEMPTS,
    progress: Callable[[str], None] | None = None,
) -> int:
    """Loop until pre-commit passes.

    Returns:
        The attempt number on which the hooks passed.

    Raises:
        CleanupExhaustedError: hooks still fail after ``max_attempts``.
        UpstreamAIError: the fix request failed.
        GitError: restaging the fixed files failed.
    """
    report = progress or (lambda _msg: None)
    budget = AttemptBudget(max_attempts)

    for attempt in budget.attempts():
        report(f"Running pre-commit checks (attempt {attempt}/{max_attempts})...")
        r = run_precommit(cwd)
        if r.returncode == 0:
            report("Pre-commit checks passed")
            return attempt

        output = r.stdout or ""
        budget.record_failure(output)
        logger.info("pre-commit failed on attempt %d/%d", attempt, max_attempts)
        report(f"Pre-commit checks failed (attempt {attempt}/{max_attempts}):\n{output.rstrip()}")

        report("Asking AI to fix pre-commit issues...")
        ai_ops.fix_precommit_issues(output, command=ai_command, cwd=cwd)
        git_ops.stage_all(cwd)

    raise CleanupExhaustedError(max_attempts, budget.last_error)

"""
Commit use case — optional pre-commit cleanup, then commit.

Both preconditions (inside a repository, something staged) are
checked before the AI tool is ever invoked.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from bruh.core.errors import BruhError, CleanupExhaustedError, GitError, PreconditionError
from bruh.core.models.config import BruhConfig
from bruh.core.services import ai_ops, git_ops, precommit_ops

logger = logging.getLogger(__name__)


@dataclass
class CommitResult:
    """Result of the commit use case."""

    message: str = ""
    generated: bool = False
    cleanup_ran: bool = False
    cleanup_attempts: int = 0
    output: str = ""
    error: str | None = None

    def to_dict(self) -> dict:
        if self.error:
            data = {"error": self.error}
            if self.output:
                data["output"] = self.output
            return data
        return {
            "message": self.message,
            "generated": self.generated,
            "cleanup_ran": self.cleanup_ran,
            "cleanup_attempts": self.cleanup_attempts,
        }


def run_commit(
    config: BruhConfig,
    message_words: tuple[str, ...] | list[str] = (),
    *,
    cleanup: bool | None = None,
    cwd: Path | None = None,
    progress: Callable[[str], None] | None = None,
) -> CommitResult:
    """Commit the staged changes.

    Args:
        config: Effective configuration.
        message_words: Words of an explicit message; empty means generate one.
        cleanup: Force the pre-commit loop on/off. None defers to config.
        cwd: Repository working directory (default: current directory).
        progress: Receives human-readable progress lines.
    """
    result = CommitResult()
    report = progress or (lambda _msg: None)
    ai_command = config.ai.command

    try:
        git_ops.ensure_git_repo(cwd)
        if not git_ops.has_staged_changes(cwd):
            raise PreconditionError("no staged changes to commit")

        if cleanup is None:
            cleanup = _configured_cleanup(config, cwd)

        if cleanup:
            result.cleanup_ran = True
            result.cleanup_attempts = precommit_ops.run_precommit_cleanup(
                ai_command=ai_command, cwd=cwd, progress=report,
            )

        message = " ".join(message_words).strip()
        if not message:
            report("Generating commit message...")
            message = ai_ops.generate_commit_message(
                git_ops.status_porcelain(cwd),
                git_ops.staged_name_status(cwd),
                command=ai_command,
                cwd=cwd,
            )
            result.generated = True

        result.message = message
        result.output = git_ops.commit(message, cwd)
        logger.info("Committed: %s", message.splitlines()[0])

    except CleanupExhaustedError as e:
        result.error = str(e)
        result.output = e.last_output
    except BruhError as e:
        result.error = str(e)

    return result


def _configured_cleanup(config: BruhConfig, cwd: Path | None) -> bool:
    """Whether this repository is listed under ``cleanup-pre-commit``."""
    if not config.cleanup_pre_commit:
        return False
    try:
        return config.wants_cleanup(git_ops.repo_name(cwd))
    except GitError as e:
        logger.warning("Cannot resolve repository name, skipping pre-commit cleanup: %s", e)
        return False

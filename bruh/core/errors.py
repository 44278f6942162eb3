"""
Error taxonomy — every failure a command can report.

Services raise these; use cases turn them into ``result.error``; the
CLI prints the message as a single line and exits 1.

Tool-level outcomes (unavailable, issues found, execution failed) are
NOT exceptions: they travel as ``ToolReceipt`` statuses so a scan can
keep going after one tool fails.
"""

from __future__ import annotations


class BruhError(Exception):
    """Base class for user-facing failures."""


class PreconditionError(BruhError):
    """Not a git repo, nothing staged, wrong branch, missing directory…"""


class UpstreamAIError(BruhError):
    """The external AI tool failed or returned an empty response."""


class GitError(BruhError):
    """A git (or gh) invocation failed after preconditions passed."""


class TmuxError(BruhError):
    """A tmux invocation failed."""


class EditorError(BruhError):
    """The editor could not be launched."""


class CleanupExhaustedError(BruhError):
    """Pre-commit still fails after the maximum number of fix attempts."""

    def __init__(self, attempts: int, last_output: str = ""):
        super().__init__(f"failed to fix pre-commit issues after {attempts} attempts")
        self.attempts = attempts
        self.last_output = last_output

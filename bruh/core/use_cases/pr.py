"""
PR use case — have the AI tool open a pull request for this branch.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from bruh.core.errors import BruhError, PreconditionError
from bruh.core.models.config import BruhConfig
from bruh.core.services import ai_ops, gh_ops, git_ops

logger = logging.getLogger(__name__)


@dataclass
class PRResult:
    """Result of the pr create use case."""

    branch: str = ""
    base: str = ""
    description: str = ""
    url: str = ""
    error: str | None = None

    def to_dict(self) -> dict:
        if self.error:
            return {"error": self.error}
        return {
            "branch": self.branch,
            "base": self.base,
            "url": self.url,
            "description": self.description,
        }


def run_pr_create(
    config: BruhConfig,
    *,
    base: str | None = None,
    title: str | None = None,
    prompt_name: str = "default",
    cwd: Path | None = None,
    progress: Callable[[str], None] | None = None,
) -> PRResult:
    """Create a PR from the current branch.

    Fails on ``main``/``master`` before gh or the AI tool is contacted.
    """
    result = PRResult()
    report = progress or (lambda _msg: None)

    try:
        git_ops.ensure_git_repo(cwd)

        branch = git_ops.current_branch(cwd)
        if branch in git_ops.PROTECTED_BRANCHES:
            raise PreconditionError(f"cannot create PR from {branch} branch")
        result.branch = branch

        header = config.pr_prompt(prompt_name)
        if header is None:
            known = ", ".join(sorted(config.pr.prompts))
            raise PreconditionError(f"unknown PR prompt '{prompt_name}' (configured: {known})")

        gh_ops.ensure_gh_ready(cwd)

        result.base = base or gh_ops.default_branch(cwd)
        changes = git_ops.branch_changes(result.base, cwd)

        report(f"Creating PR from {branch} into {result.base}...")
        result.description = ai_ops.create_pull_request(
            header=header,
            branch=branch,
            base=result.base,
            changes=changes,
            title=title,
            command=config.ai.command,
            cwd=cwd,
        )
        result.url = ai_ops.extract_pr_url(result.description)
        logger.info("PR created for %s → %s", branch, result.base)

    except BruhError as e:
        result.error = str(e)

    return result

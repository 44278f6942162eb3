"""
AI collaborator — a thin pass-through to the external AI CLI.

bruh never talks to a model API itself.  Every request is one
invocation of the configured command (``claude`` by default) with a
prompt rendered from the templates in ``bruh/core/data/prompts``.

Non-interactive requests run with ``--print`` and captured output;
the cheat sheet request inherits the terminal so the user can watch
(and interrupt) the session.
"""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from bruh.core.data import PromptRegistry
from bruh.core.errors import UpstreamAIError

logger = logging.getLogger(__name__)

DEFAULT_AI_COMMAND = "claude"

# --allowedTools values per request kind
_GIT_TOOLS = "Bash(git:*)"
_GH_TOOLS = "Bash(gh:*)"
_FIX_TOOLS = "Bash(*),Read(*),Edit(*),Glob(*),Grep(*),MultiEdit(*)"

_prompts = PromptRegistry()


def run_ai(
    *args: str,
    command: str = DEFAULT_AI_COMMAND,
    cwd: Path | None = None,
    stdin: str | None = None,
) -> subprocess.CompletedProcess[str]:
    """Run the AI CLI non-interactively and return the result."""
    logger.debug("%s %s", command, " ".join(a for a in args if "\n" not in a))
    try:
        return subprocess.run(
            [command, *args],
            cwd=str(cwd) if cwd else None,
            capture_output=True,
            text=True,
            input=stdin,
        )
    except OSError as e:
        raise UpstreamAIError(f"failed to run {command}: {e}") from e


def _ask(prompt: str, allowed_tools: str, *, what: str, command: str, cwd: Path | None) -> str:
    r = run_ai("--print", "--allowedTools", allowed_tools, "--", prompt, command=command, cwd=cwd)
    if r.returncode != 0:
        detail = (r.stderr or r.stdout).strip()
        raise UpstreamAIError(f"failed to {what}: {detail or f'exit code {r.returncode}'}")
    text = r.stdout.strip()
    if not text:
        raise UpstreamAIError(f"failed to {what}: empty response from {command}")
    return text


# ═══════════════════════════════════════════════════════════════════
#  Requests
# ═══════════════════════════════════════════════════════════════════


def generate_commit_message(
    status: str,
    changed_files: str,
    *,
    command: str = DEFAULT_AI_COMMAND,
    cwd: Path | None = None,
) -> str:
    """Ask for a conventional-commit message describing the staged changes."""
    prompt = _prompts.render("commit_message", status=status, changed_files=changed_files)
    return _ask(prompt, _GIT_TOOLS, what="generate commit message", command=command, cwd=cwd)


def create_pull_request(
    *,
    header: str,
    branch: str,
    base: str,
    changes: dict[str, str],
    title: str | None = None,
    command: str = DEFAULT_AI_COMMAND,
    cwd: Path | None = None,
) -> str:
    """Have the AI tool open the PR with ``gh pr create``.

    Returns:
        The AI tool's response (PR description, usually with the URL).
    """
    if title:
        title_instruction = f"Use this exact PR title: {title}"
    else:
        title_instruction = "Generate a concise, descriptive PR title"

    prompt = _prompts.render(
        "pr_create",
        header=header,
        branch=branch,
        base=base,
        title_instruction=title_instruction,
        **changes,
    )
    return _ask(prompt, _GH_TOOLS, what="create PR", command=command, cwd=cwd)


def fix_precommit_issues(
    output: str,
    *,
    command: str = DEFAULT_AI_COMMAND,
    cwd: Path | None = None,
) -> None:
    """Ask the AI tool to fix pre-commit failures in place."""
    prompt = _prompts.render("precommit_fix", output=output)
    r = run_ai(
        "--print", "--dangerously-skip-permissions",
        "--allowedTools", _FIX_TOOLS,
        "--", prompt,
        command=command,
        cwd=cwd,
        stdin="",
    )
    if r.returncode != 0:
        detail = (r.stderr or r.stdout).strip()
        raise UpstreamAIError(f"failed to fix pre-commit issues: {detail or f'exit code {r.returncode}'}")


def send_cheat_request(
    last_command: str,
    cheat_dir: Path,
    instructions: str = "",
    *,
    command: str = DEFAULT_AI_COMMAND,
) -> None:
    """Start an interactive session that files ``last_command`` into a cheat sheet."""
    prompt = _prompts.render(
        "addcheat",
        cheat_dir=str(cheat_dir),
        command=last_command,
        navi_syntax=_prompts.navi_syntax,
    )
    if instructions:
        prompt += f"\n\nAdditional instructions from user: {instructions}"

    logger.debug("%s --dangerously-skip-permissions <prompt> %s", command, cheat_dir)
    try:
        r = subprocess.run([command, "--dangerously-skip-permissions", prompt, str(cheat_dir)])
    except OSError as e:
        raise UpstreamAIError(f"failed to run {command}: {e}") from e
    if r.returncode != 0:
        raise UpstreamAIError(f"failed to run {command}: exit code {r.returncode}")


def extract_pr_url(response: str) -> str:
    """First line mentioning a GitHub pull URL, else the whole response."""
    for line in response.splitlines():
        if "github.com" in line and "/pull/" in line:
            return line.strip()
    return response

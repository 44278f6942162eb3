"""
Shell history — find the command the user ran before ``bruh addcheat``.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path

from bruh.core.errors import PreconditionError

logger = logging.getLogger(__name__)


def history_file(configured: str | None = None, env: Mapping[str, str] | None = None) -> Path:
    """Configured file, else ``$HISTFILE``, else ``~/.zsh_history``."""
    env = os.environ if env is None else env
    raw = configured or env.get("HISTFILE") or "~/.zsh_history"
    return Path(raw).expanduser()


def parse_entry(line: str) -> str:
    """Strip the zsh extended-history prefix ``: <ts>:<dur>;``."""
    if line.startswith(": ") and ";" in line:
        return line.split(";", 1)[1]
    return line


def last_command(path: Path) -> str:
    """Second-to-last non-empty history entry.

    The last entry is the ``bruh addcheat`` invocation itself.
    """
    try:
        raw = path.read_text(encoding="utf-8", errors="replace")
    except FileNotFoundError as e:
        raise PreconditionError(f"history file not found: {path}") from e
    except OSError as e:
        raise PreconditionError(f"failed to read history file {path}: {e}") from e

    entries = [line.strip() for line in raw.splitlines() if line.strip()]
    if len(entries) < 2:
        raise PreconditionError("no command found in history")

    command = parse_entry(entries[-2]).strip()
    if not command:
        raise PreconditionError("no command found in history")
    logger.debug("Last history command: %s", command)
    return command

"""
Addcheat use case — file the previous shell command into navi cheat sheets.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from bruh.core.errors import BruhError, PreconditionError
from bruh.core.models.config import BruhConfig
from bruh.core.services import ai_ops, history_ops

logger = logging.getLogger(__name__)


@dataclass
class AddCheatResult:
    """Result of the addcheat use case."""

    command: str = ""
    cheat_directory: Path | None = None
    instructions: str = ""
    error: str | None = None

    def to_dict(self) -> dict:
        if self.error:
            return {"error": self.error}
        return {
            "command": self.command,
            "cheat_directory": str(self.cheat_directory) if self.cheat_directory else None,
            "instructions": self.instructions,
        }


def resolve_cheat_directory(raw: str) -> Path:
    """Expand ``~`` and require an existing directory."""
    path = Path(raw).expanduser().resolve()
    if not path.is_dir():
        raise PreconditionError(f"cheat directory does not exist: {path}")
    return path


def run_addcheat(
    config: BruhConfig,
    instruction_words: tuple[str, ...] | list[str] = (),
    *,
    cheat_directory: str | None = None,
    env: Mapping[str, str] | None = None,
) -> AddCheatResult:
    """Send the last history entry to the AI tool in an interactive session."""
    result = AddCheatResult()

    try:
        result.cheat_directory = resolve_cheat_directory(
            cheat_directory or config.addcheat.cheat_directory
        )

        histfile = history_ops.history_file(config.addcheat.history_file, env)
        result.command = history_ops.last_command(histfile)
        result.instructions = " ".join(instruction_words).strip()

        logger.info("Adding %r to cheat sheets in %s", result.command, result.cheat_directory)
        ai_ops.send_cheat_request(
            result.command,
            result.cheat_directory,
            result.instructions,
            command=config.ai.command,
        )

    except BruhError as e:
        result.error = str(e)

    return result

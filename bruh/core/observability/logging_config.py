"""
Logging setup for the ``bruh`` entrypoint.

Nearly everything bruh logs is an external command about to run
(``git diff --cached ...``, ``tmux new-window ...``) or the outcome of
one.  The console format is built around that: at DEBUG each line is
``<module>: <command line>``, with the module shortened to its last
component (``git_ops``, ``runner``) so traces stay readable next to
tool output.

Levels: ``--debug`` > ``--verbose`` > ``--quiet`` > ``BRUH_LOG_LEVEL`` > WARNING.
``BRUH_LOG_FILE`` adds a timestamped file log, at ``BRUH_LOG_FILE_LEVEL``
if set.
"""

from __future__ import annotations

import logging
import sys

_CONSOLE_FORMATS: dict[int, str] = {
    logging.DEBUG: "%(levelname).1s %(module_name)s:%(lineno)d: %(message)s",
    logging.INFO: "%(module_name)s: %(message)s",
}

_FILE_FORMAT = "%(asctime)s %(levelname)-5s %(module_name)s: %(message)s"


class _ModuleNameFilter(logging.Filter):
    """Expose ``bruh.core.services.git_ops`` as ``module_name="git_ops"``."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.module_name = record.name.rsplit(".", 1)[-1]
        return True


def _handler(handler: logging.Handler, level: int, fmt: str) -> logging.Handler:
    handler.setLevel(level)
    handler.addFilter(_ModuleNameFilter())
    handler.setFormatter(logging.Formatter(fmt, datefmt="%Y-%m-%d %H:%M:%S"))
    return handler


def console_format(level: int) -> str:
    """Console format for a level; WARNING and above print the bare message."""
    for threshold in sorted(_CONSOLE_FORMATS):
        if level <= threshold:
            return _CONSOLE_FORMATS[threshold]
    return "%(message)s"


def setup_logging(
    level: str = "WARNING",
    log_file: str | None = None,
    log_file_level: str | None = None,
) -> None:
    """Replace the root logger's handlers with bruh's.

    Safe to call more than once (each CLI invocation in tests does).
    """
    console_level = _parse_level(level)
    handlers = [_handler(logging.StreamHandler(sys.stderr), console_level, console_format(console_level))]

    if log_file:
        file_level = _parse_level(log_file_level) if log_file_level else console_level
        handlers.append(
            _handler(logging.FileHandler(log_file, encoding="utf-8"), file_level, _FILE_FORMAT)
        )

    root = logging.getLogger()
    root.handlers.clear()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(min(h.level for h in handlers))

    # handlers may outlive a swapped-out stderr (CliRunner)
    logging.raiseExceptions = False


def _parse_level(level: str | None) -> int:
    """Level name to number; anything unknown means WARNING."""
    numeric = logging.getLevelName(level.upper()) if level else None
    return numeric if isinstance(numeric, int) else logging.WARNING

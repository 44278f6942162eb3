"""
bruh — CLI entrypoint.

Usage:
    bruh --help
    bruh scan --static
    bruh commit
    bruh pr create --base develop
"""

from __future__ import annotations

import os
from pathlib import Path

import click

from bruh import __version__
from bruh.core.observability.logging_config import setup_logging


@click.group()
@click.version_option(version=__version__, prog_name="bruh")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to config.yaml (default: ~/.config/bruh/).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
) -> None:
    """bruh — git worktrees, AI commits and PRs, multi-language scans."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["debug"] = debug

    # ── Logging setup (once, at process start) ──────────────────
    if debug:
        level = "DEBUG"
    elif verbose:
        level = "INFO"
    elif quiet:
        level = "ERROR"
    else:
        level = os.environ.get("BRUH_LOG_LEVEL", "WARNING")

    setup_logging(
        level=level,
        log_file=os.environ.get("BRUH_LOG_FILE"),
        log_file_level=os.environ.get("BRUH_LOG_FILE_LEVEL"),
    )

    # ── Configuration (once, passed down via ctx.obj) ───────────
    from bruh.core.config.loader import ConfigError, find_config_file, load_config
    from bruh.ui.cli.helpers import fail

    config_file = Path(config_path) if config_path else find_config_file()
    try:
        ctx.obj["config"] = load_config(config_file)
    except ConfigError as e:
        fail(str(e))
    ctx.obj["config_file"] = config_file


# ── Register sub-commands from bruh/ui/cli/ ───────────────────────

from bruh.ui.cli.addcheat import addcheat
from bruh.ui.cli.branch import branch
from bruh.ui.cli.commit import commit
from bruh.ui.cli.config import config
from bruh.ui.cli.pr import pr
from bruh.ui.cli.scan import scan

cli.add_command(branch)
cli.add_command(commit)
cli.add_command(pr)
cli.add_command(scan)
cli.add_command(addcheat)
cli.add_command(config)


if __name__ == "__main__":
    cli()

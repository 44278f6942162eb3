"""
CLI command for adding the last shell command to navi cheat sheets.
"""

from __future__ import annotations

import click

from bruh.ui.cli.helpers import fail, get_config


@click.command()
@click.argument("instructions", nargs=-1)
@click.option("--cheat-directory", "-d", default=None, help="Cheat sheet directory (default: config).")
@click.pass_context
def addcheat(ctx: click.Context, instructions: tuple[str, ...], cheat_directory: str | None) -> None:
    """Send your previous shell command to the AI tool to file as a cheat."""
    from bruh.core.use_cases.addcheat import run_addcheat

    result = run_addcheat(get_config(ctx), instructions, cheat_directory=cheat_directory)

    if result.error:
        fail(result.error)

    click.secho("✅ Sent command to Claude Code for addition to cheat sheets", fg="green")

"""
CLI command for committing with an AI-written message.

Thin wrapper over ``bruh.core.use_cases.commit``.
"""

from __future__ import annotations

import click

from bruh.ui.cli.helpers import explicit, fail, get_config, progress


@click.command()
@click.argument("message", nargs=-1)
@click.option(
    "--cleanup-pre-commit/--no-cleanup-pre-commit",
    default=False,
    help="Run pre-commit and let the AI fix failures first (default: per-repo config).",
)
@click.pass_context
def commit(ctx: click.Context, message: tuple[str, ...], cleanup_pre_commit: bool) -> None:
    """Commit staged changes; the message is generated unless given."""
    from bruh.core.use_cases.commit import run_commit

    result = run_commit(
        get_config(ctx),
        message,
        cleanup=explicit(ctx, "cleanup_pre_commit"),
        progress=progress,
    )

    if result.error:
        fail(result.error)

    click.secho(f"✅ Successfully committed with message: {result.message}", fg="green")

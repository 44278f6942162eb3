"""
CLI commands for pull requests.

Thin wrappers over ``bruh.core.use_cases.pr``.
"""

from __future__ import annotations

import click

from bruh.ui.cli.helpers import fail, get_config, progress


@click.group()
def pr() -> None:
    """Pull request commands."""


@pr.command("create")
@click.option("--base", "-b", default=None, help="Base branch (default: repository default).")
@click.option("--title", "-t", default=None, help="PR title (generated if omitted).")
@click.option("--prompt", "-p", "prompt_name", default="default", help="Named prompt from config.")
@click.pass_context
def create(ctx: click.Context, base: str | None, title: str | None, prompt_name: str) -> None:
    """Create a PR for the current branch with an AI-written description."""
    from bruh.core.use_cases.pr import run_pr_create

    result = run_pr_create(
        get_config(ctx),
        base=base,
        title=title,
        prompt_name=prompt_name,
        progress=progress,
    )

    if result.error:
        fail(result.error)

    click.echo(result.description)
    click.echo()
    click.secho(f"🔗 PR: {result.url}", fg="green", bold=True)

"""
CLI command for worktree branches.

Thin wrapper over ``bruh.core.use_cases.branch``.
"""

from __future__ import annotations

import click

from bruh.ui.cli.helpers import explicit, fail, get_config


@click.command()
@click.option("--from-branch", "-f", default=None, help="Branch to start from (default: current).")
@click.option("--branch-name", "-b", default=None, help="New branch name (default: <from>-worktree).")
@click.option("--editor", "-e", default=None, help="Editor to open (default: config).")
@click.option("--using-tmux/--no-using-tmux", default=True, help="Open in a new tmux window.")
@click.option("--no-open", is_flag=True, help="Only create the worktree.")
@click.pass_context
def branch(
    ctx: click.Context,
    from_branch: str | None,
    branch_name: str | None,
    editor: str | None,
    using_tmux: bool,
    no_open: bool,
) -> None:
    """Create a git worktree next to this repository and open it."""
    from bruh.core.use_cases.branch import run_branch

    result = run_branch(
        get_config(ctx),
        from_branch=from_branch,
        branch_name=branch_name,
        editor=editor,
        using_tmux=explicit(ctx, "using_tmux"),
        open_worktree=not no_open,
    )

    if result.worktree_path:
        click.secho(f"✅ Created worktree at: {result.worktree_path}", fg="green")

    if result.error:
        fail(result.error)

    if result.opened_with == "tmux":
        click.echo(f"🖥️  Opened tmux window {result.worktree_path.name}")

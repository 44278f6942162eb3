"""
CLI commands for inspecting the effective configuration.
"""

from __future__ import annotations

import json

import click
import yaml

from bruh.ui.cli.helpers import get_config


@click.group()
def config() -> None:
    """Configuration commands."""


@config.command("show")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def show(ctx: click.Context, as_json: bool) -> None:
    """Print the effective configuration."""
    data = get_config(ctx).model_dump(mode="json", by_alias=True)
    source = ctx.obj.get("config_file")

    if as_json:
        click.echo(json.dumps({"source": str(source) if source else None, "config": data}, indent=2))
        return

    if source:
        click.secho(f"📄 {source}", fg="cyan")
    else:
        click.secho("📄 No config file found, using defaults", fg="cyan")
    click.echo(yaml.safe_dump(data, sort_keys=False, allow_unicode=True).rstrip())


@config.command("path")
def path() -> None:
    """Print where config files are looked up."""
    from bruh.core.config.loader import CONFIG_FILE_NAMES, config_search_path

    for directory in config_search_path():
        for name in CONFIG_FILE_NAMES:
            candidate = directory / name
            marker = "✅" if candidate.is_file() else "  "
            click.echo(f"{marker} {candidate}")

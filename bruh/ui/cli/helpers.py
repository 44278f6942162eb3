"""
Shared CLI plumbing — config access, failure output, tri-state flags.
"""

from __future__ import annotations

import sys
from typing import NoReturn

import click
from click.core import ParameterSource

from bruh.core.models.config import BruhConfig


def get_config(ctx: click.Context) -> BruhConfig:
    """The configuration loaded by the root command."""
    config = ctx.obj.get("config") if ctx.obj else None
    return config if config is not None else BruhConfig()


def fail(message: str) -> NoReturn:
    """Print a single error line to stderr and exit 1."""
    click.secho(f"❌ {message}", fg="red", err=True)
    sys.exit(1)


def explicit(ctx: click.Context, name: str) -> bool | None:
    """Value of a boolean flag pair, or None if the user gave neither form."""
    if ctx.get_parameter_source(name) in (ParameterSource.DEFAULT, None):
        return None
    return bool(ctx.params[name])


def progress(message: str) -> None:
    click.echo(message)

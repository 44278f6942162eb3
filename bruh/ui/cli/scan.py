"""
CLI command for multi-language scanning.

Thin wrapper over ``bruh.core.use_cases.scan``.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from bruh.core.models.receipt import ToolReceipt
from bruh.ui.cli.helpers import explicit, fail

_CATEGORY_FLAGS = ("secrets", "security", "static", "vulns")


def _print_receipt(receipt: ToolReceipt, verbose: bool) -> None:
    where = f" [{receipt.ecosystem}]" if receipt.ecosystem else ""

    if receipt.status == "unavailable":
        click.secho(f"⚠️  {receipt.label} not found, skipping{where}", fg="yellow")
        for hint in receipt.install_hint:
            click.echo(f"      {hint}")
        return

    if receipt.status == "clean":
        click.secho(f"✅ {receipt.label}: no issues{where}", fg="green")
        if verbose and receipt.output.strip():
            click.echo(receipt.output.rstrip())
        return

    if receipt.status == "issues":
        click.secho(f"❌ {receipt.label} found issues{where}", fg="red", bold=True)
    else:
        click.secho(f"💥 {receipt.error}{where}", fg="red", bold=True)
    if receipt.output.strip():
        click.echo(receipt.output.rstrip())


def _list_tools(as_json: bool) -> None:
    from bruh.adapters.registry import default_registry
    from bruh.adapters.tools.runner import SubprocessToolRunner

    status = default_registry().tool_status(SubprocessToolRunner())

    if as_json:
        click.echo(json.dumps(status, indent=2))
        return

    click.secho("🧰 Scan tools:", fg="cyan", bold=True)
    for info in status.values():
        icon = "✅" if info["available"] else "❌"
        langs = ", ".join(info["ecosystems"]) or "any"
        click.echo(f"   {icon} {info['label']:<14} {info['category']:<9} {langs}")
        if not info["available"] and info["install_hint"]:
            click.echo(f"        → {info['install_hint'][0]}")


@click.command()
@click.option("-s", "--secrets/--no-secrets", default=True, help="Secret scanning (gitleaks).")
@click.option("-S", "--security/--no-security", default=True, help="Security analysis.")
@click.option("-t", "--static/--no-static", default=True, help="Static analysis.")
@click.option("-V", "--vulns/--no-vulns", default=True, help="Dependency vulnerability checks.")
@click.option("--all", "-a", "all_scans", is_flag=True, help="Run every category.")
@click.option("--language", "-l", default=None, help="Skip detection and scan this language.")
@click.option("--verbose", "-v", is_flag=True, help="Show full tool output.")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.option("--list-tools", is_flag=True, help="Show known tools and whether they are installed.")
@click.pass_context
def scan(
    ctx: click.Context,
    secrets: bool,
    security: bool,
    static: bool,
    vulns: bool,
    all_scans: bool,
    language: str | None,
    verbose: bool,
    as_json: bool,
    list_tools: bool,
) -> None:
    """Run security, static and vulnerability scanners for this project.

    Naming categories runs only those (``bruh scan --static``);
    ``--no-<category>`` drops one from the full set.
    """
    from bruh.core.models.tool import ScanOptions
    from bruh.core.use_cases.scan import run_scan

    if list_tools:
        _list_tools(as_json)
        return

    options = ScanOptions.from_flags(
        **{name: explicit(ctx, name) for name in _CATEGORY_FLAGS},
        all_scans=all_scans,
        verbose=verbose,
        language=language,
    )

    if as_json:
        result = run_scan(options, Path.cwd())
        click.echo(json.dumps(result.to_dict(), indent=2))
        sys.exit(0 if result.ok else 1)

    if not options.any_selected:
        click.secho("⚠️  No scan categories selected, nothing to do", fg="yellow")
        return

    click.secho(f"🔍 Scanning ({', '.join(options.categories)})...", fg="cyan")
    result = run_scan(
        options,
        Path.cwd(),
        on_receipt=lambda receipt: _print_receipt(receipt, verbose),
    )

    if result.error:
        fail(result.error)

    if result.nothing_detected:
        click.secho("⚠️  No supported languages detected", fg="yellow")
        return

    report = result.report
    click.echo()
    click.echo(
        f"   Languages: {', '.join(report.ecosystems)} · "
        f"tools run: {report.total - report.unavailable} · "
        f"skipped: {report.unavailable}"
    )

    if not result.ok:
        fail("one or more scans detected issues")

    click.secho("✅ All scans passed", fg="green", bold=True)

"""
Scan use case — orchestrate detection, tool selection and execution.

Ties together ecosystem detection, the tool registry and a runner.
Tools run one at a time in a fixed order: secret scanners first, then
each detected ecosystem's tools in catalog order.  A tool that finds
issues or crashes never stops the rest.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from bruh.adapters.base import Runner
from bruh.adapters.registry import ToolRegistry, default_registry
from bruh.adapters.tools.runner import SubprocessToolRunner
from bruh.core.errors import BruhError
from bruh.core.models.receipt import ScanReport, ToolReceipt
from bruh.core.models.tool import ScanOptions, ToolDescriptor
from bruh.core.services.detection import resolve_ecosystems

logger = logging.getLogger(__name__)


@dataclass
class ScanResult:
    """Result of the scan use case."""

    report: ScanReport = field(default_factory=ScanReport)
    nothing_selected: bool = False
    nothing_detected: bool = False
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.report.ok

    def to_dict(self) -> dict:
        if self.error:
            return {"ok": False, "error": self.error}
        result = self.report.to_dict()
        result["nothing_selected"] = self.nothing_selected
        result["nothing_detected"] = self.nothing_detected
        return result


def plan_scan(
    options: ScanOptions,
    ecosystems: list[str],
    registry: ToolRegistry,
) -> list[tuple[ToolDescriptor, str | None]]:
    """Ordered (tool, ecosystem) pairs a scan will run."""
    plan: list[tuple[ToolDescriptor, str | None]] = []
    if options.secrets:
        plan.extend((tool, None) for tool in registry.secret_tools())
    for ecosystem in ecosystems:
        plan.extend((tool, ecosystem) for tool in registry.for_ecosystem(ecosystem, options.categories))
    return plan


def run_scan(
    options: ScanOptions,
    root: Path | None = None,
    *,
    registry: ToolRegistry | None = None,
    runner: Runner | None = None,
    on_receipt: Callable[[ToolReceipt], None] | None = None,
) -> ScanResult:
    """Run every enabled tool for the ecosystems found under ``root``.

    Args:
        options: Category selection, verbosity and forced language.
        root: Directory to scan (default: current directory).
        registry: Tool catalog (default: built-in).
        runner: Executes tools (default: subprocess).
        on_receipt: Called after each tool finishes, in run order.

    Returns:
        ScanResult; ``ok`` is False if any tool found issues or failed.
    """
    result = ScanResult()

    if not options.any_selected:
        result.nothing_selected = True
        return result

    root = (root or Path.cwd()).resolve()
    registry = registry or default_registry()
    runner = runner or SubprocessToolRunner()

    try:
        ecosystems = resolve_ecosystems(root, options.language)
    except BruhError as e:
        result.error = str(e)
        return result

    result.report.ecosystems = ecosystems
    if not ecosystems:
        result.nothing_detected = True
        return result

    plan = plan_scan(options, ecosystems, registry)
    logger.info("Scanning %s: %d tools across %s", root, len(plan), ", ".join(ecosystems))

    for tool, ecosystem in plan:
        receipt = runner.run(tool, root=root, verbose=options.verbose, ecosystem=ecosystem)
        result.report.add(receipt)
        logger.debug("%s → %s", tool.id, receipt.status)
        if on_receipt:
            on_receipt(receipt)

    return result

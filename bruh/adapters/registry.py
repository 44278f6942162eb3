"""
Tool registry — lookup and selection over the scan tool catalog.

The registry answers "which tools apply here": by id, by ecosystem,
by category. Running them is the Runner's job.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from bruh.adapters.base import Runner
from bruh.core.models.tool import ToolDescriptor
from bruh.core.services.scan_tools import scan_tool_catalog

logger = logging.getLogger(__name__)


class ToolRegistry:
    """Ordered collection of ToolDescriptors."""

    def __init__(self, tools: Iterable[ToolDescriptor] = ()):
        self._tools: dict[str, ToolDescriptor] = {}
        for tool in tools:
            self.register(tool)

    def register(self, tool: ToolDescriptor) -> None:
        if tool.id in self._tools:
            logger.warning("Overwriting existing tool: %s", tool.id)
        self._tools[tool.id] = tool
        logger.debug("Registered tool: %s", tool.id)

    def unregister(self, tool_id: str) -> None:
        self._tools.pop(tool_id, None)

    def get(self, tool_id: str) -> ToolDescriptor | None:
        return self._tools.get(tool_id)

    def list_tools(self) -> list[ToolDescriptor]:
        """All tools, in registration order."""
        return list(self._tools.values())

    def secret_tools(self) -> list[ToolDescriptor]:
        """Secret scanners; they run once per scan regardless of language."""
        return [
            t for t in self._tools.values()
            if t.ecosystem_independent and t.category == "secrets"
        ]

    def for_ecosystem(self, ecosystem: str, categories: Iterable[str]) -> list[ToolDescriptor]:
        """Tools serving ``ecosystem`` in the enabled categories."""
        wanted = set(categories)
        return [t for t in self._tools.values() if t.serves(ecosystem) and t.category in wanted]

    def tool_status(self, runner: Runner) -> dict[str, dict[str, Any]]:
        """Availability of every registered tool."""
        status = {}
        for tool_id, tool in self._tools.items():
            status[tool_id] = {
                "id": tool_id,
                "label": tool.label,
                "category": tool.category,
                "ecosystems": list(tool.ecosystems),
                "available": runner.is_available(tool),
                "install_hint": list(tool.install_hint),
            }
        return status

    def __len__(self) -> int:
        return len(self._tools)

    def __contains__(self, tool_id: object) -> bool:
        return tool_id in self._tools


def default_registry() -> ToolRegistry:
    """Registry holding the built-in catalog."""
    return ToolRegistry(scan_tool_catalog())

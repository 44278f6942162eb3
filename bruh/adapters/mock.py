"""
Mock tool runner — test double for scans.

By default every tool is available and clean. Individual tools can
be scripted to find issues, fail, or be missing.
"""

from __future__ import annotations

from bruh.adapters.base import ExecutionContext, Runner
from bruh.core.models.receipt import ToolReceipt
from bruh.core.models.tool import ToolDescriptor


class MockToolRunner(Runner):
    """Records every execution; never touches the system."""

    def __init__(self, available: bool = True, default_output: str = "[mock] clean"):
        self._available = available
        self._default_output = default_output
        self._unavailable: set[str] = set()
        self._outcomes: dict[str, tuple[str, str]] = {}
        self._call_log: list[ExecutionContext] = []

    @property
    def call_log(self) -> list[ExecutionContext]:
        return self._call_log

    @property
    def call_count(self) -> int:
        return len(self._call_log)

    @property
    def called_tools(self) -> list[str]:
        """Tool ids in execution order."""
        return [c.descriptor.id for c in self._call_log]

    def is_available(self, descriptor: ToolDescriptor) -> bool:
        return self._available and descriptor.id not in self._unavailable

    def set_unavailable(self, tool_id: str) -> None:
        self._unavailable.add(tool_id)

    def set_issues(self, tool_id: str, output: str = "[mock] issue") -> None:
        self._outcomes[tool_id] = ("issues", output)

    def set_error(self, tool_id: str, output: str = "[mock] crashed") -> None:
        self._outcomes[tool_id] = ("error", output)

    def execute(self, context: ExecutionContext) -> ToolReceipt:
        self._call_log.append(context)
        descriptor = context.descriptor
        outcome, output = self._outcomes.get(descriptor.id, ("clean", self._default_output))

        if outcome == "issues":
            return ToolReceipt.issues(
                descriptor, context.ecosystem, output, command=context.command, exit_code=1
            )
        if outcome == "error":
            return ToolReceipt.failure(
                descriptor,
                error=f"{descriptor.label} failed with exit code 2",
                ecosystem=context.ecosystem,
                output=output,
                command=context.command,
                exit_code=2,
            )
        return ToolReceipt.clean(
            descriptor, context.ecosystem, output, command=context.command, exit_code=0
        )

    def reset(self) -> None:
        self._call_log.clear()
        self._outcomes.clear()
        self._unavailable.clear()

"""
Tool receipts — the result contract between the runner and the scan.

The runner NEVER raises: every outcome of a tool run, including "not
installed" and "could not even start", is captured in a ToolReceipt.
A ScanReport is the ordered collection of receipts for one scan.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any, Literal

from pydantic import BaseModel, Field

from bruh.core.models.tool import ToolDescriptor

ReceiptStatus = Literal["clean", "issues", "error", "unavailable"]


def _now_iso() -> str:
    """Current UTC time as ISO string."""
    return datetime.now(UTC).isoformat()


class ToolReceipt(BaseModel):
    """Outcome of running (or trying to run) one tool."""

    tool: str
    label: str
    category: str
    ecosystem: str | None = None
    status: ReceiptStatus

    command: list[str] = Field(default_factory=list)
    exit_code: int | None = None
    output: str = ""
    error: str | None = None
    install_hint: list[str] = Field(default_factory=list)

    started_at: str = Field(default_factory=_now_iso)
    duration_ms: int = 0

    @property
    def ok(self) -> bool:
        """Clean or unavailable — neither counts against the scan."""
        return self.status in ("clean", "unavailable")

    @property
    def failed(self) -> bool:
        """Issues found or execution failed."""
        return self.status in ("issues", "error")

    @classmethod
    def _base(cls, descriptor: ToolDescriptor, ecosystem: str | None) -> dict[str, Any]:
        return {
            "tool": descriptor.id,
            "label": descriptor.label,
            "category": descriptor.category,
            "ecosystem": ecosystem,
        }

    @classmethod
    def clean(
        cls,
        descriptor: ToolDescriptor,
        ecosystem: str | None = None,
        output: str = "",
        **kwargs: Any,
    ) -> ToolReceipt:
        return cls(**cls._base(descriptor, ecosystem), status="clean", output=output, **kwargs)

    @classmethod
    def issues(
        cls,
        descriptor: ToolDescriptor,
        ecosystem: str | None = None,
        output: str = "",
        **kwargs: Any,
    ) -> ToolReceipt:
        return cls(
            **cls._base(descriptor, ecosystem),
            status="issues",
            output=output,
            error=f"{descriptor.label} found issues",
            **kwargs,
        )

    @classmethod
    def failure(
        cls,
        descriptor: ToolDescriptor,
        error: str,
        ecosystem: str | None = None,
        output: str = "",
        **kwargs: Any,
    ) -> ToolReceipt:
        return cls(
            **cls._base(descriptor, ecosystem),
            status="error",
            output=output,
            error=error,
            **kwargs,
        )

    @classmethod
    def unavailable(
        cls,
        descriptor: ToolDescriptor,
        ecosystem: str | None = None,
    ) -> ToolReceipt:
        return cls(
            **cls._base(descriptor, ecosystem),
            status="unavailable",
            install_hint=list(descriptor.install_hint),
        )


class ScanReport(BaseModel):
    """Every receipt produced by one scan, in run order."""

    ecosystems: list[str] = Field(default_factory=list)
    receipts: list[ToolReceipt] = Field(default_factory=list)

    def add(self, receipt: ToolReceipt) -> None:
        self.receipts.append(receipt)

    @property
    def total(self) -> int:
        return len(self.receipts)

    @property
    def failed(self) -> int:
        return sum(1 for r in self.receipts if r.failed)

    @property
    def unavailable(self) -> int:
        return sum(1 for r in self.receipts if r.status == "unavailable")

    @property
    def ok(self) -> bool:
        """True only if no tool found issues or failed to run."""
        return self.failed == 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "ok": self.ok,
            "ecosystems": self.ecosystems,
            "summary": {
                "total": self.total,
                "failed": self.failed,
                "unavailable": self.unavailable,
            },
            "receipts": [r.model_dump() for r in self.receipts],
        }

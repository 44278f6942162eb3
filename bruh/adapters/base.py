"""
Runner base — the contract between the scan and external tools.

The scan only talks to tools through a Runner, never directly via
subprocess. That keeps the scan logic testable with MockToolRunner.
"""

from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from pathlib import Path

from pydantic import BaseModel

from bruh.core.models.receipt import ToolReceipt
from bruh.core.models.tool import ToolDescriptor

logger = logging.getLogger(__name__)


class ExecutionContext(BaseModel):
    """Everything a runner needs to execute one tool."""

    descriptor: ToolDescriptor
    root: Path
    verbose: bool = False
    ecosystem: str | None = None

    @property
    def command(self) -> list[str]:
        return self.descriptor.command(self.verbose)


class Runner(ABC):
    """Abstract base class for tool runners.

    Runners return receipts. ``run`` NEVER raises: a missing tool is an
    ``unavailable`` receipt and anything unexpected is an ``error`` one.

    To create a new runner:
        1. Subclass Runner
        2. Implement is_available and execute
    """

    @abstractmethod
    def is_available(self, descriptor: ToolDescriptor) -> bool:
        """Whether the tool's executable can be found. Should be fast."""

    @abstractmethod
    def execute(self, context: ExecutionContext) -> ToolReceipt:
        """Run the tool and classify its outcome."""

    def run(
        self,
        descriptor: ToolDescriptor,
        *,
        root: Path,
        verbose: bool = False,
        ecosystem: str | None = None,
    ) -> ToolReceipt:
        """Availability check, execution and timing in one call."""
        start = time.monotonic()

        if not self.is_available(descriptor):
            logger.debug("%s not found on PATH", descriptor.availability_executable)
            return ToolReceipt.unavailable(descriptor, ecosystem)

        context = ExecutionContext(
            descriptor=descriptor,
            root=root,
            verbose=verbose,
            ecosystem=ecosystem,
        )

        try:
            receipt = self.execute(context)
        except Exception as e:
            logger.error("Runner raised while executing %s: %s", descriptor.id, e)
            receipt = ToolReceipt.failure(
                descriptor,
                error=f"Unexpected error: {e}",
                ecosystem=ecosystem,
                command=context.command,
            )

        receipt.duration_ms = int((time.monotonic() - start) * 1000)
        return receipt

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}>"

"""
Subprocess tool runner — executes scan tools for real.

stdout and stderr are merged into one stream so verbose output reads
the way the tool printed it.
"""

from __future__ import annotations

import logging
import shutil
import subprocess

from bruh.adapters.base import ExecutionContext, Runner
from bruh.core.models.receipt import ToolReceipt
from bruh.core.models.tool import ToolDescriptor

logger = logging.getLogger(__name__)


class SubprocessToolRunner(Runner):
    """Run a ToolDescriptor's command in the scan root."""

    def is_available(self, descriptor: ToolDescriptor) -> bool:
        return shutil.which(descriptor.availability_executable) is not None

    def execute(self, context: ExecutionContext) -> ToolReceipt:
        descriptor = context.descriptor
        cmd = context.command
        logger.debug("Executing: %s (cwd=%s)", " ".join(cmd), context.root)

        try:
            result = subprocess.run(
                cmd,
                cwd=str(context.root),
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                errors="replace",
            )
        except OSError as e:
            return ToolReceipt.failure(
                descriptor,
                error=f"{descriptor.label} failed to start: {e}",
                ecosystem=context.ecosystem,
                command=cmd,
            )

        output = result.stdout or ""
        outcome = descriptor.policy.classify(result.returncode, output)
        common = {"command": cmd, "exit_code": result.returncode}

        if outcome == "clean":
            return ToolReceipt.clean(descriptor, context.ecosystem, output, **common)
        if outcome == "issues":
            return ToolReceipt.issues(descriptor, context.ecosystem, output, **common)
        return ToolReceipt.failure(
            descriptor,
            error=f"{descriptor.label} failed with exit code {result.returncode}",
            ecosystem=context.ecosystem,
            output=output,
            **common,
        )

"""
Attempt budget — bounded retry bookkeeping without backoff.

Used by the pre-commit cleanup loop: each failed check consumes one
attempt; once the budget is spent the caller gives up for good. There
is no delay between attempts because every retry is driven by an
(already slow) external fix step.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)


@dataclass
class AttemptBudget:
    """Counts attempts against a fixed maximum."""

    max_attempts: int
    attempt: int = 0
    errors: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")

    @property
    def exhausted(self) -> bool:
        """Whether all attempts have been used."""
        return self.attempt >= self.max_attempts

    def attempts(self) -> Iterator[int]:
        """Yield attempt numbers (1-based) until the budget is spent."""
        while not self.exhausted:
            self.attempt += 1
            logger.debug("Attempt %d/%d", self.attempt, self.max_attempts)
            yield self.attempt

    def record_failure(self, error: str) -> None:
        """Keep the failure output of the current attempt."""
        self.errors.append(error)

    @property
    def last_error(self) -> str:
        return self.errors[-1] if self.errors else ""

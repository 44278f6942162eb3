"""
Tests for the attempt budget.
"""

import pytest

from bruh.core.reliability.retry import AttemptBudget


class TestAttemptBudget:
    def test_yields_each_attempt_once(self):
        budget = AttemptBudget(3)
        assert list(budget.attempts()) == [1, 2, 3]
        assert budget.exhausted

    def test_early_exit_keeps_count(self):
        budget = AttemptBudget(5)
        for attempt in budget.attempts():
            if attempt == 2:
                break
        assert budget.attempt == 2
        assert budget.max_attempts - budget.attempt == 3
        assert not budget.exhausted

    def test_records_errors(self):
        budget = AttemptBudget(2)
        assert budget.last_error == ""
        budget.record_failure("first")
        budget.record_failure("second")
        assert budget.last_error == "second"
        assert budget.errors == ["first", "second"]

    def test_invalid_max(self):
        with pytest.raises(ValueError):
            AttemptBudget(0)

"""Outcome policy exports."""

from .failure_policy import (
    MISSING_PROJECT_FILE_MESSAGE,
    SKIP_TESTS_ENV_VAR,
    TEST_FAILURE_MESSAGE,
    check_preconditions,
    decide_outcome,
    is_skip_signal_active,
    run_has_failures,
)
from .step_outcomes import TEST_ERROR_KEY, OutcomeStatus, StepOutcome

__all__ = [
    "OutcomeStatus",
    "StepOutcome",
    "TEST_ERROR_KEY",
    "SKIP_TESTS_ENV_VAR",
    "TEST_FAILURE_MESSAGE",
    "MISSING_PROJECT_FILE_MESSAGE",
    "check_preconditions",
    "decide_outcome",
    "is_skip_signal_active",
    "run_has_failures",
]

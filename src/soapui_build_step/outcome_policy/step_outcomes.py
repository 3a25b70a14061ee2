"""Outcome policy entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum

from soapui_build_step.engine_invocation.invocation_outcomes import RunResult

TEST_ERROR_KEY = "soapui_extension_Mlx#ppp"


class OutcomeStatus(str, Enum):
    """Terminal classification of one test step."""

    SKIPPED = "skipped"
    SUCCEEDED = "succeeded"
    FAILED_IGNORED = "failed_ignored"
    FAILED_HARD = "failed_hard"
    CONFIGURATION_ERROR = "configuration_error"
    EXECUTION_ERROR = "execution_error"

    @property
    def aborts_build(self) -> bool:
        return self in _ABORTING_STATUSES


_ABORTING_STATUSES = frozenset(
    {
        OutcomeStatus.FAILED_HARD,
        OutcomeStatus.CONFIGURATION_ERROR,
        OutcomeStatus.EXECUTION_ERROR,
    }
)


@dataclass(frozen=True)
class StepOutcome:
    """Result of one test step, including the build properties to publish."""

    status: OutcomeStatus
    message: str
    published_properties: Mapping[str, str] = field(default_factory=dict)
    run_result: RunResult | None = None

    @property
    def aborts_build(self) -> bool:
        return self.status.aborts_build

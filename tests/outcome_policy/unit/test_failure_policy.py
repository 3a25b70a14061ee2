"""Tests for the skip, validation and failure tolerance policy."""

from __future__ import annotations

import logging

import pytest
from soapui_build_step.configuration import StepParameters
from soapui_build_step.engine_invocation import InvocationResult, RunResult
from soapui_build_step.outcome_policy import (
    TEST_ERROR_KEY,
    TEST_FAILURE_MESSAGE,
    OutcomeStatus,
    check_preconditions,
    decide_outcome,
    is_skip_signal_active,
    run_has_failures,
)

_FAILING_RUN = RunResult(exit_code=0, total_test_cases=2, failed_test_cases=("Login",))
_PASSING_RUN = RunResult(exit_code=0, total_test_cases=2)


def test_skip_flag_skips_even_without_project_file(caplog) -> None:
    with caplog.at_level(logging.INFO):
        outcome = check_preconditions(StepParameters(skip=True), {})

    assert outcome is not None
    assert outcome.status is OutcomeStatus.SKIPPED
    assert outcome.aborts_build is False
    assert "SoapUI tests are skipped." in caplog.text


@pytest.mark.parametrize("value", ["true", "TRUE", " true "])
def test_skip_environment_signal_skips(value: str) -> None:
    outcome = check_preconditions(
        StepParameters(project_file="projectA.xml"), {"SKIP_TESTS": value}
    )

    assert outcome is not None
    assert outcome.status is OutcomeStatus.SKIPPED


@pytest.mark.parametrize("value", ["false", "1", "yes", ""])
def test_other_skip_signal_values_do_not_skip(value: str) -> None:
    assert is_skip_signal_active({"SKIP_TESTS": value}) is False


def test_missing_project_file_is_a_configuration_error() -> None:
    outcome = check_preconditions(StepParameters(), {})

    assert outcome is not None
    assert outcome.status is OutcomeStatus.CONFIGURATION_ERROR
    assert outcome.aborts_build is True
    assert "project_file" in outcome.message


def test_valid_parameters_pass_preconditions() -> None:
    assert check_preconditions(StepParameters(project_file="projectA.xml"), {}) is None


@pytest.mark.parametrize(
    ("run_result", "expected"),
    [
        (RunResult(exit_code=0), False),
        (RunResult(exit_code=1), True),
        (RunResult(exit_code=0, failed_test_cases=("A",)), True),
        (RunResult(exit_code=0, failed_assertions=1), True),
    ],
)
def test_run_has_failures(run_result: RunResult, expected: bool) -> None:
    assert run_has_failures(run_result) is expected


@pytest.mark.parametrize("test_fail_ignore", [False, True])
def test_passing_run_succeeds_without_publishing(test_fail_ignore: bool) -> None:
    outcome = decide_outcome(
        InvocationResult.finished(_PASSING_RUN), test_fail_ignore=test_fail_ignore
    )

    assert outcome.status is OutcomeStatus.SUCCEEDED
    assert outcome.published_properties == {}
    assert outcome.run_result == _PASSING_RUN


def test_failing_run_is_hard_failure_when_not_tolerated() -> None:
    outcome = decide_outcome(InvocationResult.finished(_FAILING_RUN), test_fail_ignore=False)

    assert outcome.status is OutcomeStatus.FAILED_HARD
    assert outcome.aborts_build is True
    assert outcome.message == TEST_FAILURE_MESSAGE
    assert outcome.published_properties == {}


def test_failing_run_is_ignored_and_flagged_when_tolerated(caplog) -> None:
    with caplog.at_level(logging.WARNING):
        outcome = decide_outcome(InvocationResult.finished(_FAILING_RUN), test_fail_ignore=True)

    assert outcome.status is OutcomeStatus.FAILED_IGNORED
    assert outcome.aborts_build is False
    assert outcome.published_properties == {TEST_ERROR_KEY: "true"}
    assert any(record.levelno == logging.WARNING for record in caplog.records)


@pytest.mark.parametrize("test_fail_ignore", [False, True])
def test_execution_error_is_never_tolerated(test_fail_ignore: bool) -> None:
    outcome = decide_outcome(
        InvocationResult.failed(RuntimeError("connection refused")),
        test_fail_ignore=test_fail_ignore,
    )

    assert outcome.status is OutcomeStatus.EXECUTION_ERROR
    assert outcome.aborts_build is True
    assert outcome.message == "SoapUI Test(s) failed: connection refused"
    assert outcome.published_properties == {}

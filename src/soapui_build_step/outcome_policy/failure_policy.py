"""Skip, validation and failure tolerance rules of a test step."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from soapui_build_step.configuration.runtime_settings import StepParameters
from soapui_build_step.engine_invocation.invocation_outcomes import InvocationResult, RunResult

from .step_outcomes import TEST_ERROR_KEY, OutcomeStatus, StepOutcome

LOGGER = logging.getLogger(__name__)

SKIP_TESTS_ENV_VAR = "SKIP_TESTS"
TEST_FAILURE_MESSAGE = (
    "SoapUI Test(s) failed: See logs and/or check the printReport "
    "(if necessary, set the option to true)"
)
MISSING_PROJECT_FILE_MESSAGE = "project_file setting is required"


def is_skip_signal_active(environ: Mapping[str, str]) -> bool:
    return environ.get(SKIP_TESTS_ENV_VAR, "false").strip().lower() == "true"


def check_preconditions(
    parameters: StepParameters, environ: Mapping[str, str]
) -> StepOutcome | None:
    """Return a terminal outcome when the engine must not be invoked at all.

    Skipping wins over validation, so a skipped step needs no project file.
    """
    if parameters.skip or is_skip_signal_active(environ):
        LOGGER.info("SoapUI tests are skipped.")
        return StepOutcome(status=OutcomeStatus.SKIPPED, message="SoapUI tests are skipped.")
    if parameters.project_file is None:
        return StepOutcome(
            status=OutcomeStatus.CONFIGURATION_ERROR,
            message=MISSING_PROJECT_FILE_MESSAGE,
        )
    return None


def run_has_failures(result: RunResult) -> bool:
    """Whether the engine reported any failing test case or assertion."""
    return bool(result.exit_code != 0 or result.failed_test_cases or result.failed_assertions)


def decide_outcome(invocation: InvocationResult, *, test_fail_ignore: bool) -> StepOutcome:
    """Classify an engine invocation.

    Execution errors abort the build even when ``test_fail_ignore`` is set;
    only failing tests can be tolerated.
    """
    run_result = invocation.run_result
    if run_result is None:
        return StepOutcome(
            status=OutcomeStatus.EXECUTION_ERROR,
            message=f"SoapUI Test(s) failed: {invocation.error_message}",
        )

    if not run_has_failures(run_result):
        return StepOutcome(
            status=OutcomeStatus.SUCCEEDED,
            message="SoapUI tests passed.",
            run_result=run_result,
        )

    if test_fail_ignore:
        LOGGER.warning(
            "The test_fail_ignore parameter has been set to true but some tests have failed"
        )
        return StepOutcome(
            status=OutcomeStatus.FAILED_IGNORED,
            message="SoapUI tests failed; failures ignored.",
            published_properties={TEST_ERROR_KEY: "true"},
            run_result=run_result,
        )

    return StepOutcome(
        status=OutcomeStatus.FAILED_HARD,
        message=TEST_FAILURE_MESSAGE,
        run_result=run_result,
    )

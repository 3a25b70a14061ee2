"""Test step use-case service."""

from __future__ import annotations

import dataclasses
import logging
import os
from collections.abc import Callable, Mapping
from pathlib import Path

from soapui_build_step.build_context import (
    BuildContext,
    BuildPropertiesError,
    load_build_properties,
    write_build_properties,
)
from soapui_build_step.configuration import (
    ConfigurationError,
    RunnerSettings,
    StepParameters,
    load_step_parameters,
)
from soapui_build_step.engine_environment import (
    EngineEnvironment,
    apply_system_properties,
    ensure_log_root,
)
from soapui_build_step.engine_invocation import Engine, TestRunnerEngine, invoke_engine
from soapui_build_step.outcome_policy import StepOutcome, check_preconditions, decide_outcome
from soapui_build_step.project_info import PROJECT_NAME, project_version
from soapui_build_step.run_configuration import build_run_configuration

from .step_contracts import StepRequest

LOGGER = logging.getLogger(__name__)

EngineFactory = Callable[[RunnerSettings], Engine]


class StepExecutionError(Exception):
    """Raised when a test step cannot be prepared or its results not recorded."""


def execute_test_step(
    parameters: StepParameters,
    build_context: BuildContext,
    *,
    engine_factory: EngineFactory | None = None,
    environ: Mapping[str, str] | None = None,
) -> StepOutcome:
    """Run one test step and publish its outcome into the build context."""
    resolved_engine_factory = engine_factory or TestRunnerEngine
    resolved_environ = os.environ if environ is None else environ
    LOGGER.info("You are using %s %s", PROJECT_NAME, project_version())

    precondition_outcome = check_preconditions(parameters, resolved_environ)
    if precondition_outcome is not None:
        return precondition_outcome

    run_configuration = build_run_configuration(parameters)
    environment = EngineEnvironment.from_process_environment(resolved_environ)
    apply_system_properties(environment, parameters.soapui_properties)
    ensure_log_root(environment, build_context.output_directory)

    engine = resolved_engine_factory(parameters.runner)
    invocation = invoke_engine(engine, run_configuration, environment)
    outcome = decide_outcome(invocation, test_fail_ignore=parameters.test_fail_ignore)
    if outcome.published_properties:
        build_context.publish(outcome.published_properties)
    return outcome


def execute_test_step_request(
    request: StepRequest,
    *,
    engine_factory: EngineFactory | None = None,
    environ: Mapping[str, str] | None = None,
) -> StepOutcome:
    """Execute a test step described by command-line input and persist published properties."""
    parameters = _load_parameters(request)
    build_context = BuildContext(output_directory=Path(request.build_dir).resolve())

    outcome = execute_test_step(
        parameters,
        build_context,
        engine_factory=engine_factory,
        environ=environ,
    )
    if outcome.published_properties:
        properties_path = request.resolved_properties_path()
        try:
            existing = load_build_properties(properties_path)
            written = write_build_properties(
                properties_path, {**existing, **build_context.properties}
            )
        except BuildPropertiesError as exc:
            raise StepExecutionError(str(exc)) from exc
        LOGGER.info("Build properties written to %s", written)
    return outcome


def _load_parameters(request: StepRequest) -> StepParameters:
    try:
        parameters = (
            load_step_parameters(request.config_path) if request.config_path else StepParameters()
        )
    except (ConfigurationError, OSError) as exc:
        raise StepExecutionError(str(exc)) from exc
    return dataclasses.replace(
        parameters,
        skip=parameters.skip or request.skip,
        test_fail_ignore=parameters.test_fail_ignore or request.test_fail_ignore,
        soapui_properties={**parameters.soapui_properties, **request.system_properties},
    )

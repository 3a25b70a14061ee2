"""Tests for the engine invoker."""

from __future__ import annotations

import logging

from soapui_build_step.engine_environment import EngineEnvironment
from soapui_build_step.engine_invocation import (
    EngineError,
    InvocationResult,
    RunResult,
    invoke_engine,
)
from soapui_build_step.run_configuration import RunConfiguration


class _RecordingEngine:
    def __init__(self, result: RunResult | None = None, error: Exception | None = None) -> None:
        self.calls: list[tuple[RunConfiguration, EngineEnvironment]] = []
        self._result = result
        self._error = error

    def run(self, configuration: RunConfiguration, environment: EngineEnvironment) -> RunResult:
        self.calls.append((configuration, environment))
        if self._error is not None:
            raise self._error
        assert self._result is not None
        return self._result


def test_completed_run_is_returned_as_finished_invocation() -> None:
    run_result = RunResult(exit_code=0, total_test_cases=3)
    engine = _RecordingEngine(result=run_result)
    configuration = RunConfiguration(project_file="projectA.xml")
    environment = EngineEnvironment()

    invocation = invoke_engine(engine, configuration, environment)

    assert invocation == InvocationResult.finished(run_result)
    assert invocation.completed is True
    assert engine.calls == [(configuration, environment)]


def test_engine_exception_is_contained_with_message_only(caplog) -> None:
    engine = _RecordingEngine(error=EngineError("Test runner not found: testrunner.sh"))

    with caplog.at_level(logging.DEBUG):
        invocation = invoke_engine(engine, RunConfiguration(), EngineEnvironment())

    assert invocation.completed is False
    assert invocation.run_result is None
    assert invocation.error_message == "Test runner not found: testrunner.sh"
    debug_records = [record for record in caplog.records if record.levelno == logging.DEBUG]
    assert debug_records and debug_records[0].exc_info is not None


def test_unexpected_exception_types_are_contained_too() -> None:
    engine = _RecordingEngine(error=RuntimeError("malformed project file"))

    invocation = invoke_engine(engine, RunConfiguration(), EngineEnvironment())

    assert invocation.error_message == "malformed project file"
    assert len(engine.calls) == 1


def test_exception_without_message_falls_back_to_type_name() -> None:
    engine = _RecordingEngine(error=KeyError())

    invocation = invoke_engine(engine, RunConfiguration(), EngineEnvironment())

    assert invocation.error_message == "KeyError"

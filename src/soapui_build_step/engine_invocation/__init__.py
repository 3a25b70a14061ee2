"""Engine invocation exports."""

from .engine_invoker import invoke_engine
from .invocation_outcomes import InvocationResult, RunResult
from .testrunner_engine import (
    Engine,
    EngineError,
    TestRunnerEngine,
    build_child_environment,
    build_testrunner_command,
    parse_testrunner_output,
    resolve_testrunner_executable,
)

__all__ = [
    "Engine",
    "EngineError",
    "InvocationResult",
    "RunResult",
    "TestRunnerEngine",
    "build_child_environment",
    "build_testrunner_command",
    "invoke_engine",
    "parse_testrunner_output",
    "resolve_testrunner_executable",
]

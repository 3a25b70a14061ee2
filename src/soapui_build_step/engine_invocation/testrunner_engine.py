"""SoapUI command-line test runner engine."""

from __future__ import annotations

import logging
import os
import re
import shlex
import subprocess
import sys
from collections.abc import Callable, Iterable, Mapping, Sequence
from pathlib import Path
from typing import Protocol

from soapui_build_step.configuration.runtime_settings import RunnerSettings
from soapui_build_step.engine_environment import EngineEnvironment
from soapui_build_step.run_configuration import RunConfiguration

from .invocation_outcomes import RunResult

LOGGER = logging.getLogger(__name__)

CommandRunner = Callable[[tuple[str, ...], Mapping[str, str]], tuple[int, list[str]]]

_VALUE_OPTIONS = (
    ("endpoint", "-e"),
    ("host", "-h"),
    ("test_suite", "-s"),
    ("test_case", "-c"),
    ("username", "-u"),
    ("password", "-p"),
    ("wss_password_type", "-w"),
    ("domain", "-d"),
    ("output_folder", "-f"),
    ("settings_file", "-t"),
    ("project_password", "-x"),
    ("settings_password", "-v"),
    ("report_name", "-R"),
)
_FLAG_OPTIONS = (
    ("print_report", "-r"),
    ("export_all", "-a"),
    ("junit_report", "-j"),
    ("open_report", "-o"),
    ("interactive", "-i"),
    ("ignore_errors", "-I"),
    ("save_after_run", "-S"),
    ("coverage", "-g"),
)
_SECRET_OPTIONS = frozenset({"-p", "-x", "-v"})

_TOTAL_TEST_CASES = re.compile(r"Total TestCases:\s*(\d+)(?:\s*\((\d+) failed\))?")
_FAILED_ASSERTIONS = re.compile(r"Total Failed Assertions:\s*(\d+)")
_FAILED_TEST_CASE = re.compile(
    r"Finished running SoapUI testcase \[(?P<name>.+?)\].*status:\s*FAILED", re.IGNORECASE
)


class EngineError(Exception):
    """Raised when the test runner cannot start or stops before running the tests."""


class Engine(Protocol):  # pylint: disable=too-few-public-methods
    """Protocol for engines that execute one run configuration."""

    def run(self, configuration: RunConfiguration, environment: EngineEnvironment) -> RunResult: ...


class TestRunnerEngine:  # pylint: disable=too-few-public-methods
    """Runs a SoapUI project through the ``testrunner`` command line."""

    __test__ = False

    def __init__(
        self,
        runner_settings: RunnerSettings | None = None,
        *,
        run_command: CommandRunner | None = None,
        base_environ: Mapping[str, str] | None = None,
    ) -> None:
        self._executable = resolve_testrunner_executable(runner_settings or RunnerSettings())
        self._run_command = run_command or _run_streaming_command
        self._base_environ = base_environ

    def run(self, configuration: RunConfiguration, environment: EngineEnvironment) -> RunResult:
        if configuration.project_file is None:
            raise EngineError("A project file is required to run the test runner.")
        command = build_testrunner_command(self._executable, configuration, environment)
        LOGGER.info("Running %s", _redact_command(command))
        base_environ = os.environ if self._base_environ is None else self._base_environ
        exit_code, output_lines = self._run_command(
            command, build_child_environment(base_environ, environment)
        )
        if exit_code != 0 and not summary_reported(output_lines):
            raise EngineError(_aborted_run_message(exit_code, output_lines))
        result = parse_testrunner_output(output_lines, exit_code=exit_code)
        LOGGER.debug("Test runner finished: %s", result)
        return result


def resolve_testrunner_executable(settings: RunnerSettings) -> str:
    """Return the test runner executable for the current platform."""
    if settings.executable:
        return settings.executable
    script_name = "testrunner.bat" if sys.platform.startswith("win") else "testrunner.sh"
    if settings.soapui_home is not None:
        return str(Path(settings.soapui_home) / "bin" / script_name)
    return script_name


def build_testrunner_command(
    executable: str,
    configuration: RunConfiguration,
    environment: EngineEnvironment | None = None,
) -> tuple[str, ...]:
    """Translate the run configuration into test runner arguments.

    Only options that are set produce arguments; flags are emitted when ``True``.
    System properties are passed as ``-Dkey=value`` ahead of the project file.
    """
    options = configuration.applied_options()
    arguments: list[str] = [executable]
    for field_name, option in _VALUE_OPTIONS:
        if field_name in options:
            arguments.extend((option, options[field_name]))
    for field_name, option in _FLAG_OPTIONS:
        if options.get(field_name):
            arguments.append(option)
    for field_name, option in (("global_properties", "-G"), ("project_properties", "-P")):
        for entry in options.get(field_name, ()):
            arguments.extend((option, entry))
    if "report_formats" in options:
        arguments.extend(("-F", ",".join(options["report_formats"])))
    if environment is not None:
        arguments.extend(_system_property_definitions(environment))
    if "project_file" in options:
        arguments.append(options["project_file"])
    return tuple(arguments)


def build_child_environment(
    base_environ: Mapping[str, str], environment: EngineEnvironment
) -> dict[str, str]:
    """Also expose the system properties through ``JAVA_OPTS`` for scripts that honour it."""
    child_environ = dict(base_environ)
    definitions = _system_property_definitions(environment)
    if definitions:
        existing = child_environ.get("JAVA_OPTS", "").strip()
        child_environ["JAVA_OPTS"] = " ".join(([existing] if existing else []) + definitions)
    return child_environ


def summary_reported(lines: Iterable[str]) -> bool:
    """Return whether the runner got as far as printing its test case summary."""
    return any(_TOTAL_TEST_CASES.search(line) for line in lines)


def parse_testrunner_output(lines: Iterable[str], *, exit_code: int) -> RunResult:
    """Read the test runner summary from its console output."""
    total_test_cases = 0
    failed_count = 0
    failed_assertions = 0
    failed_names: list[str] = []
    for line in lines:
        total_match = _TOTAL_TEST_CASES.search(line)
        if total_match:
            total_test_cases = int(total_match.group(1))
            failed_count = int(total_match.group(2) or 0)
            continue
        assertions_match = _FAILED_ASSERTIONS.search(line)
        if assertions_match:
            failed_assertions = int(assertions_match.group(1))
            continue
        failed_case = _FAILED_TEST_CASE.search(line)
        if failed_case and failed_case.group("name") not in failed_names:
            failed_names.append(failed_case.group("name"))

    # The summary count wins when individual cases were not reported by name.
    missing = failed_count - len(failed_names)
    if missing > 0:
        failed_names.extend(f"<unnamed #{index + 1}>" for index in range(missing))
    return RunResult(
        exit_code=exit_code,
        total_test_cases=total_test_cases,
        failed_test_cases=tuple(failed_names),
        failed_assertions=failed_assertions,
    )


def _run_streaming_command(
    command: tuple[str, ...], environ: Mapping[str, str]
) -> tuple[int, list[str]]:
    """Run the test runner to completion, relaying its console output line by line."""
    output_lines: list[str] = []
    try:
        with subprocess.Popen(
            list(command),
            env=dict(environ),
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
        ) as process:
            assert process.stdout is not None
            for raw_line in process.stdout:
                line = raw_line.rstrip("\n")
                LOGGER.info("%s", line)
                output_lines.append(line)
            exit_code = process.wait()
    except FileNotFoundError as exc:
        raise EngineError(f"Test runner not found: {command[0]}") from exc
    except OSError as exc:
        raise EngineError(f"Test runner could not be started: {exc}") from exc
    return exit_code, output_lines


def _system_property_definitions(environment: EngineEnvironment) -> list[str]:
    return [f"-D{key}={value}" for key, value in environment.as_dict().items()]


def _aborted_run_message(exit_code: int, output_lines: Sequence[str]) -> str:
    last_line = next((line.strip() for line in reversed(output_lines) if line.strip()), None)
    message = f"Test runner exited with code {exit_code} before running the tests"
    return f"{message}: {last_line}" if last_line else message


def _redact_command(command: Sequence[str]) -> str:
    redacted: list[str] = []
    hide_next = False
    for argument in command:
        redacted.append("******" if hide_next else argument)
        hide_next = argument in _SECRET_OPTIONS
    return shlex.join(redacted)

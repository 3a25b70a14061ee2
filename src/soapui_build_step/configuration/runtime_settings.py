"""Configuration domain entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class RunnerSettings:
    """Location of the SoapUI command-line test runner."""

    executable: str | None = None
    soapui_home: Path | None = None


@dataclass(frozen=True)
class StepParameters:  # pylint: disable=too-many-instance-attributes
    """Declarative parameter set of one test step.

    ``None`` means the parameter was not configured and must leave the
    test runner default untouched.
    """

    project_file: str | None = None
    test_suite: str | None = None
    test_case: str | None = None
    username: str | None = None
    password: str | None = None
    wss_password_type: str | None = None
    domain: str | None = None
    host: str | None = None
    endpoint: str | None = None
    output_folder: str | None = None
    print_report: bool | None = None
    interactive: bool | None = None
    export_all: bool | None = None
    junit_report: bool | None = None
    open_report: bool | None = None
    settings_file: str | None = None
    project_password: str | None = None
    settings_password: str | None = None
    coverage: bool | None = None
    global_properties: tuple[str, ...] | None = None
    project_properties: tuple[str, ...] | None = None
    save_after_run: bool | None = None
    report_format: str | None = None
    report_name: str | None = None
    skip: bool = False
    test_fail_ignore: bool = False
    soapui_properties: Mapping[str, str] = field(default_factory=dict)
    runner: RunnerSettings = field(default_factory=RunnerSettings)

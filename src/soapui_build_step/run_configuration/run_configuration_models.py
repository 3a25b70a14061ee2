"""Run configuration entity handed to the test engine."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any


@dataclass(frozen=True)
class RunConfiguration:  # pylint: disable=too-many-instance-attributes
    """Options for one test runner invocation; ``None`` keeps the runner default."""

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
    export_all: bool | None = None
    junit_report: bool | None = None
    open_report: bool | None = None
    interactive: bool | None = None
    ignore_errors: bool | None = None
    save_after_run: bool | None = None
    settings_file: str | None = None
    project_password: str | None = None
    settings_password: str | None = None
    coverage: bool | None = None
    global_properties: tuple[str, ...] | None = None
    project_properties: tuple[str, ...] | None = None
    report_formats: tuple[str, ...] | None = None
    report_name: str | None = None

    def applied_options(self) -> dict[str, Any]:
        """Return only the options that were explicitly set."""
        return {
            item.name: getattr(self, item.name)
            for item in fields(self)
            if getattr(self, item.name) is not None
        }

"""Mapping from step parameters to a test runner configuration."""

from __future__ import annotations

from soapui_build_step.configuration.runtime_settings import StepParameters

from .run_configuration_models import RunConfiguration

_PASS_THROUGH_FIELDS = (
    "project_file",
    "test_suite",
    "test_case",
    "username",
    "password",
    "wss_password_type",
    "domain",
    "host",
    "endpoint",
    "output_folder",
    "print_report",
    "export_all",
    "junit_report",
    "open_report",
    "interactive",
    "save_after_run",
    "settings_file",
    "project_password",
    "settings_password",
    "coverage",
    "report_name",
)


def build_run_configuration(parameters: StepParameters) -> RunConfiguration:
    """Build the run configuration from the configured step parameters.

    Unset parameters stay unset so the test runner keeps its own defaults.
    A missing project file is not rejected here; the outcome policy does that
    before any invocation.
    """
    options: dict[str, object] = {
        name: getattr(parameters, name)
        for name in _PASS_THROUGH_FIELDS
        if getattr(parameters, name) is not None
    }
    # Failures are judged after the run, so the runner must not stop at the first one.
    options["ignore_errors"] = True

    if parameters.global_properties:
        options["global_properties"] = tuple(parameters.global_properties)
    if parameters.project_properties:
        options["project_properties"] = tuple(parameters.project_properties)
    if parameters.report_format is not None:
        options["report_formats"] = split_report_formats(parameters.report_format)

    return RunConfiguration(**options)  # type: ignore[arg-type]


def split_report_formats(report_format: str) -> tuple[str, ...]:
    """Split a comma-separated report format list (``"JUNIT,PDF"``)."""
    return tuple(report_format.split(","))

"""Step configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "soapui-step.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Step configuration template for soapui-build-step.
# Replace the <REQUIRED> placeholder before running the step.
# Uncomment an <OPTIONAL> entry only when you need to change the test runner default.

project_file: "<REQUIRED>"

# Narrow the run to one test suite or test case.
# test_suite: "<OPTIONAL>"
# test_case: "<OPTIONAL>"

# Authentication passed through to the test requests.
# username: "<OPTIONAL>"
# password: "<OPTIONAL>"
# domain: "<OPTIONAL>"
# wss_password_type: "<OPTIONAL>"  # Text or Digest

# Network target overrides.
# host: "<OPTIONAL>"
# endpoint: "<OPTIONAL>"

# Reporting.
# output_folder: "<OPTIONAL>"
# print_report: false
# export_all: false
# junit_report: false
# open_report: false
# report_format: "<OPTIONAL>"  # comma-separated, e.g. "JUNIT,PDF"
# report_name: "<OPTIONAL>"

# Settings and project decryption.
# settings_file: "<OPTIONAL>"
# settings_password: "<OPTIONAL>"
# project_password: "<OPTIONAL>"

# interactive: false
# coverage: false
# save_after_run: false

# Property overlays, one "name=value" entry per property.
# global_properties:
#   - "<OPTIONAL>"
# project_properties:
#   - "<OPTIONAL>"

# JVM system properties handed to the test runner.
# soapui_properties:
#   soapui.logroot: "<OPTIONAL>"

# Policy.
# skip: false
# test_fail_ignore: false  # keep the build green and publish a flag when tests fail

# runner:
#   executable: "<OPTIONAL>"   # defaults to testrunner.sh on PATH
#   soapui_home: "<OPTIONAL>"  # uses <soapui_home>/bin/testrunner.sh
"""


def build_placeholder_configuration() -> str:
    """Build a YAML step configuration template with placeholders and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder step configuration template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Step configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()

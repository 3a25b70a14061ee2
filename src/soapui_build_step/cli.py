"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager

import click

from soapui_build_step.configuration import (
    DEFAULT_CONFIG_FILENAME,
    write_placeholder_configuration,
)
from soapui_build_step.step_execution import (
    StepExecutionError,
    StepRequest,
    execute_test_step_request,
)

_PACKAGE_LOGGER = logging.getLogger("soapui_build_step")


class CliError(Exception):
    """Custom CLI error."""


def _parse_system_properties(
    _ctx: click.Context, _param: click.Parameter, values: tuple[str, ...]
) -> dict[str, str]:
    properties: dict[str, str] = {}
    for value in values:
        key, separator, property_value = value.partition("=")
        if not separator or not key.strip():
            raise click.BadParameter(f"expected KEY=VALUE, got '{value}'")
        properties[key.strip()] = property_value
    return properties


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="soapui-build-step")
def cli() -> None:
    """Run SoapUI functional tests as a build step."""


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML step configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a placeholder YAML step configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="run")
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Path to the YAML step configuration file",
)
@click.option(
    "--build-dir",
    "build_dir",
    default="target",
    show_default=True,
    type=click.Path(path_type=str),
    help="Build output directory; the default SoapUI log root lives below it",
)
@click.option(
    "--properties-file",
    "properties_path",
    required=False,
    type=click.Path(path_type=str),
    help="Build properties file for later steps [default: <build-dir>/build.properties.yaml]",
)
@click.option("--skip", is_flag=True, default=False, help="Skip the SoapUI tests.")
@click.option(
    "--test-fail-ignore",
    is_flag=True,
    default=False,
    help="Keep the build green when tests fail and publish the failure flag instead.",
)
@click.option(
    "-D",
    "--system-property",
    "system_properties",
    multiple=True,
    callback=_parse_system_properties,
    metavar="KEY=VALUE",
    help="JVM system property for the test runner; may be repeated.",
)
@click.option("--verbose", is_flag=True, default=False, help="Log debug details.")
def run_step(  # pylint: disable=too-many-arguments,too-many-positional-arguments
    config_path: str | None,
    build_dir: str,
    properties_path: str | None,
    skip: bool,
    test_fail_ignore: bool,
    system_properties: dict[str, str],
    verbose: bool,
) -> None:
    """Run the configured SoapUI project and report the build outcome."""
    with _step_logging(verbose):
        try:
            outcome = execute_test_step_request(
                StepRequest(
                    config_path=config_path,
                    build_dir=build_dir,
                    properties_path=properties_path,
                    skip=skip,
                    test_fail_ignore=test_fail_ignore,
                    system_properties=system_properties,
                )
            )
        except StepExecutionError as exc:
            raise CliError(str(exc)) from exc
    if outcome.aborts_build:
        raise CliError(outcome.message)
    click.echo(outcome.status.value)


@contextmanager
def _step_logging(verbose: bool) -> Iterator[None]:
    """Send package log records to stderr for the duration of one command."""
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
    previous_level = _PACKAGE_LOGGER.level
    _PACKAGE_LOGGER.addHandler(handler)
    _PACKAGE_LOGGER.setLevel(logging.DEBUG if verbose else logging.INFO)
    try:
        yield
    finally:
        _PACKAGE_LOGGER.removeHandler(handler)
        _PACKAGE_LOGGER.setLevel(previous_level)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())

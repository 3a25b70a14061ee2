"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_CONFIG_FILENAME,
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from .loader import ConfigurationError, load_step_parameters, parse_step_parameters
from .runtime_settings import RunnerSettings, StepParameters

__all__ = [
    "StepParameters",
    "RunnerSettings",
    "ConfigurationError",
    "load_step_parameters",
    "parse_step_parameters",
    "DEFAULT_CONFIG_FILENAME",
    "build_placeholder_configuration",
    "write_placeholder_configuration",
]

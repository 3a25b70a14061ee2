"""Run configuration domain exports."""

from .configuration_builder import build_run_configuration, split_report_formats
from .run_configuration_models import RunConfiguration

__all__ = ["RunConfiguration", "build_run_configuration", "split_report_formats"]

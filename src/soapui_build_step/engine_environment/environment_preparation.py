"""Preconditions applied to the engine environment before invocation."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path

from .engine_environment import LOG_ROOT_PROPERTY, EngineEnvironment

LOGGER = logging.getLogger(__name__)

DEFAULT_LOG_ROOT_SUFFIX = "/soapui/logs/"


def apply_system_properties(
    environment: EngineEnvironment, overrides: Mapping[str, str] | None
) -> None:
    """Copy caller supplied system properties onto the engine environment.

    Nothing is rolled back: the values stay visible to the engine for the
    whole run.
    """
    for key, value in (overrides or {}).items():
        LOGGER.info("Setting %s value %s", key, value)
        environment.set(key, value)


def ensure_log_root(environment: EngineEnvironment, build_output_directory: Path | str) -> bool:
    """Default ``soapui.logroot`` below the build output directory when it is blank.

    Returns:
      ``True`` when the default was applied, ``False`` when a value was already set.
    """
    LOGGER.info("Checking logs configuration")
    current = environment.get(LOG_ROOT_PROPERTY)
    LOGGER.debug("key %s value %s", LOG_ROOT_PROPERTY, current)
    applied = False
    if current is None or not current.strip():
        # Plain concatenation keeps the trailing separator the runner expects.
        default_log_root = f"{build_output_directory}{DEFAULT_LOG_ROOT_SUFFIX}"
        environment.set(LOG_ROOT_PROPERTY, default_log_root)
        LOGGER.info("Using default log directory %s", default_log_root)
        applied = True
    LOGGER.info("Logs configuration done.")
    return applied

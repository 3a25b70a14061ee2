"""Engine environment domain exports."""

from .engine_environment import LOG_ROOT_ENV_VAR, LOG_ROOT_PROPERTY, EngineEnvironment
from .environment_preparation import (
    DEFAULT_LOG_ROOT_SUFFIX,
    apply_system_properties,
    ensure_log_root,
)

__all__ = [
    "EngineEnvironment",
    "LOG_ROOT_PROPERTY",
    "LOG_ROOT_ENV_VAR",
    "DEFAULT_LOG_ROOT_SUFFIX",
    "apply_system_properties",
    "ensure_log_root",
]

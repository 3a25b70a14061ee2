"""Step configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from .runtime_settings import RunnerSettings, StepParameters


class ConfigurationError(Exception):
    """Raised when the step configuration file is invalid."""


_STRING_KEYS = (
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
    "settings_file",
    "project_password",
    "settings_password",
    "report_format",
    "report_name",
)
_OPTIONAL_FLAG_KEYS = (
    "print_report",
    "interactive",
    "export_all",
    "junit_report",
    "open_report",
    "coverage",
    "save_after_run",
)
_POLICY_FLAG_KEYS = ("skip", "test_fail_ignore")
_PROPERTY_LIST_KEYS = ("global_properties", "project_properties")
_KNOWN_KEYS = frozenset(
    _STRING_KEYS
    + _OPTIONAL_FLAG_KEYS
    + _POLICY_FLAG_KEYS
    + _PROPERTY_LIST_KEYS
    + ("soapui_properties", "runner")
)


def load_step_parameters(config_path: Path | str) -> StepParameters:
    """Load and validate the step configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise ConfigurationError(f"Configuration file is not valid UTF-8: {path}") from exc
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    return parse_step_parameters(parsed, base_path=path.parent)


def parse_step_parameters(section: Mapping[str, Any], *, base_path: Path) -> StepParameters:
    """Validate an already parsed configuration mapping."""
    unknown = sorted(str(key) for key in section if key not in _KNOWN_KEYS)
    if unknown:
        raise ConfigurationError(f"Unknown configuration keys: {', '.join(unknown)}")

    strings = {key: _optional_string(section.get(key), key) for key in _STRING_KEYS}
    flags = {key: _optional_bool(section.get(key), key) for key in _OPTIONAL_FLAG_KEYS}
    property_lists = {
        key: _optional_string_sequence(section.get(key), key) for key in _PROPERTY_LIST_KEYS
    }
    policy_flags = {
        key: bool(_optional_bool(section.get(key), key)) for key in _POLICY_FLAG_KEYS
    }

    return StepParameters(  # type: ignore[arg-type]
        **strings,
        **flags,
        **property_lists,
        **policy_flags,
        soapui_properties=_parse_soapui_properties(section.get("soapui_properties")),
        runner=_parse_runner_section(section.get("runner"), base_path),
    )


def _parse_runner_section(value: Any, base_path: Path) -> RunnerSettings:
    if value is None:
        return RunnerSettings()
    section = _require_mapping(value, "runner")
    executable = _optional_string(section.get("executable"), "runner.executable")
    soapui_home_raw = _optional_string(section.get("soapui_home"), "runner.soapui_home")
    soapui_home = _resolve_path(base_path, soapui_home_raw) if soapui_home_raw else None
    return RunnerSettings(executable=executable, soapui_home=soapui_home)


def _parse_soapui_properties(value: Any) -> dict[str, str]:
    if value is None:
        return {}
    section = _require_mapping(value, "soapui_properties")
    properties: dict[str, str] = {}
    for key, raw in section.items():
        if not isinstance(key, str) or not key.strip():
            raise ConfigurationError("soapui_properties keys must be non-empty strings.")
        properties[key.strip()] = _property_value(raw, f"soapui_properties.{key}")
    return properties


def _property_value(value: Any, field_name: str) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (str, int, float)):
        return str(value)
    if value is None:
        return ""
    raise ConfigurationError(f"{field_name} must be a scalar value.")


def _optional_string_sequence(value: Any, field_name: str) -> tuple[str, ...] | None:
    if value is None:
        return None
    if isinstance(value, str):
        return (value,)
    if isinstance(value, Sequence):
        normalized = []
        for item in value:
            if not isinstance(item, str):
                raise ConfigurationError(f"{field_name} entries must be strings.")
            normalized.append(item)
        return tuple(normalized)
    raise ConfigurationError(f"{field_name} must be a string or list of strings.")


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path)
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' must be a mapping.")
    return value


def _optional_string(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    return value


def _optional_bool(value: Any, field_name: str) -> bool | None:
    if value is None:
        return None
    if not isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be a boolean.")
    return value

"""Shared build properties that later pipeline steps can inspect."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

import yaml

LOGGER = logging.getLogger(__name__)

DEFAULT_PROPERTIES_FILENAME = "build.properties.yaml"


class BuildPropertiesError(Exception):
    """Raised when the build properties file cannot be read or written."""


@dataclass
class BuildContext:
    """Build output directory and the pipeline-wide property bag."""

    output_directory: Path
    properties: dict[str, str] = field(default_factory=dict)

    def publish(self, published: Mapping[str, str]) -> None:
        for key, value in published.items():
            LOGGER.info("Setting project property %s", key)
            self.properties[key] = value
            LOGGER.info("Property %s set to %s", key, self.properties[key])


def load_build_properties(path: Path | str) -> dict[str, str]:
    """Read build properties, returning an empty mapping for a missing file."""
    properties_path = Path(path)
    if not properties_path.exists():
        return {}
    try:
        parsed = yaml.safe_load(properties_path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as exc:
        raise BuildPropertiesError(f"Failed to read build properties: {exc}") from exc
    if parsed is None:
        return {}
    if not isinstance(parsed, Mapping):
        raise BuildPropertiesError(f"Build properties must be a mapping: {properties_path}")
    return {str(key): str(value) for key, value in parsed.items()}


def write_build_properties(path: Path | str, properties: Mapping[str, str]) -> Path:
    """Write build properties as a flat YAML mapping of strings."""
    properties_path = Path(path)
    try:
        properties_path.parent.mkdir(parents=True, exist_ok=True)
        properties_path.write_text(
            yaml.safe_dump(dict(properties), default_flow_style=False, sort_keys=True),
            encoding="utf-8",
        )
    except OSError as exc:
        raise BuildPropertiesError(f"Failed to write build properties: {exc}") from exc
    return properties_path.resolve()

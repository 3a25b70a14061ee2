"""Build context exports."""

from .build_properties import (
    DEFAULT_PROPERTIES_FILENAME,
    BuildContext,
    BuildPropertiesError,
    load_build_properties,
    write_build_properties,
)

__all__ = [
    "BuildContext",
    "BuildPropertiesError",
    "DEFAULT_PROPERTIES_FILENAME",
    "load_build_properties",
    "write_build_properties",
]

"""JVM system properties handed to the test engine."""

from __future__ import annotations

from collections.abc import Mapping

LOG_ROOT_PROPERTY = "soapui.logroot"
LOG_ROOT_ENV_VAR = "SOAPUI_LOGROOT"


class EngineEnvironment:
    """Explicit system property set passed to the engine for one run."""

    def __init__(self, system_properties: Mapping[str, str] | None = None) -> None:
        self._system_properties: dict[str, str] = dict(system_properties or {})

    @classmethod
    def from_process_environment(cls, environ: Mapping[str, str]) -> EngineEnvironment:
        """Seed the system properties that may come from the process environment."""
        seeded: dict[str, str] = {}
        log_root = environ.get(LOG_ROOT_ENV_VAR)
        if log_root is not None:
            seeded[LOG_ROOT_PROPERTY] = log_root
        return cls(seeded)

    def get(self, key: str) -> str | None:
        return self._system_properties.get(key)

    def set(self, key: str, value: str) -> None:
        self._system_properties[key] = value

    def as_dict(self) -> dict[str, str]:
        return dict(self._system_properties)

    def __repr__(self) -> str:
        return f"EngineEnvironment({sorted(self._system_properties)!r})"

"""Step execution entities."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from soapui_build_step.build_context import DEFAULT_PROPERTIES_FILENAME


@dataclass(frozen=True)
class StepRequest:
    """Input contract for executing one test step from the command line."""

    config_path: str | None
    build_dir: str = "target"
    properties_path: str | None = None
    skip: bool = False
    test_fail_ignore: bool = False
    system_properties: dict[str, str] = field(default_factory=dict)

    def resolved_properties_path(self) -> Path:
        if self.properties_path:
            return Path(self.properties_path)
        return Path(self.build_dir) / DEFAULT_PROPERTIES_FILENAME

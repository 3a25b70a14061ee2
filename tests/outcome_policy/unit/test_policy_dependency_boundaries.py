"""Boundary tests for outcome_policy internal dependencies."""

from __future__ import annotations

from pathlib import Path


def _project_root() -> Path:
    return Path(__file__).resolve().parents[3]


def test_outcome_policy_does_not_touch_processes_or_build_properties() -> None:
    policy_dir = _project_root() / "src" / "soapui_build_step" / "outcome_policy"
    core_modules = (
        policy_dir / "step_outcomes.py",
        policy_dir / "failure_policy.py",
    )
    forbidden_import_fragments = (
        "import subprocess",
        "import os",
        "soapui_build_step.engine_invocation.testrunner_engine",
        "soapui_build_step.build_context",
    )

    for module_path in core_modules:
        text = module_path.read_text(encoding="utf-8")
        for fragment in forbidden_import_fragments:
            assert fragment not in text, f"Forbidden core dependency in {module_path}: {fragment}"

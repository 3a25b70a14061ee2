"""Tests for engine environment preconditions."""

from __future__ import annotations

import logging
from pathlib import Path

from soapui_build_step.engine_environment import (
    LOG_ROOT_PROPERTY,
    EngineEnvironment,
    apply_system_properties,
    ensure_log_root,
)


def test_blank_log_root_defaults_below_build_output_directory() -> None:
    environment = EngineEnvironment()

    applied = ensure_log_root(environment, Path("/work/target"))

    assert applied is True
    assert environment.get(LOG_ROOT_PROPERTY) == "/work/target/soapui/logs/"


def test_whitespace_only_log_root_counts_as_blank() -> None:
    environment = EngineEnvironment({LOG_ROOT_PROPERTY: "   "})

    assert ensure_log_root(environment, "/work/target") is True
    assert environment.get(LOG_ROOT_PROPERTY) == "/work/target/soapui/logs/"


def test_existing_log_root_is_left_untouched() -> None:
    environment = EngineEnvironment({LOG_ROOT_PROPERTY: "/var/log/soapui/"})

    assert ensure_log_root(environment, "/work/target") is False
    assert environment.get(LOG_ROOT_PROPERTY) == "/var/log/soapui/"


def test_second_call_is_a_no_op() -> None:
    environment = EngineEnvironment()
    ensure_log_root(environment, "/work/target")
    before = environment.as_dict()

    assert ensure_log_root(environment, "/elsewhere") is False
    assert environment.as_dict() == before


def test_log_root_is_seeded_from_process_environment() -> None:
    environment = EngineEnvironment.from_process_environment({"SOAPUI_LOGROOT": "/logs/"})

    assert environment.get(LOG_ROOT_PROPERTY) == "/logs/"
    assert EngineEnvironment.from_process_environment({"PATH": "/bin"}).as_dict() == {}


def test_system_properties_are_applied_and_logged(caplog) -> None:
    environment = EngineEnvironment()

    with caplog.at_level(logging.INFO):
        apply_system_properties(environment, {"soapui.https.protocols": "TLSv1.2", "a": "b"})

    assert environment.as_dict() == {"soapui.https.protocols": "TLSv1.2", "a": "b"}
    assert "Setting soapui.https.protocols value TLSv1.2" in caplog.text
    assert "Setting a value b" in caplog.text


def test_supplied_log_root_property_wins_over_default() -> None:
    environment = EngineEnvironment()

    apply_system_properties(environment, {LOG_ROOT_PROPERTY: "/custom/"})
    ensure_log_root(environment, "/work/target")

    assert environment.get(LOG_ROOT_PROPERTY) == "/custom/"


def test_empty_overrides_leave_environment_unchanged() -> None:
    environment = EngineEnvironment({"x": "1"})

    apply_system_properties(environment, {})
    apply_system_properties(environment, None)

    assert environment.as_dict() == {"x": "1"}

"""Installed distribution name and version."""

from __future__ import annotations

from importlib import metadata

PROJECT_NAME = "soapui-build-step"


def project_version() -> str:
    try:
        return metadata.version(PROJECT_NAME)
    except metadata.PackageNotFoundError:
        return "unknown"

"""Environment variable mapping for stylescan configuration.

This module defines the environment variables that can be used to
configure stylescan and provides utilities for reading them.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

# Environment variable names
ENV_CONFIG_PATH = "STYLESCAN_CONFIG_PATH"
ENV_EXTENSIONS = "STYLESCAN_EXTENSIONS"
ENV_EXAMPLE_CAP = "STYLESCAN_EXAMPLE_CAP"
ENV_SNIPPET_LENGTH = "STYLESCAN_SNIPPET_LENGTH"
ENV_FOLLOW_SYMLINKS = "STYLESCAN_FOLLOW_SYMLINKS"
ENV_CATALOG_PATH = "STYLESCAN_CATALOG_PATH"
ENV_DISABLED_DETECTORS = "STYLESCAN_DISABLED_DETECTORS"
ENV_OUTPUT_FORMAT = "STYLESCAN_OUTPUT_FORMAT"
ENV_OUTPUT_DIR = "STYLESCAN_OUTPUT_DIR"
ENV_QUIET = "STYLESCAN_QUIET"
ENV_VERBOSE = "STYLESCAN_VERBOSE"


def _parse_bool(value: str) -> bool:
    return value.lower() in ("true", "1", "yes", "on", "enabled")


def _parse_int(value: str) -> int | None:
    try:
        return int(value)
    except ValueError:
        return None


def _parse_list(value: str) -> list[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


def get_env_overrides() -> dict[str, Any]:
    """Get configuration overrides from environment variables.

    Returns:
        Nested dictionary of configuration values, containing only the
        sections that have at least one variable set.
    """
    overrides: dict[str, Any] = {
        "scan": {},
        "catalog": {},
        "output": {},
    }

    # STYLESCAN_CONFIG_PATH is handled separately (specifies config file location)

    if ENV_EXTENSIONS in os.environ:
        overrides["scan"]["extensions"] = _parse_list(os.environ[ENV_EXTENSIONS])

    if ENV_EXAMPLE_CAP in os.environ:
        value = _parse_int(os.environ[ENV_EXAMPLE_CAP])
        if value is not None:
            overrides["scan"]["example_cap"] = value

    if ENV_SNIPPET_LENGTH in os.environ:
        value = _parse_int(os.environ[ENV_SNIPPET_LENGTH])
        if value is not None:
            overrides["scan"]["snippet_length"] = value

    if ENV_FOLLOW_SYMLINKS in os.environ:
        overrides["scan"]["follow_symlinks"] = _parse_bool(os.environ[ENV_FOLLOW_SYMLINKS])

    if ENV_CATALOG_PATH in os.environ:
        overrides["catalog"]["custom_catalog_path"] = Path(os.environ[ENV_CATALOG_PATH])

    if ENV_DISABLED_DETECTORS in os.environ:
        overrides["catalog"]["disabled_detectors"] = _parse_list(os.environ[ENV_DISABLED_DETECTORS])

    if ENV_OUTPUT_FORMAT in os.environ:
        overrides["output"]["format"] = os.environ[ENV_OUTPUT_FORMAT].lower()

    if ENV_OUTPUT_DIR in os.environ:
        overrides["output"]["output_dir"] = Path(os.environ[ENV_OUTPUT_DIR])

    if ENV_QUIET in os.environ:
        overrides["output"]["quiet"] = _parse_bool(os.environ[ENV_QUIET])

    if ENV_VERBOSE in os.environ:
        overrides["output"]["verbose"] = _parse_bool(os.environ[ENV_VERBOSE])

    return {k: v for k, v in overrides.items() if v}


def get_config_path_from_env() -> Path | None:
    """Get the config file path from the environment, if it exists."""
    if ENV_CONFIG_PATH in os.environ:
        path = Path(os.environ[ENV_CONFIG_PATH])
        if path.exists():
            return path
    return None

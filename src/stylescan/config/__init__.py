"""Configuration management for stylescan.

Settings are merged from four sources, later ones overriding earlier ones:

1. Default values (lowest priority)
2. Configuration file
3. Environment variables
4. CLI arguments (highest priority)

Example usage::

    from stylescan.config import load_config

    config = load_config(cli_args={"example_cap": 10})
    print(config.scan.example_cap)
    print(config.output.format)
"""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path
from typing import Any

from stylescan.config.env import (
    ENV_CATALOG_PATH,
    ENV_CONFIG_PATH,
    ENV_EXAMPLE_CAP,
    ENV_OUTPUT_DIR,
    ENV_OUTPUT_FORMAT,
    get_config_path_from_env,
    get_env_overrides,
)
from stylescan.config.loader import ConfigLoader, read_mapping_file
from stylescan.config.schema import (
    CatalogSettings,
    OutputSettings,
    ScanSettings,
    StyleScanConfig,
)

logger = logging.getLogger(__name__)

__all__ = [
    "ScanSettings",
    "CatalogSettings",
    "OutputSettings",
    "StyleScanConfig",
    "ConfigLoader",
    "read_mapping_file",
    "ENV_CONFIG_PATH",
    "ENV_EXAMPLE_CAP",
    "ENV_CATALOG_PATH",
    "ENV_OUTPUT_FORMAT",
    "ENV_OUTPUT_DIR",
    "get_env_overrides",
    "ConfigPriority",
    "load_config",
]


class ConfigPriority(str, Enum):
    """Configuration source priority levels.

    Higher priority sources override lower priority ones.
    """

    DEFAULT = "default"
    CONFIG_FILE = "config_file"
    ENVIRONMENT = "environment"
    CLI = "cli"


def _merge_configs(
    base: dict[str, Any],
    override: dict[str, Any],
    source: ConfigPriority,
) -> tuple[dict[str, Any], dict[str, ConfigPriority]]:
    """Recursively merge configuration dictionaries.

    Returns:
        A tuple of (merged_config, sources_dict) where sources_dict
        tracks which priority each dotted key came from.
    """
    result = base.copy()
    sources: dict[str, ConfigPriority] = {}

    for key, value in override.items():
        if value is None:
            continue

        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            merged, nested_sources = _merge_configs(result[key], value, source)
            result[key] = merged
            for nested_key, nested_source in nested_sources.items():
                sources[f"{key}.{nested_key}"] = nested_source
        else:
            result[key] = value
            sources[key] = source

    return result, sources


def load_config(
    config_path: Path | str | None = None,
    cli_args: dict[str, Any] | None = None,
    use_env: bool = True,
    use_file: bool = True,
) -> StyleScanConfig:
    """Load configuration with proper priority handling.

    Args:
        config_path: Optional explicit path to a config file. When omitted,
            ``STYLESCAN_CONFIG_PATH`` is consulted, then the standard
            locations are searched.
        cli_args: Optional dictionary of CLI argument overrides.
        use_env: Whether to apply environment variable overrides.
        use_file: Whether to look for and load config files.

    Returns:
        A fully merged StyleScanConfig instance.

    Raises:
        ConfigError: If a config file is invalid.
    """
    sources: dict[str, ConfigPriority] = {}
    config_dict: dict[str, Any] = StyleScanConfig().model_dump()

    if use_file:
        loader = ConfigLoader()
        file_path = config_path or get_config_path_from_env() or loader.find_config_file()
        if file_path:
            file_config = loader.load(file_path)
            file_dict = file_config.model_dump(exclude_unset=True)
            config_dict, file_sources = _merge_configs(
                config_dict, file_dict, ConfigPriority.CONFIG_FILE
            )
            sources.update(file_sources)

    if use_env:
        env_overrides = get_env_overrides()
        if env_overrides:
            config_dict, env_sources = _merge_configs(
                config_dict, env_overrides, ConfigPriority.ENVIRONMENT
            )
            sources.update(env_sources)

    if cli_args:
        cli_dict = _normalize_cli_args(cli_args)
        config_dict, cli_sources = _merge_configs(config_dict, cli_dict, ConfigPriority.CLI)
        sources.update(cli_sources)

    config = StyleScanConfig.model_validate(config_dict)

    for key, source in sorted(sources.items()):
        logger.debug("Setting %s taken from %s", key, source.value)

    return config


def _normalize_cli_args(cli_args: dict[str, Any]) -> dict[str, Any]:
    """Convert flat CLI argument names into nested config sections."""
    result: dict[str, Any] = {
        "scan": {},
        "catalog": {},
        "output": {},
    }

    mappings = {
        "extensions": ("scan", "extensions"),
        "example_cap": ("scan", "example_cap"),
        "snippet_length": ("scan", "snippet_length"),
        "follow_symlinks": ("scan", "follow_symlinks"),
        "catalog": ("catalog", "custom_catalog_path"),
        "custom_catalog_path": ("catalog", "custom_catalog_path"),
        "disabled_detectors": ("catalog", "disabled_detectors"),
        "format": ("output", "format"),
        "output_format": ("output", "format"),
        "output_dir": ("output", "output_dir"),
        "quiet": ("output", "quiet"),
        "verbose": ("output", "verbose"),
    }

    for arg_name, value in cli_args.items():
        if value is None:
            continue

        if arg_name in mappings:
            section, key = mappings[arg_name]
            result[section][key] = value
        else:
            result[arg_name] = value

    return {k: v for k, v in result.items() if v}

"""Configuration file loading and discovery.

This module handles finding and loading configuration files from various
locations and formats (YAML, TOML, JSON). The same parsing is used for
custom catalog files.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, Any

import yaml

from stylescan.core.exceptions import ConfigError

try:
    import tomllib  # Python 3.11+
except ImportError:
    import tomli as tomllib  # type: ignore[no-redef]

if TYPE_CHECKING:
    from stylescan.config.schema import StyleScanConfig

# Config file names to search for (in order of preference)
CONFIG_FILE_NAMES = [
    ".stylescan.yml",
    ".stylescan.yaml",
    ".stylescan.toml",
    "stylescan.config.json",
]

# User-level config directories
USER_CONFIG_DIRS = [
    Path.home() / ".config" / "stylescan",
]


def _load_yaml(content: str, path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"{path} must contain a mapping, got: {type(data).__name__}")
    return data


def _load_toml(content: str, path: Path) -> dict[str, Any]:
    try:
        return tomllib.loads(content)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e


def _load_json(content: str, path: Path) -> dict[str, Any]:
    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"{path} must contain an object, got: {type(data).__name__}")
    return data


def read_mapping_file(path: Path | str) -> dict[str, Any]:
    """Read a YAML, TOML or JSON file into a dictionary.

    The format is chosen by suffix; unknown suffixes are parsed as YAML,
    which also accepts JSON.

    Raises:
        ConfigError: If the file is missing, unreadable or not a mapping.
    """
    path = Path(path)

    if not path.exists():
        raise ConfigError(f"File not found: {path}")
    if not path.is_file():
        raise ConfigError(f"Not a file: {path}")

    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    suffix = path.suffix.lower()
    if suffix == ".toml":
        return _load_toml(content, path)
    if suffix == ".json":
        return _load_json(content, path)
    return _load_yaml(content, path)


class ConfigLoader:
    """Loads and parses configuration files.

    Handles automatic discovery of config files in project directories
    and the user-level config directory.
    """

    def __init__(self, search_paths: list[Path] | None = None) -> None:
        """Initialize the config loader.

        Args:
            search_paths: Additional paths to search for config files.
        """
        self.search_paths = search_paths or []

    def find_config_file(self, start_path: Path | None = None) -> Path | None:
        """Find a configuration file by searching standard locations.

        Searches in the following order:
        1. The start_path directory (or cwd if not specified)
        2. Parent directories up to the root
        3. The user config directory (~/.config/stylescan)
        4. Any additional search_paths

        Returns:
            Path to the config file if found, None otherwise.
        """
        search_dirs: list[Path] = []

        current = Path(start_path).resolve() if start_path else Path.cwd()
        while current != current.parent:
            search_dirs.append(current)
            current = current.parent
        search_dirs.append(current)

        search_dirs.extend(USER_CONFIG_DIRS)
        search_dirs.extend(self.search_paths)

        for search_dir in search_dirs:
            if not search_dir.is_dir():
                continue
            for config_name in CONFIG_FILE_NAMES:
                config_path = search_dir / config_name
                if config_path.is_file():
                    return config_path

        return None

    def load(self, path: Path | str) -> StyleScanConfig:
        """Load configuration from a file.

        Raises:
            ConfigError: If the file cannot be loaded, parsed or validated.
        """
        from pydantic import ValidationError

        from stylescan.config.schema import StyleScanConfig

        path = Path(path)
        data = read_mapping_file(path)

        try:
            return StyleScanConfig.model_validate(data)
        except ValidationError as e:
            raise ConfigError(f"Invalid configuration in {path}: {e}") from e

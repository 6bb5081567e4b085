"""Tests for configuration loading and priority handling.

Covers the settings schema, config file discovery and parsing, the
environment variable mapping and the CLI > env > file > default merge.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest
from pydantic import ValidationError

from stylescan.config import (
    ConfigLoader,
    ConfigPriority,
    StyleScanConfig,
    _merge_configs,
    get_env_overrides,
    load_config,
    read_mapping_file,
)
from stylescan.core.exceptions import ConfigError
from stylescan.core.models import DEFAULT_EXTENSIONS, OutputFormat


class TestSchema:
    """Tests for the settings models."""

    def test_defaults(self) -> None:
        config = StyleScanConfig()
        assert config.scan.example_cap == 50
        assert config.scan.snippet_length == 240
        assert config.scan.follow_symlinks is True
        assert config.scan.extensions == DEFAULT_EXTENSIONS
        assert config.catalog.custom_catalog_path is None
        assert config.catalog.disabled_detectors == []
        assert config.output.format == OutputFormat.MARKDOWN
        assert config.output.output_dir == Path("tmp")

    def test_extensions_from_string(self) -> None:
        config = StyleScanConfig.model_validate({"scan": {"extensions": "java, .kt"}})
        assert config.scan.extensions == [".java", ".kt"]

    def test_empty_extensions_rejected(self) -> None:
        with pytest.raises(ValidationError):
            StyleScanConfig.model_validate({"scan": {"extensions": ""}})

    def test_example_cap_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            StyleScanConfig.model_validate({"scan": {"example_cap": 0}})

    def test_format_is_case_insensitive(self) -> None:
        config = StyleScanConfig.model_validate({"output": {"format": "JSON"}})
        assert config.output.format == OutputFormat.JSON

    def test_unknown_format(self) -> None:
        with pytest.raises(ValidationError, match="format must be one of"):
            StyleScanConfig.model_validate({"output": {"format": "pdf"}})

    def test_to_scan_config(self, tmp_path: Path) -> None:
        config = StyleScanConfig.model_validate(
            {"scan": {"example_cap": 5, "follow_symlinks": False}}
        )
        scan_config = config.to_scan_config(tmp_path)
        assert scan_config.root == tmp_path
        assert scan_config.example_cap == 5
        assert scan_config.follow_symlinks is False


class TestReadMappingFile:
    """Tests for YAML, TOML and JSON parsing."""

    def test_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "a.yml"
        path.write_text("scan:\n  example_cap: 3\n")
        assert read_mapping_file(path) == {"scan": {"example_cap": 3}}

    def test_empty_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "a.yaml"
        path.write_text("")
        assert read_mapping_file(path) == {}

    def test_toml(self, tmp_path: Path) -> None:
        path = tmp_path / "a.toml"
        path.write_text("[output]\nformat = \"json\"\n")
        assert read_mapping_file(path) == {"output": {"format": "json"}}

    def test_json(self, tmp_path: Path) -> None:
        path = tmp_path / "a.json"
        path.write_text(json.dumps({"catalog": {"disabled_detectors": ["pmd"]}}))
        assert read_mapping_file(path)["catalog"]["disabled_detectors"] == ["pmd"]

    @pytest.mark.parametrize(
        ("name", "content"),
        [
            ("bad.yml", "scan: [unclosed"),
            ("bad.toml", "scan = ["),
            ("bad.json", "{"),
            ("list.yml", "- a\n- b\n"),
            ("list.json", "[1, 2]"),
        ],
    )
    def test_invalid(self, tmp_path: Path, name: str, content: str) -> None:
        path = tmp_path / name
        path.write_text(content)
        with pytest.raises(ConfigError):
            read_mapping_file(path)

    def test_missing(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="File not found"):
            read_mapping_file(tmp_path / "nope.yml")


class TestConfigLoader:
    """Tests for config file discovery and validation."""

    def test_finds_file_in_parent(self, tmp_path: Path) -> None:
        (tmp_path / ".stylescan.yml").write_text("scan:\n  example_cap: 3\n")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        assert ConfigLoader().find_config_file(nested) == tmp_path / ".stylescan.yml"

    def test_prefers_yml_over_json(self, tmp_path: Path) -> None:
        (tmp_path / "stylescan.config.json").write_text("{}")
        (tmp_path / ".stylescan.yml").write_text("")
        assert ConfigLoader().find_config_file(tmp_path).name == ".stylescan.yml"

    def test_extra_search_paths(self, tmp_path: Path) -> None:
        extra = tmp_path / "extra"
        extra.mkdir()
        (extra / ".stylescan.toml").write_text("")
        start = tmp_path / "start"
        start.mkdir()
        loader = ConfigLoader(search_paths=[extra])
        assert loader.find_config_file(start) == extra / ".stylescan.toml"

    def test_load_invalid_values(self, tmp_path: Path) -> None:
        path = tmp_path / ".stylescan.yml"
        path.write_text("scan:\n  snippet_length: -1\n")
        with pytest.raises(ConfigError, match="Invalid configuration"):
            ConfigLoader().load(path)


class TestEnvironment:
    """Tests for STYLESCAN_* variables."""

    def test_no_variables(self) -> None:
        assert get_env_overrides() == {}

    def test_variables(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("STYLESCAN_EXAMPLE_CAP", "7")
        monkeypatch.setenv("STYLESCAN_EXTENSIONS", ".java,.kt")
        monkeypatch.setenv("STYLESCAN_FOLLOW_SYMLINKS", "no")
        monkeypatch.setenv("STYLESCAN_DISABLED_DETECTORS", "pmd, junit4")
        monkeypatch.setenv("STYLESCAN_OUTPUT_FORMAT", "JSON")
        monkeypatch.setenv("STYLESCAN_QUIET", "1")
        overrides = get_env_overrides()
        assert overrides["scan"] == {
            "example_cap": 7,
            "extensions": [".java", ".kt"],
            "follow_symlinks": False,
        }
        assert overrides["catalog"] == {"disabled_detectors": ["pmd", "junit4"]}
        assert overrides["output"] == {"format": "json", "quiet": True}

    def test_non_numeric_cap_is_ignored(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("STYLESCAN_EXAMPLE_CAP", "lots")
        assert get_env_overrides() == {}


class TestPriority:
    """Tests for load_config source priority."""

    @pytest.fixture
    def config_file(self, tmp_path: Path) -> Path:
        path = tmp_path / ".stylescan.yml"
        path.write_text("scan:\n  example_cap: 3\n  snippet_length: 80\noutput:\n  format: json\n")
        return path

    def test_file_over_defaults(self, config_file: Path) -> None:
        config = load_config(config_path=config_file)
        assert config.scan.example_cap == 3
        assert config.scan.snippet_length == 80
        assert config.scan.follow_symlinks is True

    def test_env_over_file(self, config_file: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("STYLESCAN_EXAMPLE_CAP", "9")
        config = load_config(config_path=config_file)
        assert config.scan.example_cap == 9
        assert config.scan.snippet_length == 80

    def test_cli_over_env(self, config_file: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("STYLESCAN_EXAMPLE_CAP", "9")
        config = load_config(
            config_path=config_file, cli_args={"example_cap": 12, "format": None}
        )
        assert config.scan.example_cap == 12
        assert config.output.format == OutputFormat.JSON

    def test_catalog_cli_argument(self, tmp_path: Path) -> None:
        config = load_config(use_file=False, cli_args={"catalog": tmp_path / "c.yml"})
        assert config.catalog.custom_catalog_path == tmp_path / "c.yml"

    def test_config_path_from_env(
        self, config_file: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("STYLESCAN_CONFIG_PATH", str(config_file))
        assert load_config().scan.example_cap == 3

    def test_discovered_file(
        self, config_file: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.chdir(config_file.parent)
        assert load_config().output.format == OutputFormat.JSON

    def test_file_can_be_skipped(self, config_file: Path) -> None:
        config = load_config(config_path=config_file, use_file=False)
        assert config.scan.example_cap == 50

    def test_setting_sources_are_logged(
        self,
        config_file: Path,
        monkeypatch: pytest.MonkeyPatch,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        monkeypatch.setattr(logging.getLogger("stylescan"), "propagate", True)
        monkeypatch.setenv("STYLESCAN_SNIPPET_LENGTH", "100")
        caplog.set_level(logging.DEBUG, logger="stylescan.config")
        load_config(config_path=config_file, cli_args={"example_cap": 12})
        assert "Setting scan.example_cap taken from cli" in caplog.text
        assert "Setting scan.snippet_length taken from environment" in caplog.text
        assert "Setting output.format taken from config_file" in caplog.text
        assert "scan.follow_symlinks" not in caplog.text


class TestMergeConfigs:
    """Tests for the recursive merge and its source tracking."""

    def test_nested_sources(self) -> None:
        merged, sources = _merge_configs(
            {"scan": {"example_cap": 50, "snippet_length": 240}},
            {"scan": {"example_cap": 3, "snippet_length": None}},
            ConfigPriority.CONFIG_FILE,
        )
        assert merged == {"scan": {"example_cap": 3, "snippet_length": 240}}
        assert sources == {"scan.example_cap": ConfigPriority.CONFIG_FILE}

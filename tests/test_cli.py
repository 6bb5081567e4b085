"""Tests for the stylescan CLI.

This module tests the command-line interface using Typer's CliRunner:
version output, the scan command with its output options and failure
modes, and the detectors listing.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from stylescan import __version__
from stylescan.cli.main import app

runner = CliRunner()


class TestVersion:
    """Test --version flag outputs version correctly."""

    def test_version_flag(self) -> None:
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output
        assert "stylescan" in result.output

    def test_version_on_scan_command(self) -> None:
        result = runner.invoke(app, ["scan", "--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


class TestScanCommand:
    """Tests for successful scans."""

    def test_writes_markdown_report(self, foo_root: Path, tmp_path: Path) -> None:
        out = tmp_path / "reports" / "style.md"
        result = runner.invoke(app, ["scan", "--root", str(foo_root), "--out", str(out)])
        assert result.exit_code == 0, result.output
        text = out.read_text(encoding="utf-8")
        assert "## Summary" in text
        assert "**di_field** — 1 hits" in text
        assert str(out) in result.output

    def test_json_format(self, foo_root: Path, tmp_path: Path) -> None:
        out = tmp_path / "style.json"
        result = runner.invoke(
            app, ["scan", "-r", str(foo_root), "-o", str(out), "--format", "json"]
        )
        assert result.exit_code == 0, result.output
        data = json.loads(out.read_text(encoding="utf-8"))
        assert data["hits"]["di_constructor"]["count"] == 1

    def test_zero_hits_is_success(self, empty_root: Path, tmp_path: Path) -> None:
        out = tmp_path / "style.md"
        result = runner.invoke(app, ["scan", "--root", str(empty_root), "--out", str(out)])
        assert result.exit_code == 0
        assert "Detected areas: None" in out.read_text(encoding="utf-8")

    def test_example_cap(self, tmp_path: Path) -> None:
        root = tmp_path / "root"
        root.mkdir()
        (root / "A.java").write_text("System.out.println(1);\n" * 3)
        out = tmp_path / "style.json"
        result = runner.invoke(
            app,
            ["scan", "--root", str(root), "--out", str(out), "-f", "json", "--example-cap", "1"],
        )
        assert result.exit_code == 0, result.output
        system_out = next(
            ap for ap in json.loads(out.read_text())["anti_patterns"] if "System" in ap["pattern"]
        )
        assert system_out["count"] == 3
        assert len(system_out["examples"]) == 1

    def test_default_output_path(
        self, foo_root: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        work = tmp_path / "work"
        work.mkdir()
        monkeypatch.chdir(work)
        result = runner.invoke(app, ["scan", "--root", str(foo_root)])
        assert result.exit_code == 0, result.output
        reports = list((work / "tmp").glob("scan-*.md"))
        assert len(reports) == 1

    def test_quiet_prints_nothing(self, foo_root: Path, tmp_path: Path) -> None:
        out = tmp_path / "style.md"
        result = runner.invoke(app, ["scan", "-r", str(foo_root), "-o", str(out), "-q"])
        assert result.exit_code == 0
        assert result.output == ""
        assert out.exists()

    def test_config_file(self, foo_root: Path, tmp_path: Path) -> None:
        config = tmp_path / "settings.yml"
        config.write_text("output:\n  format: json\n")
        out = tmp_path / "style.out"
        result = runner.invoke(
            app, ["scan", "-r", str(foo_root), "-o", str(out), "--config", str(config)]
        )
        assert result.exit_code == 0, result.output
        assert json.loads(out.read_text())["hits"]["di_field"]["count"] == 1

    def test_custom_catalog(self, foo_root: Path, tmp_path: Path) -> None:
        catalog = tmp_path / "catalog.yml"
        catalog.write_text("detectors:\n  - {group: Custom, key: bar_type, pattern: 'Bar\\b'}\n")
        out = tmp_path / "style.md"
        result = runner.invoke(
            app, ["scan", "-r", str(foo_root), "-o", str(out), "--catalog", str(catalog)]
        )
        assert result.exit_code == 0, result.output
        text = out.read_text(encoding="utf-8")
        assert "### Custom" in text
        assert "**bar_type** — 2 hits" in text


class TestScanFailures:
    """Tests for fatal errors: exit 1 and no report."""

    def test_missing_root(self, tmp_path: Path) -> None:
        missing = tmp_path / "does-not-exist"
        out = tmp_path / "style.md"
        result = runner.invoke(app, ["scan", "--root", str(missing), "--out", str(out)])
        assert result.exit_code == 1
        assert not out.exists()
        assert "Scan Error" in result.output
        assert str(missing) in result.output

    def test_malformed_regex(self, foo_root: Path, tmp_path: Path) -> None:
        catalog = tmp_path / "catalog.yml"
        catalog.write_text("detectors:\n  - {group: G, key: broken, pattern: '(unclosed'}\n")
        out = tmp_path / "style.md"
        result = runner.invoke(
            app, ["scan", "-r", str(foo_root), "-o", str(out), "--catalog", str(catalog)]
        )
        assert result.exit_code == 1
        assert not out.exists()
        assert "Catalog Error" in result.output
        assert "broken" in result.output

    def test_invalid_format(self, foo_root: Path, tmp_path: Path) -> None:
        out = tmp_path / "style.md"
        result = runner.invoke(app, ["scan", "-r", str(foo_root), "-o", str(out), "-f", "xml"])
        assert result.exit_code == 1
        assert not out.exists()
        assert "Configuration Error" in result.output

    def test_invalid_config_file(self, foo_root: Path, tmp_path: Path) -> None:
        config = tmp_path / "settings.yml"
        config.write_text("scan:\n  example_cap: 0\n")
        out = tmp_path / "style.md"
        result = runner.invoke(
            app, ["scan", "-r", str(foo_root), "-o", str(out), "-c", str(config)]
        )
        assert result.exit_code == 1
        assert not out.exists()

    def test_unwritable_output(self, foo_root: Path, tmp_path: Path) -> None:
        blocker = tmp_path / "blocker"
        blocker.write_text("")
        result = runner.invoke(
            app, ["scan", "-r", str(foo_root), "-o", str(blocker / "style.md")]
        )
        assert result.exit_code == 1
        assert "Output Error" in result.output

    def test_example_cap_must_be_positive(self, foo_root: Path) -> None:
        result = runner.invoke(app, ["scan", "-r", str(foo_root), "--example-cap", "0"])
        assert result.exit_code != 0


class TestDetectorsCommand:
    """Tests for the detectors listing."""

    def test_lists_builtin_detectors(self) -> None:
        result = runner.invoke(app, ["detectors"])
        assert result.exit_code == 0
        assert "di_field" in result.output
        assert "anti-pattern rules" in result.output

    def test_bad_catalog(self, tmp_path: Path) -> None:
        catalog = tmp_path / "catalog.yml"
        catalog.write_text("detectors:\n  - {group: G, key: broken, pattern: '['}\n")
        result = runner.invoke(app, ["detectors", "--catalog", str(catalog)])
        assert result.exit_code == 1

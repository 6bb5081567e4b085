"""Tests for the high-level library API."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from stylescan.api import generate_report, render_report, scan_directory
from stylescan.core.exceptions import CatalogError, ScanError
from stylescan.detectors import Catalog, compile_catalog
from stylescan.detectors.patterns import Detector


class TestScanDirectory:
    """Tests for scan_directory."""

    def test_builtin_catalog(self, foo_root: Path, fixed_clock) -> None:
        report = scan_directory(foo_root, clock=fixed_clock)
        assert report.hits["di_field"].count == 1
        assert report.generated_at == fixed_clock()

    def test_options(self, tmp_path: Path) -> None:
        (tmp_path / "a.txt").write_text("System.out.println(1);\n" * 3)
        report = scan_directory(
            tmp_path, extensions=[".txt"], example_cap=2, disabled_detectors=["di_field"]
        )
        assert "di_field" not in report.hits
        system_out = next(ap for ap in report.anti_patterns if "System" in ap.pattern)
        assert system_out.count == 3
        assert len(system_out.examples) == 2

    def test_precompiled_catalog(self, foo_root: Path) -> None:
        catalog = compile_catalog(
            Catalog(detectors=(Detector(group="G", key="bar", pattern="Bar"),))
        )
        report = scan_directory(foo_root, catalog=catalog)
        assert list(report.hits) == ["bar"]
        assert report.hits["bar"].count == 2

    def test_missing_root(self, tmp_path: Path) -> None:
        with pytest.raises(ScanError):
            scan_directory(tmp_path / "missing")


class TestRenderReport:
    """Tests for render_report."""

    def test_markdown_default(self, foo_root: Path) -> None:
        text = render_report(scan_directory(foo_root))
        assert text.startswith("# ")
        assert "## Potential Anti-patterns" in text

    def test_json(self, foo_root: Path) -> None:
        data = json.loads(render_report(scan_directory(foo_root), "json"))
        assert data["hits"]["di_field"]["count"] == 1


class TestGenerateReport:
    """Tests for generate_report."""

    def test_writes_file(self, foo_root: Path, tmp_path: Path) -> None:
        out = tmp_path / "docs" / "style.md"
        report = generate_report(foo_root, out, example_cap=1)
        assert out.exists()
        assert report.hits["di_field"].count == 1
        assert "Detected areas:" in out.read_text(encoding="utf-8")

    def test_bad_catalog_writes_nothing(self, foo_root: Path, tmp_path: Path) -> None:
        catalog = tmp_path / "catalog.yml"
        catalog.write_text("detectors:\n  - {group: G, key: k, pattern: '('}\n")
        out = tmp_path / "style.md"
        with pytest.raises(CatalogError):
            generate_report(foo_root, out, custom_catalog_path=catalog)
        assert not out.exists()

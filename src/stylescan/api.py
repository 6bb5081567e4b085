"""High-level API functions for stylescan.

These functions wrap catalog assembly, scanning, rendering and writing so
stylescan can be used as a library without touching the CLI.

Example usage::

    from stylescan.api import generate_report, render_report, scan_directory

    report = scan_directory("/path/to/service")
    for key, hit in report.hits.items():
        print(key, hit.count)

    print(render_report(report, "json"))

    generate_report("/path/to/service", "docs/style-scan.md")
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from datetime import datetime
from pathlib import Path

from stylescan.core.models import (
    DEFAULT_EXAMPLE_CAP,
    DEFAULT_EXTENSIONS,
    DEFAULT_SNIPPET_LENGTH,
    OutputFormat,
    ScanConfig,
    ScanReport,
)
from stylescan.core.scanner import Scanner
from stylescan.detectors import CompiledCatalog
from stylescan.detectors.catalog import build_catalog
from stylescan.outputs import get_output
from stylescan.outputs.writer import write_report


def scan_directory(
    root: str | Path,
    *,
    example_cap: int = DEFAULT_EXAMPLE_CAP,
    extensions: list[str] | None = None,
    snippet_length: int = DEFAULT_SNIPPET_LENGTH,
    follow_symlinks: bool = True,
    custom_catalog_path: str | Path | None = None,
    disabled_detectors: Iterable[str] | None = None,
    catalog: CompiledCatalog | None = None,
    clock: Callable[[], datetime] | None = None,
) -> ScanReport:
    """Scan a directory (or a single file) and return the report.

    Args:
        root: Directory or file to scan.
        example_cap: Maximum examples kept per detector and per
            anti-pattern rule.
        extensions: Eligible file name suffixes. Defaults to the Java
            service set (``.java``, ``.kt``, build and config files).
        snippet_length: Maximum snippet length in characters.
        follow_symlinks: Whether to follow symbolic links.
        custom_catalog_path: Optional file with additional rules.
        disabled_detectors: Detector keys to leave out.
        catalog: A precompiled catalog. If provided, the catalog options
            above are ignored.
        clock: Timestamp source for the report.

    Raises:
        CatalogError: If the catalog is invalid.
        ScanError: If the root does not exist or cannot be read.
    """
    if catalog is None:
        catalog = build_catalog(custom_catalog_path, disabled_detectors)

    config = ScanConfig(
        root=Path(root),
        extensions=list(extensions) if extensions else list(DEFAULT_EXTENSIONS),
        example_cap=example_cap,
        snippet_length=snippet_length,
        follow_symlinks=follow_symlinks,
    )
    return Scanner(config, catalog, clock=clock).scan()


def render_report(report: ScanReport, fmt: OutputFormat | str = OutputFormat.MARKDOWN) -> str:
    """Render ``report`` as Markdown (default) or JSON text."""
    return get_output(fmt).format(report)


def generate_report(
    root: str | Path,
    out: str | Path,
    *,
    fmt: OutputFormat | str = OutputFormat.MARKDOWN,
    **scan_options,
) -> ScanReport:
    """Scan ``root``, render the report and write it to ``out``.

    Nothing is written when the catalog or the scan fails.

    Args:
        root: Directory or file to scan.
        out: Destination file. Missing parent directories are created.
        fmt: Report format.
        **scan_options: Passed through to :func:`scan_directory`.

    Returns:
        The ScanReport that was written.

    Raises:
        CatalogError: If the catalog is invalid.
        ScanError: If the root does not exist or cannot be read.
        OutputError: If the report cannot be written.
    """
    report = scan_directory(root, **scan_options)
    write_report(render_report(report, fmt), out)
    return report

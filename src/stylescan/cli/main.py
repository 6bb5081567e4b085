"""Command-line interface for stylescan.

This module provides the Typer-based CLI for scanning a Java service
repository and writing the style report, and for listing the detector
catalog.
"""

from datetime import datetime
from pathlib import Path
from typing import Annotated, Any, Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from stylescan import __version__
from stylescan.config import load_config
from stylescan.core.exceptions import (
    CatalogError,
    ConfigError,
    OutputError,
    ScanError,
    StyleScanError,
)
from stylescan.core.logging import setup_logging
from stylescan.core.scanner import Scanner
from stylescan.detectors.catalog import build_catalog
from stylescan.outputs import get_output
from stylescan.outputs.writer import default_output_path, write_report

# Exit codes
EXIT_SUCCESS = 0
EXIT_ERROR = 1

app = typer.Typer(
    name="stylescan",
    help="stylescan - Survey a Java service repository and draft a code style report.",
    add_completion=False,
)
console = Console()
error_console = Console(stderr=True)

_ERROR_LABELS: list[tuple[type[Exception], str]] = [
    (CatalogError, "Catalog Error"),
    (ConfigError, "Configuration Error"),
    (ScanError, "Scan Error"),
    (OutputError, "Output Error"),
    (StyleScanError, "Error"),
]


def _display_error(error: Exception, title: str = "Error") -> None:
    """Print a one-line diagnostic for ``error`` on stderr."""
    label = next(
        (name for error_type, name in _ERROR_LABELS if isinstance(error, error_type)),
        title,
    )
    details = str(error)
    error_console.print(
        f"[bold red]{label}:[/bold red] {escape(details)}",
        soft_wrap=True,
    )


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold cyan]stylescan[/bold cyan] version [green]{__version__}[/green]")
        raise typer.Exit()


@app.command()
def scan(
    root: Annotated[
        Path,
        typer.Option(
            "--root",
            "-r",
            help="Repository root (or single file) to scan",
        ),
    ] = Path("."),
    out: Annotated[
        Optional[Path],
        typer.Option(
            "--out",
            "-o",
            help="Report file [default: ./tmp/scan-<YYYYMMDD_HHMMSS>.md]",
        ),
    ] = None,
    format: Annotated[
        Optional[str],
        typer.Option(
            "--format",
            "-f",
            help="Report format: markdown or json",
        ),
    ] = None,
    example_cap: Annotated[
        Optional[int],
        typer.Option(
            "--example-cap",
            min=1,
            help="Maximum examples kept per detector and anti-pattern rule",
        ),
    ] = None,
    catalog: Annotated[
        Optional[Path],
        typer.Option(
            "--catalog",
            help="YAML/TOML/JSON file with additional detectors",
        ),
    ] = None,
    config: Annotated[
        Optional[Path],
        typer.Option(
            "--config",
            "-c",
            help="Configuration file to use instead of the discovered one",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose output",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Suppress non-error output (only show errors)",
        ),
    ] = False,
    version: Annotated[
        Optional[bool],
        typer.Option(
            "--version",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = None,
) -> None:
    """Scan a repository and write the code style report.

    Exit codes:
        0: Report written (zero hits included)
        1: Invalid catalog or configuration, unreadable root, or write failure
    """
    setup_logging(verbose=verbose, quiet=quiet)

    cli_args: dict[str, Any] = {
        "format": format,
        "example_cap": example_cap,
        "catalog": catalog,
        "verbose": verbose or None,
        "quiet": quiet or None,
    }
    try:
        settings = load_config(config_path=config, cli_args=cli_args)
    except ConfigError as e:
        _display_error(e)
        raise typer.Exit(code=EXIT_ERROR) from None
    except ValidationError as e:
        _display_error(ConfigError(f"Invalid configuration: {e.error_count()} error(s)"))
        raise typer.Exit(code=EXIT_ERROR) from None

    quiet = settings.output.quiet
    verbose = settings.output.verbose
    setup_logging(verbose=verbose, quiet=quiet)
    output_format = settings.output.format

    try:
        compiled = build_catalog(
            settings.catalog.custom_catalog_path,
            settings.catalog.disabled_detectors,
        )
    except CatalogError as e:
        _display_error(e)
        raise typer.Exit(code=EXIT_ERROR) from None

    if verbose and not quiet:
        console.print(f"[dim]Scanning:[/dim] {escape(str(root))}")
        console.print(f"[dim]Detectors:[/dim] {len(compiled.detectors)}")
        console.print(f"[dim]Format:[/dim] {output_format.value}")

    scanner = Scanner(settings.to_scan_config(root), compiled)

    try:
        report = scanner.scan()
        text = get_output(output_format).format(report)
        destination = out or default_output_path(
            settings.output.output_dir, output_format, datetime.now()
        )
        write_report(text, destination)
    except StyleScanError as e:
        _display_error(e)
        raise typer.Exit(code=EXIT_ERROR) from None
    except KeyboardInterrupt:
        error_console.print("\n[yellow]Scan interrupted by user[/yellow]")
        raise typer.Exit(code=EXIT_ERROR) from None

    if not quiet:
        console.print(f"Wrote {escape(str(destination))}", soft_wrap=True)

    raise typer.Exit(code=EXIT_SUCCESS)


@app.command()
def detectors(
    catalog: Annotated[
        Optional[Path],
        typer.Option(
            "--catalog",
            help="YAML/TOML/JSON file with additional detectors",
        ),
    ] = None,
) -> None:
    """List the detectors and anti-pattern rules in the catalog."""
    try:
        compiled = build_catalog(catalog)
    except CatalogError as e:
        _display_error(e)
        raise typer.Exit(code=EXIT_ERROR) from None

    table = Table(title="Detectors", show_lines=False)
    table.add_column("Group", style="cyan")
    table.add_column("Key", style="bold", no_wrap=True)
    table.add_column("Pattern", style="dim")
    for entry in compiled.detectors:
        detector = entry.detector
        table.add_row(escape(detector.group), escape(detector.key), escape(detector.pattern))
    console.print(table)

    rules = Table(title="Anti-patterns")
    rules.add_column("Pattern", style="dim")
    rules.add_column("Note")
    for entry in compiled.anti_patterns:
        rules.add_row(escape(entry.rule.pattern), escape(entry.rule.note))
    console.print(rules)

    console.print(
        f"{len(compiled.detectors)} detectors in {len(compiled.groups)} groups, "
        f"{len(compiled.anti_patterns)} anti-pattern rules"
    )


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: Annotated[
        Optional[bool],
        typer.Option(
            "--version",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = None,
) -> None:
    """stylescan - Survey a Java service repository and draft a code style report.

    Use 'stylescan scan --root <path>' to write a report.
    """
    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())


if __name__ == "__main__":
    app()

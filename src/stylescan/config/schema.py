"""Configuration schema definitions using Pydantic Settings.

This module defines all configuration models for stylescan with proper
validation, defaults, and documentation.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from stylescan.core.models import (
    DEFAULT_EXAMPLE_CAP,
    DEFAULT_EXTENSIONS,
    DEFAULT_SNIPPET_LENGTH,
    OutputFormat,
    ScanConfig,
)


def _parse_list(v: Any) -> list[str]:
    if v is None:
        return []
    if isinstance(v, str):
        return [item.strip() for item in v.split(",") if item.strip()]
    return list(v)


class ScanSettings(BaseModel):
    """Settings for scan operations.

    Controls which files are eligible and how much of each match is kept.
    """

    extensions: list[str] = Field(
        default_factory=lambda: list(DEFAULT_EXTENSIONS),
        description="File name suffixes eligible for scanning",
    )
    example_cap: int = Field(
        default=DEFAULT_EXAMPLE_CAP,
        ge=1,
        description="Maximum examples kept per detector and per anti-pattern rule",
    )
    snippet_length: int = Field(
        default=DEFAULT_SNIPPET_LENGTH,
        ge=1,
        description="Maximum snippet length in characters",
    )
    follow_symlinks: bool = Field(
        default=True,
        description="Whether to follow symbolic links (directory cycles are walked once)",
    )

    @field_validator("extensions", mode="before")
    @classmethod
    def parse_extensions(cls, v: Any) -> list[str]:
        """Parse extensions from a comma-separated string or list, adding missing dots."""
        extensions = _parse_list(v)
        if not extensions:
            raise ValueError("extensions must not be empty")
        return [ext if ext.startswith(".") else f".{ext}" for ext in extensions]


class CatalogSettings(BaseModel):
    """Settings for the detector catalog."""

    custom_catalog_path: Path | None = Field(
        default=None,
        description="Path to a file with additional detectors and anti-pattern rules",
    )
    disabled_detectors: list[str] = Field(
        default_factory=list,
        description="Detector keys to remove from the catalog",
    )

    @field_validator("disabled_detectors", mode="before")
    @classmethod
    def parse_disabled(cls, v: Any) -> list[str]:
        return _parse_list(v)


class OutputSettings(BaseModel):
    """Settings for report output."""

    format: OutputFormat = Field(
        default=OutputFormat.MARKDOWN,
        description="Report format",
    )
    output_dir: Path = Field(
        default=Path("tmp"),
        description="Directory for timestamped reports when no output path is given",
    )
    quiet: bool = Field(default=False, description="Only log errors")
    verbose: bool = Field(default=False, description="Enable debug logging")

    @field_validator("format", mode="before")
    @classmethod
    def validate_format(cls, v: Any) -> OutputFormat:
        """Validate and normalize the report format."""
        if v is None:
            return OutputFormat.MARKDOWN
        if isinstance(v, OutputFormat):
            return v
        v = str(v).lower()
        try:
            return OutputFormat(v)
        except ValueError:
            valid = ", ".join(f.value for f in OutputFormat)
            raise ValueError(f"format must be one of: {valid}")


class StyleScanConfig(BaseSettings):
    """Main configuration for stylescan.

    Combines all settings sections into a single configuration object.
    """

    model_config = SettingsConfigDict(
        env_prefix="STYLESCAN_",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    scan: ScanSettings = Field(
        default_factory=ScanSettings,
        description="Scan operation settings",
    )
    catalog: CatalogSettings = Field(
        default_factory=CatalogSettings,
        description="Catalog settings",
    )
    output: OutputSettings = Field(
        default_factory=OutputSettings,
        description="Output settings",
    )

    def to_scan_config(self, root: Path) -> ScanConfig:
        """Convert to a ScanConfig for use with Scanner.

        Args:
            root: The path to scan.
        """
        return ScanConfig(
            root=root,
            extensions=self.scan.extensions,
            example_cap=self.scan.example_cap,
            snippet_length=self.scan.snippet_length,
            follow_symlinks=self.scan.follow_symlinks,
        )

"""Core data models for stylescan.

This module defines the Pydantic models used throughout stylescan for
representing scan configuration, individual matches, per-detector hits
and the final scan report.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_EXTENSIONS: list[str] = [
    ".java",
    ".kt",
    ".xml",
    ".yml",
    ".yaml",
    ".properties",
    ".gradle",
    ".kts",
    ".toml",
]
DEFAULT_EXAMPLE_CAP = 50
DEFAULT_SNIPPET_LENGTH = 240


class OutputFormat(str, Enum):
    """Supported report formats."""

    MARKDOWN = "markdown"
    JSON = "json"


class Match(BaseModel):
    """A single matching line.

    ``file_path`` is relative to the scan root, in POSIX form.
    """

    model_config = ConfigDict(frozen=True)

    file_path: str = Field(..., description="File containing the match, relative to the scan root")
    line_number: int = Field(..., ge=1, description="1-based line number")
    snippet: str = Field(default="", description="The matching line, truncated")


class _Aggregate(BaseModel):
    """Final count plus the capped examples."""

    model_config = ConfigDict(frozen=True)

    count: int = Field(default=0, ge=0, description="True number of matching lines")
    examples: tuple[Match, ...] = Field(default=(), description="First matches, up to the example cap")


class Hit(_Aggregate):
    """Aggregate result for one detector across a whole scan."""

    key: str = Field(..., description="Detector key")
    group: str = Field(..., description="Presentation group of the detector")


class AntiPatternHit(_Aggregate):
    """Aggregate result for one anti-pattern rule across a whole scan."""

    pattern: str = Field(..., description="Regular expression of the rule")
    note: str = Field(..., description="Remediation note shown next to each match")


class ScanReport(BaseModel):
    """The complete, immutable result of one scan run.

    ``hits`` preserves catalog order, which the renderers rely on for
    grouping and ordering.
    """

    model_config = ConfigDict(frozen=True)

    root: str = Field(..., description="The scanned root, as an absolute path")
    generated_at: datetime = Field(..., description="When the scan finished")
    hits: dict[str, Hit] = Field(default_factory=dict, description="Detector key to Hit")
    anti_patterns: list[AntiPatternHit] = Field(default_factory=list)
    recommendations: list[str] = Field(default_factory=list)
    stats: dict[str, Any] = Field(default_factory=dict, description="File counts and skipped files")

    def counts(self) -> dict[str, int]:
        """Return detector key to hit count."""
        return {key: hit.count for key, hit in self.hits.items()}

    def groups(self) -> list[str]:
        """Return detector groups in order of first appearance."""
        return list(dict.fromkeys(hit.group for hit in self.hits.values()))

    def hits_for_group(self, group: str) -> list[Hit]:
        return [hit for hit in self.hits.values() if hit.group == group]

    def detected_groups(self) -> list[str]:
        """Return groups with at least one hit, in catalog order."""
        return [
            group
            for group in self.groups()
            if any(hit.count > 0 for hit in self.hits_for_group(group))
        ]


class ScanConfig(BaseModel):
    """Configuration for a scan operation."""

    root: Path = Field(..., description="Directory (or single file) to scan")
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
    follow_symlinks: bool = Field(default=True, description="Whether to follow symbolic links")

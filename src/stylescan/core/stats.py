"""Scan statistics module for stylescan.

This module provides the ScanStats class which tracks file counts and the
files that had to be skipped during a scan.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class SkipReason(str, Enum):
    """Reasons why a file or directory may be skipped during scanning."""

    PERMISSION_DENIED = "permission_denied"
    FILE_NOT_FOUND = "file_not_found"
    BROKEN_SYMLINK = "broken_symlink"
    READ_ERROR = "read_error"


@dataclass
class SkippedFile:
    """Information about a skipped file.

    Attributes:
        file_path: Path to the file that was skipped, relative to the scan root.
        reason: Reason the file was skipped.
        detail: Optional additional detail about why the file was skipped.
    """

    file_path: str
    reason: SkipReason
    detail: str | None = None

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "file_path": self.file_path,
            "reason": self.reason.value,
        }
        if self.detail:
            result["detail"] = self.detail
        return result


@dataclass
class ScanStats:
    """Scan statistics tracking.

    Attributes:
        files_discovered: Number of eligible files found by the walk.
        files_scanned: Number of files read and matched successfully.
        lines_scanned: Total number of lines matched against the catalog.
        bytes_processed: Total bytes of file content read.
        skipped_files: Files (or directories) that could not be read.
        scan_start_time: Unix timestamp when the scan started.
        scan_end_time: Unix timestamp when the scan ended (None if ongoing).

    Example:
        >>> stats = ScanStats()
        >>> stats.start()
        >>> stats.add_scanned_file(lines=120, size=4096)
        >>> stats.stop()
    """

    files_discovered: int = 0
    files_scanned: int = 0
    lines_scanned: int = 0
    bytes_processed: int = 0
    skipped_files: list[SkippedFile] = field(default_factory=list)
    scan_start_time: float | None = None
    scan_end_time: float | None = None

    def start(self) -> None:
        self.scan_start_time = time.time()
        self.scan_end_time = None

    def stop(self) -> None:
        self.scan_end_time = time.time()

    def add_scanned_file(self, lines: int, size: int) -> None:
        """Record a successfully scanned file."""
        self.files_scanned += 1
        self.lines_scanned += lines
        self.bytes_processed += size

    def add_skipped_file(self, file_path: str, reason: SkipReason, detail: str | None = None) -> None:
        self.skipped_files.append(SkippedFile(file_path=file_path, reason=reason, detail=detail))

    @property
    def files_skipped(self) -> int:
        return len(self.skipped_files)

    @property
    def duration(self) -> float:
        """Scan duration in seconds (0.0 if the scan has not started)."""
        if self.scan_start_time is None:
            return 0.0
        end = self.scan_end_time if self.scan_end_time is not None else time.time()
        return max(0.0, end - self.scan_start_time)

    def to_dict(self) -> dict[str, Any]:
        """Convert statistics to a dictionary for inclusion in a ScanReport."""
        return {
            "files_discovered": self.files_discovered,
            "files_scanned": self.files_scanned,
            "files_skipped": self.files_skipped,
            "lines_scanned": self.lines_scanned,
            "bytes_processed": self.bytes_processed,
            "skipped_files": [skipped.to_dict() for skipped in self.skipped_files],
            "scan_duration": round(self.duration, 3),
        }

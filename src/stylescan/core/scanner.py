"""Core scanner module for stylescan.

This module provides the Scanner class which walks the scan root, reads
every eligible file line by line, runs the compiled catalog against each
line and aggregates the results into a ScanReport.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING

from stylescan.core.exceptions import FileReadError, ScanError
from stylescan.core.models import (
    DEFAULT_EXAMPLE_CAP,
    AntiPatternHit,
    Hit,
    Match,
    ScanConfig,
    ScanReport,
)
from stylescan.core.recommendations import build_recommendations
from stylescan.core.stats import ScanStats, SkipReason

if TYPE_CHECKING:
    from stylescan.detectors import CompiledCatalog

logger = logging.getLogger(__name__)


@dataclass
class _Tally:
    """Running count and capped examples for one detector or rule."""

    count: int = 0
    examples: list[Match] = field(default_factory=list)

    def record(self, match: Match, cap: int) -> None:
        self.count += 1
        if len(self.examples) < cap:
            self.examples.append(match)


class Scanner:
    """Scans a source tree against a compiled catalog.

    Files are discovered recursively (hidden directories included,
    symbolic links followed unless disabled) and processed in lexicographic
    order of their root-relative path, so two scans of the same tree always
    produce the same counts and the same examples in the same order.
    A directory reached twice through symbolic links is walked only once.
    """

    def __init__(
        self,
        config: ScanConfig,
        catalog: CompiledCatalog,
        clock: Callable[[], datetime] | None = None,
    ):
        """Initialize the scanner.

        Args:
            config: Scan configuration specifying root, extensions and caps.
            catalog: The compiled detectors and anti-pattern rules.
            clock: Timestamp source for the report. Defaults to ``datetime.now``.
        """
        self.config = config
        self.catalog = catalog
        self._clock = clock or datetime.now
        self._suffixes = tuple(config.extensions)
        self._stats = ScanStats()

    def _is_eligible(self, path: Path) -> bool:
        return path.name.endswith(self._suffixes)

    def _relative(self, path: Path) -> str:
        root = self.config.root
        if path == root:
            return path.name
        return path.relative_to(root).as_posix()

    def _check_root(self) -> None:
        root = self.config.root
        if not root.exists():
            raise ScanError("Scan root does not exist", path=str(root))
        if root.is_dir():
            if not os.access(root, os.R_OK | os.X_OK):
                raise ScanError("Scan root is not readable", path=str(root))
        elif not os.access(root, os.R_OK):
            raise ScanError("Scan root is not readable", path=str(root))

    def _walk(self, directory: Path, visited: set[Path]) -> Iterator[Path]:
        """Yield eligible files below ``directory``.

        Entries are visited in name order, so when two paths lead to the same
        directory the first one in that order is the one walked. ``visited``
        holds the resolved paths of directories already walked.
        """
        try:
            entries = sorted(directory.iterdir(), key=lambda entry: entry.name)
        except OSError as e:
            if directory == self.config.root:
                raise ScanError(f"Cannot list scan root: {e}", path=str(directory)) from e
            logger.warning("Skipping unreadable directory %s: %s", directory, e)
            self._stats.add_skipped_file(
                self._relative(directory), SkipReason.PERMISSION_DENIED, str(e)
            )
            return

        for entry in entries:
            if entry.is_symlink() and not self.config.follow_symlinks:
                continue
            if entry.is_dir():
                real = entry.resolve()
                if real in visited:
                    logger.debug("Not descending into %s again (resolves to %s)", entry, real)
                    continue
                visited.add(real)
                yield from self._walk(entry, visited)
            elif self._is_eligible(entry):
                if entry.is_file():
                    yield entry
                elif entry.is_symlink():
                    logger.warning("Skipping broken symbolic link: %s", entry)
                    self._stats.add_skipped_file(self._relative(entry), SkipReason.BROKEN_SYMLINK)

    def _discover_files(self) -> list[Path]:
        """Discover all eligible files, sorted by root-relative path."""
        root = self.config.root

        if root.is_file():
            return [root] if self._is_eligible(root) else []

        files = list(self._walk(root, {root.resolve()}))
        return sorted(files, key=self._relative)

    def _read_file(self, file_path: Path) -> tuple[str, int]:
        """Read a file, decoding as UTF-8 with a latin-1 fallback.

        Returns:
            The decoded text and the number of bytes read.

        Raises:
            FileReadError: If the file cannot be read. ``context["reason"]``
                holds the matching SkipReason.
        """
        try:
            data = file_path.read_bytes()
        except PermissionError as e:
            raise FileReadError(
                "Permission denied",
                file_path=str(file_path),
                context={"reason": SkipReason.PERMISSION_DENIED},
            ) from e
        except FileNotFoundError as e:
            raise FileReadError(
                "File disappeared during scan",
                file_path=str(file_path),
                context={"reason": SkipReason.FILE_NOT_FOUND},
            ) from e
        except OSError as e:
            raise FileReadError(
                f"Error reading file: {e}",
                file_path=str(file_path),
                context={"reason": SkipReason.READ_ERROR},
            ) from e

        try:
            return data.decode("utf-8"), len(data)
        except UnicodeDecodeError:
            # latin-1 can decode any byte sequence
            return data.decode("latin-1"), len(data)

    def _snippet(self, line: str) -> str:
        return line.replace("\t", "  ")[: self.config.snippet_length]

    def _scan_file(
        self,
        file_path: Path,
        hits: dict[str, _Tally],
        anti_patterns: list[_Tally],
    ) -> None:
        relative = self._relative(file_path)
        try:
            content, size = self._read_file(file_path)
        except FileReadError as e:
            logger.warning("Skipping %s: %s", relative, e.message)
            reason = e.context.get("reason", SkipReason.READ_ERROR)
            self._stats.add_skipped_file(relative, reason, e.message)
            return

        lines = content.split("\n")
        if lines and lines[-1] == "":
            lines.pop()

        cap = self.config.example_cap
        for line_number, raw_line in enumerate(lines, start=1):
            line = raw_line.rstrip("\r")
            match: Match | None = None

            for compiled in self.catalog.detectors:
                if compiled.regex.search(line):
                    match = match or Match(
                        file_path=relative, line_number=line_number, snippet=self._snippet(line)
                    )
                    hits[compiled.detector.key].record(match, cap)

            for index, compiled_rule in enumerate(self.catalog.anti_patterns):
                if compiled_rule.regex.search(line):
                    match = match or Match(
                        file_path=relative, line_number=line_number, snippet=self._snippet(line)
                    )
                    anti_patterns[index].record(match, cap)

        self._stats.add_scanned_file(lines=len(lines), size=size)

    def scan(self) -> ScanReport:
        """Execute the scan operation.

        Returns:
            The ScanReport, including recommendations and statistics.

        Raises:
            ScanError: If the root does not exist or cannot be read.
        """
        self._stats = ScanStats()
        self._stats.start()

        self._check_root()

        tallies = {compiled.detector.key: _Tally() for compiled in self.catalog.detectors}
        anti_pattern_tallies = [_Tally() for _ in self.catalog.anti_patterns]

        files = self._discover_files()
        self._stats.files_discovered = len(files)
        logger.info("Found %d eligible files under %s", len(files), self.config.root)

        for file_path in files:
            self._scan_file(file_path, tallies, anti_pattern_tallies)

        self._stats.stop()
        counts = {key: tally.count for key, tally in tallies.items()}

        hits = {
            compiled.detector.key: Hit(
                key=compiled.detector.key,
                group=compiled.detector.group,
                count=tallies[compiled.detector.key].count,
                examples=tuple(tallies[compiled.detector.key].examples),
            )
            for compiled in self.catalog.detectors
        }
        anti_patterns = [
            AntiPatternHit(
                pattern=compiled.rule.pattern,
                note=compiled.rule.note,
                count=tally.count,
                examples=tuple(tally.examples),
            )
            for compiled, tally in zip(self.catalog.anti_patterns, anti_pattern_tallies)
        ]

        return ScanReport(
            root=str(self.config.root.absolute()),
            generated_at=self._clock(),
            hits=hits,
            anti_patterns=anti_patterns,
            recommendations=build_recommendations(counts),
            stats=self._stats.to_dict(),
        )


def scan(
    root: Path | str,
    catalog: CompiledCatalog,
    example_cap: int = DEFAULT_EXAMPLE_CAP,
) -> ScanReport:
    """Scan ``root`` with the default extensions and return the report."""
    config = ScanConfig(root=Path(root), example_cap=example_cap)
    return Scanner(config, catalog).scan()

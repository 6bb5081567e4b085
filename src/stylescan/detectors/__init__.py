"""Detector catalog types for stylescan.

A :class:`Catalog` is the ordered list of detectors plus the anti-pattern
rules. Before scanning it is turned into a :class:`CompiledCatalog`, which
holds one compiled regular expression per rule. Compilation is where an
invalid catalog is rejected, so a bad pattern stops the run before any
file is read.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass

from stylescan.core.exceptions import CatalogError
from stylescan.detectors.patterns import AntiPatternRule, Detector


@dataclass(frozen=True)
class Catalog:
    """Ordered detectors and anti-pattern rules, not yet compiled."""

    detectors: tuple[Detector, ...] = ()
    anti_patterns: tuple[AntiPatternRule, ...] = ()

    def merge(self, other: Catalog) -> Catalog:
        """Return a catalog with ``other``'s rules appended after this one's."""
        return Catalog(
            detectors=self.detectors + other.detectors,
            anti_patterns=self.anti_patterns + other.anti_patterns,
        )

    def without(self, keys: Iterable[str]) -> Catalog:
        """Return a catalog with the detectors named in ``keys`` removed."""
        disabled = set(keys)
        return Catalog(
            detectors=tuple(d for d in self.detectors if d.key not in disabled),
            anti_patterns=self.anti_patterns,
        )

    def __len__(self) -> int:
        return len(self.detectors)


@dataclass(frozen=True)
class CompiledDetector:
    detector: Detector
    regex: re.Pattern[str]


@dataclass(frozen=True)
class CompiledAntiPattern:
    rule: AntiPatternRule
    regex: re.Pattern[str]


@dataclass(frozen=True)
class CompiledCatalog:
    """A validated catalog, ready for the scanner."""

    detectors: tuple[CompiledDetector, ...]
    anti_patterns: tuple[CompiledAntiPattern, ...]

    @property
    def keys(self) -> list[str]:
        return [compiled.detector.key for compiled in self.detectors]

    @property
    def groups(self) -> list[str]:
        """Detector groups in order of first appearance."""
        return list(dict.fromkeys(compiled.detector.group for compiled in self.detectors))


def _compile(pattern: str, key: str | None = None) -> re.Pattern[str]:
    try:
        return re.compile(pattern)
    except re.error as e:
        raise CatalogError(f"Invalid regular expression: {e}", key=key, pattern=pattern) from e


def compile_catalog(catalog: Catalog) -> CompiledCatalog:
    """Validate and compile every rule of ``catalog``.

    Args:
        catalog: The catalog to compile.

    Returns:
        The compiled catalog, preserving rule order.

    Raises:
        CatalogError: If a detector key is empty or duplicated, or if any
            pattern fails to compile.
    """
    seen: set[str] = set()
    detectors: list[CompiledDetector] = []
    for detector in catalog.detectors:
        if not detector.key:
            raise CatalogError("Detector key must not be empty", pattern=detector.pattern)
        if detector.key in seen:
            raise CatalogError("Duplicate detector key", key=detector.key)
        seen.add(detector.key)
        detectors.append(CompiledDetector(detector, _compile(detector.pattern, detector.key)))

    anti_patterns = tuple(
        CompiledAntiPattern(rule, _compile(rule.pattern)) for rule in catalog.anti_patterns
    )

    return CompiledCatalog(detectors=tuple(detectors), anti_patterns=anti_patterns)


__all__ = [
    "AntiPatternRule",
    "Catalog",
    "CompiledAntiPattern",
    "CompiledCatalog",
    "CompiledDetector",
    "Detector",
    "compile_catalog",
]

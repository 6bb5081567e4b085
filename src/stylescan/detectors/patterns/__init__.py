"""Pattern definitions for the style catalog.

This module provides the records that make up the catalog: named
detectors, grouped into topical categories for presentation, and
anti-pattern rules paired with remediation notes. The group modules in
this package each contribute one list of detectors.
"""

from dataclasses import dataclass

# Presentation groups, in report order
GROUP_FRAMEWORKS = "Frameworks & Dependency Injection"
GROUP_TESTING = "Testing"
GROUP_CONCURRENCY = "Async & Concurrency"
GROUP_REST = "REST, Validation & Errors"
GROUP_OBSERVABILITY = "Observability & Logging"
GROUP_BUILD = "Build, Config & Quality Gates"
GROUP_LANGUAGE = "Language Features & Libraries"
GROUP_INTERNAL = "Spotify Internal"
GROUP_SECURITY = "Security & Config"
GROUP_RPC = "RPC & Serialization"
GROUP_PERSISTENCE = "Database & Persistence"


@dataclass(frozen=True)
class Detector:
    """A named regular expression counted against every scanned line.

    Attributes:
        group: Topical group, used only to organise the report.
        key: Unique identifier of the detector within a catalog.
        pattern: Regular expression (Python ``re`` syntax).
        description: Optional human-readable description.
    """

    group: str
    key: str
    pattern: str
    description: str = ""


@dataclass(frozen=True)
class AntiPatternRule:
    """A regular expression reported separately, with a remediation note.

    Attributes:
        pattern: Regular expression (Python ``re`` syntax).
        note: Advice printed next to every match.
    """

    pattern: str
    note: str


__all__ = [
    "AntiPatternRule",
    "Detector",
    "GROUP_BUILD",
    "GROUP_CONCURRENCY",
    "GROUP_FRAMEWORKS",
    "GROUP_INTERNAL",
    "GROUP_LANGUAGE",
    "GROUP_OBSERVABILITY",
    "GROUP_PERSISTENCE",
    "GROUP_REST",
    "GROUP_RPC",
    "GROUP_SECURITY",
    "GROUP_TESTING",
]

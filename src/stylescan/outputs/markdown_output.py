"""Markdown output formatter for stylescan.

This module renders a ScanReport as the style-guide draft: a summary of
the detected areas, the recommendations, per-group findings with capped
examples, anti-pattern occurrences and a fixed list of topics worth
documenting.

The section headings are stable; downstream tooling greps for them
(``grep "^Detected areas:"``).
"""

from __future__ import annotations

from stylescan.core.models import Match, ScanReport
from stylescan.outputs import BaseOutput

DEFAULT_TITLE = "Java Services Code Style — Repository Scan"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

STYLE_TOPICS: list[str] = [
    "Dependency Injection: constructor-first; component boundaries and visibility.",
    "Testing: JUnit 5 baseline; Mockito; integration testing with @SpringBootTest; "
    "Testcontainers; deterministic seeds.",
    "Async: prefer Reactor vs CompletableFuture; avoid .get()/.join() blocking; use "
    "composition (thenCompose/thenCombine); proper error handling; custom executors; "
    "CompletionStage in APIs.",
    "HTTP: WebClient vs RestTemplate; connection pooling; retries with jitter; "
    "idempotency; timeouts.",
    "Errors: exception taxonomy; problem+json; @ControllerAdvice mapping; avoid log-and-throw.",
    "Validation: @Valid on boundaries; nullability annotations; DTO boundaries.",
    "Observability: Micrometer metrics; OpenTelemetry tracing; structured logging with "
    "correlation IDs.",
    "Serialization: Jackson module registry; shared ObjectMapper; records/immutability.",
    "Security: Spring Security structure; method security; secret handling policy.",
    "Build: Maven/Gradle BOMs; dependency scopes; reproducible builds; Enforcer rules.",
    "Quality: Spotless formatting; Checkstyle/PMD; Error Prone; SpotBugs; CI gates.",
    "Packaging: package-by-feature; API vs implementation; module boundaries.",
    "Resource management: try-with-resources; thread pools; DB pool sizing; graceful shutdown.",
]


def _location(match: Match) -> str:
    return f"`{match.file_path}:{match.line_number}`"


class MarkdownOutput(BaseOutput):
    """Output formatter that generates the Markdown style report.

    Only detectors and anti-pattern rules with at least one hit are
    listed; a group without any hits says so instead.

    Example:
        formatter = MarkdownOutput()
        text = formatter.format(report)
    """

    def __init__(self, title: str | None = None) -> None:
        """Initialize the Markdown output formatter.

        Args:
            title: Optional custom title for the report.
        """
        self._title = title

    @property
    def name(self) -> str:
        """Return the formatter name."""
        return "markdown"

    @property
    def title(self) -> str:
        return self._title or DEFAULT_TITLE

    def format(self, report: ScanReport) -> str:
        """Format a scan report as Markdown.

        Returns:
            A complete Markdown document ending with a newline.
        """
        lines: list[str] = []
        lines.extend(self._format_header(report))
        lines.extend(self._format_summary(report))
        lines.extend(self._format_recommendations(report))
        lines.extend(self._format_findings(report))
        lines.extend(self._format_anti_patterns(report))
        lines.extend(self._format_topics())
        return "\n".join(lines) + "\n"

    def _format_header(self, report: ScanReport) -> list[str]:
        return [
            f"# {self.title}",
            f"_Root scanned: {report.root}_",
            f"_Generated: {report.generated_at.strftime(TIMESTAMP_FORMAT)}_",
            "",
        ]

    def _format_summary(self, report: ScanReport) -> list[str]:
        detected = report.detected_groups()
        areas = ", ".join(detected) if detected else "None"
        scanned = report.stats.get("files_scanned", 0)
        skipped = report.stats.get("files_skipped", 0)
        return [
            "## Summary",
            f"Detected areas: {areas}",
            f"Files scanned: {scanned} (skipped: {skipped})",
            "",
        ]

    def _format_recommendations(self, report: ScanReport) -> list[str]:
        lines = ["## Recommendations"]
        lines.extend(f"- {recommendation}" for recommendation in report.recommendations)
        lines.append("")
        return lines

    def _format_findings(self, report: ScanReport) -> list[str]:
        lines = ["## Detailed Findings"]
        for group in report.groups():
            lines.append(f"### {group}")
            hits = [hit for hit in report.hits_for_group(group) if hit.count > 0]
            if not hits:
                lines.append("_No hits._")
                lines.append("")
                continue
            for hit in hits:
                lines.append(f"**{hit.key}** — {hit.count} hits")
                for match in hit.examples:
                    lines.append(f"- {_location(match)} — {match.snippet}")
                lines.append("")
        return lines

    def _format_anti_patterns(self, report: ScanReport) -> list[str]:
        lines = ["## Potential Anti-patterns"]
        found = [ap for ap in report.anti_patterns if ap.count > 0]
        if not found:
            lines.append("_None detected._")
        for anti_pattern in found:
            for match in anti_pattern.examples:
                lines.append(
                    f"- {_location(match)} — {match.snippet}  <-- {anti_pattern.note}"
                )
        lines.append("")
        return lines

    def _format_topics(self) -> list[str]:
        lines = ["## Suggested Style Topics to Document"]
        lines.extend(f"- {topic}" for topic in STYLE_TOPICS)
        return lines

"""Observability and logging detection patterns."""

from stylescan.detectors.patterns import GROUP_OBSERVABILITY, Detector

OBSERVABILITY_DETECTORS: list[Detector] = [
    Detector(
        group=GROUP_OBSERVABILITY,
        key="logging_slf4j",
        pattern=r"LoggerFactory|getLogger|@Slf4j",
    ),
    Detector(
        group=GROUP_OBSERVABILITY,
        key="micrometer",
        pattern=r"io\.micrometer|MeterRegistry|@Timed\b",
    ),
    Detector(
        group=GROUP_OBSERVABILITY,
        key="opentelemetry",
        pattern=r"io\.opentelemetry|OpenTelemetry|\bTracer\b",
    ),
    Detector(
        group=GROUP_OBSERVABILITY,
        key="apollo_metrics",
        pattern=r"apollo-metrics|RequestMetrics",
    ),
    Detector(
        group=GROUP_OBSERVABILITY,
        key="spotify_metrics",
        pattern=r"com\.spotify\.contentcontrol\.metric",
    ),
]

"""Language feature and library detection patterns."""

from stylescan.detectors.patterns import GROUP_LANGUAGE, Detector

LANGUAGE_DETECTORS: list[Detector] = [
    Detector(
        group=GROUP_LANGUAGE,
        key="lombok",
        pattern=r"\blombok\.|@Getter|@Setter|@Builder|@Value\b",
    ),
    Detector(
        group=GROUP_LANGUAGE,
        key="records",
        pattern=r"\brecord\s+\w+\s*\(",
        description="Java record declarations",
    ),
    Detector(
        group=GROUP_LANGUAGE,
        key="try_with_resources",
        pattern=r"\btry\s*\(.*\)\s*\{",
    ),
    Detector(
        group=GROUP_LANGUAGE,
        key="security",
        pattern=r"spring-boot-starter-security|@PreAuthorize|SecurityFilterChain",
    ),
]

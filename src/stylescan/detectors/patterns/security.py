"""Security and configuration detection patterns."""

from stylescan.detectors.patterns import GROUP_SECURITY, Detector

SECURITY_DETECTORS: list[Detector] = [
    Detector(
        group=GROUP_SECURITY,
        key="secrets_management",
        pattern=r"@Secret|SecretsClient|credential",
    ),
    Detector(
        group=GROUP_SECURITY,
        key="input_validation",
        pattern=r"@Valid|@NotNull|@NotBlank|validateInput|isRequestValid",
    ),
    Detector(
        group=GROUP_SECURITY,
        key="auth_patterns",
        pattern=r"@PreAuthorize|SecurityContext|Authentication",
    ),
]

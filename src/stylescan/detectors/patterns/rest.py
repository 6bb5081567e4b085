"""REST, validation and error-handling detection patterns."""

from stylescan.detectors.patterns import GROUP_REST, Detector

REST_DETECTORS: list[Detector] = [
    Detector(
        group=GROUP_REST,
        key="rest_mapping",
        pattern=r"@(Get|Post|Put|Delete|Patch)Mapping|@RequestMapping",
    ),
    Detector(
        group=GROUP_REST,
        key="controller_advice",
        pattern=r"@ControllerAdvice|@ExceptionHandler",
    ),
    Detector(
        group=GROUP_REST,
        key="validation",
        pattern=r"@(Valid|NotNull|Nullable|NotBlank|Size)\b",
    ),
    Detector(
        group=GROUP_REST,
        key="jackson",
        pattern=r"com\.fasterxml\.jackson|@Json|ObjectMapper",
    ),
    Detector(
        group=GROUP_REST,
        key="problem_json",
        pattern=r"application/problem\+json|problem-spring-web",
    ),
]

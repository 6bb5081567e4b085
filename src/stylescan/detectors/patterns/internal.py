"""Internal library detection patterns (Spotify service stack)."""

from stylescan.detectors.patterns import GROUP_INTERNAL, Detector

INTERNAL_DETECTORS: list[Detector] = [
    Detector(
        group=GROUP_INTERNAL,
        key="bender",
        pattern=r"com\.spotify\.bender|pubsub-utils",
    ),
    Detector(
        group=GROUP_INTERNAL,
        key="contentcontrol",
        pattern=r"com\.spotify\.contentcontrol",
    ),
    Detector(
        group=GROUP_INTERNAL,
        key="pubsub_wrapper",
        pattern=r"com\.spotify\.pubsubwrapper",
    ),
    Detector(
        group=GROUP_INTERNAL,
        key="apollo_error_mapping",
        pattern=r"GrpcStatusMapperUtil|statusFromException",
    ),
    Detector(
        group=GROUP_INTERNAL,
        key="spotify_config",
        pattern=r"@Named.*Spotify|SPOTIFY_|spotify\.",
    ),
    Detector(
        group=GROUP_INTERNAL,
        key="hermes_messaging",
        pattern=r"apolloRequestFromHermesMessage|HermesMessageUtil",
    ),
]

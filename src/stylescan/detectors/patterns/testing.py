"""Testing framework detection patterns."""

from stylescan.detectors.patterns import GROUP_TESTING, Detector

TESTING_DETECTORS: list[Detector] = [
    Detector(
        group=GROUP_TESTING,
        key="junit5",
        pattern=r"org\.junit\.jupiter|@TestFactory|@ParameterizedTest",
    ),
    Detector(
        group=GROUP_TESTING,
        key="junit4",
        pattern=r"org\.junit\.|@RunWith\b",
    ),
    Detector(
        group=GROUP_TESTING,
        key="testng",
        pattern=r"org\.testng|@Test\b",
    ),
    Detector(
        group=GROUP_TESTING,
        key="mockito",
        pattern=r"org\.mockito|Mockito|@Mock|@ExtendWith\(MockitoExtension",
    ),
    Detector(
        group=GROUP_TESTING,
        key="testcontainers",
        pattern=r"org\.testcontainers|@Testcontainers",
    ),
    Detector(
        group=GROUP_TESTING,
        key="springboottest",
        pattern=r"@SpringBootTest\b",
    ),
    Detector(
        group=GROUP_TESTING,
        key="archunit",
        pattern=r"com\.tngtech\.archunit",
    ),
]

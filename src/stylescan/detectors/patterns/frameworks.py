"""Framework and dependency injection detection patterns.

Covers Spring Boot, Micronaut, Dropwizard, Apollo and Dagger, and the
different flavours of dependency injection (field, constructor, annotated).
"""

from stylescan.detectors.patterns import GROUP_FRAMEWORKS, Detector

FRAMEWORK_DETECTORS: list[Detector] = [
    Detector(
        group=GROUP_FRAMEWORKS,
        key="spring_boot",
        pattern=r"@SpringBootApplication|spring-boot[-.]",
        description="Spring Boot application or starter dependency",
    ),
    Detector(
        group=GROUP_FRAMEWORKS,
        key="micronaut",
        pattern=r"@MicronautTest|io\.micronaut",
    ),
    Detector(
        group=GROUP_FRAMEWORKS,
        key="dropwizard",
        pattern=r"io\.dropwizard|DropwizardAppRule",
    ),
    Detector(
        group=GROUP_FRAMEWORKS,
        key="component",
        pattern=r"@(Component|Service|Repository|Controller|RestController)\b",
        description="Spring stereotype annotations",
    ),
    Detector(
        group=GROUP_FRAMEWORKS,
        key="di_autowired",
        pattern=r"@(Autowired|Inject)\b",
    ),
    Detector(
        group=GROUP_FRAMEWORKS,
        key="di_constructor",
        pattern=r"public\s+\w+\s*\([^{;]*@(Autowired|Inject)?[^{;]*\)\s*\{",
        description="Public constructor declarations",
    ),
    Detector(
        group=GROUP_FRAMEWORKS,
        key="di_field",
        pattern=r"@(Autowired|Inject)\s+private",
        description="Field injection",
    ),
    Detector(
        group=GROUP_FRAMEWORKS,
        key="configuration_props",
        pattern=r"@ConfigurationProperties|application\.ya?ml|application\.properties",
    ),
    # Apollo
    Detector(
        group=GROUP_FRAMEWORKS,
        key="apollo",
        pattern=r"com\.spotify\.apollo|@Route\b|AppInit|Application\.start",
    ),
    Detector(
        group=GROUP_FRAMEWORKS,
        key="apollo_config",
        pattern=r"com\.spotify\.apollo\.Environment|apollo\.config",
    ),
    # Dagger
    Detector(
        group=GROUP_FRAMEWORKS,
        key="dagger",
        pattern=r"@(Module|Component|Provides|Binds)\b|com\.google\.dagger",
    ),
    Detector(
        group=GROUP_FRAMEWORKS,
        key="di_inject",
        pattern=r"@Inject\b",
    ),
]

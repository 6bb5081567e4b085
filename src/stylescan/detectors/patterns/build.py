"""Build tooling and quality gate detection patterns.

These mostly fire on build descriptors (pom.xml, build.gradle, *.kts)
rather than on Java sources.
"""

from stylescan.detectors.patterns import GROUP_BUILD, Detector

BUILD_DETECTORS: list[Detector] = [
    Detector(
        group=GROUP_BUILD,
        key="maven",
        pattern=r"<project\b|<dependencyManagement>|<dependencies>",
    ),
    Detector(
        group=GROUP_BUILD,
        key="gradle",
        pattern=r"plugins\s*\{|dependencies\s*\{|\bgradle\b",
    ),
    Detector(
        group=GROUP_BUILD,
        key="boms",
        pattern=r"<dependencyManagement>|platform\(",
    ),
    Detector(group=GROUP_BUILD, key="spotless", pattern=r"\bspotless\b"),
    Detector(group=GROUP_BUILD, key="checkstyle", pattern=r"\bcheckstyle\b"),
    Detector(group=GROUP_BUILD, key="pmd", pattern=r"\bpmd\b"),
    Detector(group=GROUP_BUILD, key="spotbugs", pattern=r"spotbugs|findbugs"),
    Detector(group=GROUP_BUILD, key="errorprone", pattern=r"errorprone"),
]

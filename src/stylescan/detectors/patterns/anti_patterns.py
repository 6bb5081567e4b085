"""Anti-pattern rules.

Each rule pairs a regular expression with the remediation note printed
next to every match in the report.
"""

from stylescan.detectors.patterns import AntiPatternRule

ANTI_PATTERN_RULES: list[AntiPatternRule] = [
    AntiPatternRule(
        pattern=r"@Autowired\s+public\s+\w+\(",
        note="@Autowired on constructors is redundant in Spring >=4.3.",
    ),
    AntiPatternRule(
        pattern=r"@Autowired\s+private\s+",
        note="Field injection detected; prefer constructor injection.",
    ),
    AntiPatternRule(
        pattern=r"\bRestTemplate\b",
        note="RestTemplate is legacy for reactive stacks; prefer WebClient.",
    ),
    AntiPatternRule(
        pattern=r"new\s+ObjectMapper\s*\(",
        note="Avoid raw ObjectMapper; use a shared, configured instance.",
    ),
    AntiPatternRule(
        pattern=r"Thread\s*\.sleep\s*\(",
        note="Avoid Thread.sleep in prod/tests; use Awaitility or proper synchronization.",
    ),
    AntiPatternRule(
        pattern=r"System\.out\.print",
        note="Avoid System.out; use SLF4J logging.",
    ),
    # SQL
    AntiPatternRule(
        pattern=r"SELECT\s+\*\s+FROM",
        note="Avoid SELECT *; specify columns explicitly for better performance.",
    ),
    AntiPatternRule(
        pattern=r"\+.*\+.*WHERE",
        note="Potential SQL injection risk; use parameterized queries.",
    ),
    AntiPatternRule(
        pattern=r"new\s+.*Connection\s*\(",
        note="Avoid manual connection management; use connection pools.",
    ),
    AntiPatternRule(
        pattern=r"executeQuery\s*\(.*\+.*\)",
        note="SQL concatenation detected; use parameterized queries.",
    ),
    AntiPatternRule(
        pattern=r"Statement\s+.*=.*createStatement",
        note="Use PreparedStatement instead of Statement for better security.",
    ),
    AntiPatternRule(
        pattern=r"@SuppressWarnings\s*\(",
        note="@SuppressWarnings without justification comment; add explanation.",
    ),
    AntiPatternRule(
        pattern=r"catch\s*\(\s*Exception\s+\w+\)",
        note="Overly broad exception handling; catch specific exception types.",
    ),
]

"""Rule-based recommendations derived from detector hit counts.

Each rule is a pure function of the count table that returns one advisory
line or None. Rules run in registration order. A key missing from the
table counts as zero, so disabling a detector only ever removes or flips
advice, it never fails.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Callable, Mapping
from typing import Optional

RecommendationRule = Callable[[Counter], Optional[str]]

RULES: list[RecommendationRule] = []


def rule(func: RecommendationRule) -> RecommendationRule:
    """Register ``func`` as a recommendation rule."""
    RULES.append(func)
    return func


@rule
def dependency_injection(counts: Counter) -> str | None:
    field_injection = counts["di_field"]
    if field_injection > 0 and counts["di_constructor"] >= field_injection:
        return (
            "**Frameworks & Dependency Injection:** Constructor injection appears common; "
            "some field injection remains."
        )
    if field_injection > 0:
        return (
            "**Frameworks & Dependency Injection:** Field injection detected in multiple places; "
            "prefer constructor injection."
        )
    return None


@rule
def apollo_usage(counts: Counter) -> str | None:
    if counts["apollo"] > 0:
        return (
            "**Apollo Framework:** Detected Apollo usage; ensure proper request/response "
            "handling and middleware."
        )
    return None


@rule
def dagger_usage(counts: Counter) -> str | None:
    if counts["dagger"] > 0:
        return "**Dagger:** Consider component scoping and avoid circular dependencies."
    return None


@rule
def mixed_junit(counts: Counter) -> str | None:
    if counts["junit5"] > 0 and counts["junit4"] > 0:
        return "**Testing:** Both JUnit 4 and 5 detected; align on JUnit 5."
    return None


@rule
def testcontainers(counts: Counter) -> str | None:
    if counts["testcontainers"] > 0:
        return (
            "**Testing:** Testcontainers in use; ensure CI supports Docker and "
            "parallelism constraints."
        )
    return None


@rule
def mixed_async_styles(counts: Counter) -> str | None:
    if counts["reactor"] > 0 and counts["async"] > 0:
        return (
            "**Async & Concurrency:** Mixed reactive and CompletableFuture APIs; "
            "document when to choose each."
        )
    return None


@rule
def missing_timeouts(counts: Counter) -> str | None:
    if counts["timeouts"] == 0 and (counts["http_client"] > 0 or counts["reactor"] > 0):
        return (
            "**Async & Concurrency:** HTTP/reactive usage without obvious timeouts; "
            "add timeout guidance."
        )
    return None


@rule
def blocking_futures(counts: Counter) -> str | None:
    blocking = counts["cf_blocking"]
    if blocking > 0:
        return (
            f"**CompletableFuture Anti-pattern:** Found {blocking} blocking calls "
            "(.get()/.join()); consider non-blocking composition instead."
        )
    return None


@rule
def missing_composition(counts: Counter) -> str | None:
    if counts["async"] > 0 and counts["cf_composition"] == 0:
        return (
            "**CompletableFuture:** Using CompletableFuture but no composition methods "
            "detected; verify proper async patterns."
        )
    return None


@rule
def missing_future_error_handling(counts: Counter) -> str | None:
    if counts["async"] > 0 and counts["cf_error_handling"] == 0:
        return (
            "**CompletableFuture:** Using CompletableFuture but no error handling "
            "(.exceptionally/.handle) detected."
        )
    return None


@rule
def missing_executors(counts: Counter) -> str | None:
    if counts["cf_executors"] == 0 and counts["async"] > 0:
        return (
            "**CompletableFuture:** No custom executors detected; ensure thread pool "
            "isolation for blocking operations."
        )
    return None


@rule
def completion_stage_api(counts: Counter) -> str | None:
    if counts["async"] > 0 and counts["cf_completion_stage"] == 0:
        return (
            "**CompletableFuture API Design:** Consider using CompletionStage in method "
            "parameters for safer API design."
        )
    return None


@rule
def missing_metrics(counts: Counter) -> str | None:
    if counts["micrometer"] == 0 and counts["apollo_metrics"] == 0:
        return (
            "**Observability & Logging:** No metrics framework detected; consider Apollo "
            "metrics or Micrometer."
        )
    return None


@rule
def missing_quality_gates(counts: Counter) -> str | None:
    if counts["spotless"] == 0 and counts["checkstyle"] == 0 and counts["pmd"] == 0:
        return (
            "**Build, Config & Quality Gates:** Formatting/static analysis not clearly "
            "configured; consider Spotless + Checkstyle/PMD."
        )
    return None


@rule
def lombok_and_records(counts: Counter) -> str | None:
    if counts["lombok"] > 0 and counts["records"] > 0:
        return (
            "**Language Features & Libraries:** Both Lombok and records present; "
            "clarify when to use each."
        )
    return None


def build_recommendations(counts: Mapping[str, int]) -> list[str]:
    """Evaluate every registered rule against ``counts``.

    Args:
        counts: Detector key to hit count. Missing keys count as zero.

    Returns:
        Advisory lines in rule order.
    """
    table = Counter(counts)
    recommendations: list[str] = []
    for recommendation_rule in RULES:
        line = recommendation_rule(table)
        if line:
            recommendations.append(line)
    return recommendations

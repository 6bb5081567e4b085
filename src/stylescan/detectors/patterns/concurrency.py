"""Async and concurrency detection patterns.

Most of these track CompletableFuture usage: blocking calls, composition,
error handling, executors and CompletionStage in signatures. The rest
cover reactive libraries, timeouts, resilience and HTTP clients.
"""

from stylescan.detectors.patterns import GROUP_CONCURRENCY, Detector

CONCURRENCY_DETECTORS: list[Detector] = [
    Detector(
        group=GROUP_CONCURRENCY,
        key="async",
        pattern=r"CompletableFuture<|ExecutorService|@Async\b",
    ),
    Detector(
        group=GROUP_CONCURRENCY,
        key="cf_blocking",
        pattern=r"\.get\(\)|\.join\(\)",
        description="Blocking .get()/.join() calls",
    ),
    Detector(
        group=GROUP_CONCURRENCY,
        key="cf_composition",
        pattern=r"\.thenCompose\(|\.thenCombine\(|\.thenApply\(|\.thenAccept\(",
    ),
    Detector(
        group=GROUP_CONCURRENCY,
        key="cf_error_handling",
        pattern=r"\.exceptionally\(|\.handle\(",
    ),
    Detector(
        group=GROUP_CONCURRENCY,
        key="cf_executors",
        pattern=r"\.thenApplyAsync\(|\.thenComposeAsync\(|Executors\.",
    ),
    Detector(
        group=GROUP_CONCURRENCY,
        key="cf_completion_stage",
        pattern=r"CompletionStage<",
    ),
    Detector(
        group=GROUP_CONCURRENCY,
        key="reactor",
        pattern=r"reactor\.core\.publisher\.(Mono|Flux)|\bMono<|\bFlux<",
    ),
    Detector(
        group=GROUP_CONCURRENCY,
        key="rxjava",
        pattern=r"io\.reactivex|Observable<|Single<|Flowable<",
    ),
    Detector(
        group=GROUP_CONCURRENCY,
        key="timeouts",
        pattern=r"\.timeout\(|@Timeout|readTimeout|connectTimeout|orTimeout\(|completeOnTimeout\(",
    ),
    Detector(
        group=GROUP_CONCURRENCY,
        key="resilience",
        pattern=r"resilience4j|\bCircuitBreaker\b|\bRetry\b|\bBulkhead\b",
    ),
    Detector(
        group=GROUP_CONCURRENCY,
        key="http_client",
        pattern=r"\bWebClient\b|\bRestTemplate\b|\bHttpClient\b|\bOkHttpClient\b",
    ),
    Detector(
        group=GROUP_CONCURRENCY,
        key="db_pool",
        pattern=r"HikariDataSource|HikariCP",
    ),
]

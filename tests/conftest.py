"""Pytest fixtures for stylescan tests.

This module provides reusable fixtures: small Java service trees on disk,
a fixed clock for reproducible reports, the compiled built-in catalog and
an isolated configuration environment.
"""

from __future__ import annotations

import os
import sys
from collections.abc import Callable
from datetime import datetime
from pathlib import Path

import pytest

src_path = str(Path(__file__).parent.parent / "src")
if src_path not in sys.path:
    sys.path.insert(0, src_path)

from stylescan.detectors import CompiledCatalog
from stylescan.detectors.catalog import build_catalog

FIXED_TIME = datetime(2024, 1, 2, 3, 4, 5)

FOO_JAVA = """\
@Autowired private Bar bar;
public Foo(Bar bar) {
System.out.println("hi");
"""

ORDER_SERVICE = """\
package com.example.orders;

import org.springframework.stereotype.Service;
import java.util.concurrent.CompletableFuture;

@Service
public class OrderService {
\tprivate static final Logger log = LoggerFactory.getLogger(OrderService.class);

\tpublic OrderService(OrderRepository repository) {
\t\tthis.repository = repository;
\t}

\tpublic CompletableFuture<Order> load(String id) {
\t\treturn repository.find(id).thenApply(this::enrich);
\t}

\tpublic Order loadNow(String id) throws Exception {
\t\treturn load(id).get();
\t}
}
"""

ORDER_SERVICE_TEST = """\
package com.example.orders;

import org.junit.jupiter.api.Test;
import org.mockito.Mock;

class OrderServiceTest {
    @Mock OrderRepository repository;

    @Test
    void loads() {
        System.out.println("loading");
    }
}
"""

BUILD_GRADLE = """\
plugins {
    id 'com.diffplug.spotless' version '6.25.0'
}

dependencies {
    implementation 'io.micrometer:micrometer-core'
}
"""


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep tests independent of the user's config files and environment."""
    for name in list(os.environ):
        if name.startswith("STYLESCAN_"):
            monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr("stylescan.config.loader.USER_CONFIG_DIRS", [])


@pytest.fixture
def fixed_clock() -> Callable[[], datetime]:
    """Return a clock that always reports 2024-01-02 03:04:05."""
    return lambda: FIXED_TIME


@pytest.fixture
def catalog() -> CompiledCatalog:
    """Return the compiled built-in catalog."""
    return build_catalog()


@pytest.fixture
def foo_root(tmp_path: Path) -> Path:
    """Create a root holding a single three-line Foo.java."""
    root = tmp_path / "foo"
    root.mkdir()
    (root / "Foo.java").write_text(FOO_JAVA)
    return root


@pytest.fixture
def service_tree(tmp_path: Path) -> Path:
    """Create a small service repository.

    Layout::

        service/
            build.gradle
            README.md                 (not eligible)
            src/main/java/com/example/orders/OrderService.java
            src/test/java/com/example/orders/OrderServiceTest.java
    """
    root = tmp_path / "service"
    main = root / "src" / "main" / "java" / "com" / "example" / "orders"
    test = root / "src" / "test" / "java" / "com" / "example" / "orders"
    main.mkdir(parents=True)
    test.mkdir(parents=True)

    (root / "build.gradle").write_text(BUILD_GRADLE)
    (root / "README.md").write_text("System.out.println is fine in docs\n")
    (main / "OrderService.java").write_text(ORDER_SERVICE)
    (test / "OrderServiceTest.java").write_text(ORDER_SERVICE_TEST)
    return root


@pytest.fixture
def empty_root(tmp_path: Path) -> Path:
    """Create a directory without eligible files."""
    root = tmp_path / "empty"
    root.mkdir()
    (root / "notes.txt").write_text("@Autowired private Bar bar;\n")
    return root

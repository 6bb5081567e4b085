"""Built-in catalog assembly and custom catalog loading.

The built-in catalog is embedded in the group modules of
:mod:`stylescan.detectors.patterns`. Additional detectors and anti-pattern
rules can be supplied in a YAML, TOML or JSON file::

    detectors:
      - group: Testing
        key: kotest
        pattern: 'io\\.kotest'
    anti_patterns:
      - pattern: 'printStackTrace\\('
        note: Log the exception instead.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from stylescan.config.loader import read_mapping_file
from stylescan.core.exceptions import CatalogError, ConfigError
from stylescan.detectors import Catalog, CompiledCatalog, compile_catalog
from stylescan.detectors.patterns import AntiPatternRule, Detector
from stylescan.detectors.patterns.anti_patterns import ANTI_PATTERN_RULES
from stylescan.detectors.patterns.build import BUILD_DETECTORS
from stylescan.detectors.patterns.concurrency import CONCURRENCY_DETECTORS
from stylescan.detectors.patterns.frameworks import FRAMEWORK_DETECTORS
from stylescan.detectors.patterns.internal import INTERNAL_DETECTORS
from stylescan.detectors.patterns.language import LANGUAGE_DETECTORS
from stylescan.detectors.patterns.observability import OBSERVABILITY_DETECTORS
from stylescan.detectors.patterns.persistence import PERSISTENCE_DETECTORS
from stylescan.detectors.patterns.rest import REST_DETECTORS
from stylescan.detectors.patterns.rpc import RPC_DETECTORS
from stylescan.detectors.patterns.security import SECURITY_DETECTORS
from stylescan.detectors.patterns.testing import TESTING_DETECTORS

logger = logging.getLogger(__name__)

BUILTIN_DETECTORS: list[Detector] = [
    *FRAMEWORK_DETECTORS,
    *TESTING_DETECTORS,
    *CONCURRENCY_DETECTORS,
    *REST_DETECTORS,
    *OBSERVABILITY_DETECTORS,
    *BUILD_DETECTORS,
    *LANGUAGE_DETECTORS,
    *INTERNAL_DETECTORS,
    *SECURITY_DETECTORS,
    *RPC_DETECTORS,
    *PERSISTENCE_DETECTORS,
]


class _DetectorEntry(BaseModel):
    group: str = Field(..., min_length=1)
    key: str = Field(..., min_length=1)
    pattern: str = Field(..., min_length=1)
    description: str = ""


class _AntiPatternEntry(BaseModel):
    pattern: str = Field(..., min_length=1)
    note: str


class _CatalogFile(BaseModel):
    detectors: list[_DetectorEntry] = Field(default_factory=list)
    anti_patterns: list[_AntiPatternEntry] = Field(default_factory=list)


def load_catalog() -> Catalog:
    """Return the built-in catalog."""
    return Catalog(
        detectors=tuple(BUILTIN_DETECTORS),
        anti_patterns=tuple(ANTI_PATTERN_RULES),
    )


def load_custom_catalog(path: Path | str) -> Catalog:
    """Load extra detectors and anti-pattern rules from a file.

    Args:
        path: YAML, TOML or JSON file with ``detectors`` and/or
            ``anti_patterns`` lists.

    Returns:
        A catalog holding only the rules from the file. Patterns are not
        compiled here; that happens in :func:`compile_catalog`.

    Raises:
        CatalogError: If the file cannot be read, parsed or validated.
    """
    path = Path(path)
    try:
        data = read_mapping_file(path)
    except ConfigError as e:
        raise CatalogError(f"Cannot load custom catalog: {e.message}", context={"path": str(path)}) from e

    try:
        parsed = _CatalogFile.model_validate(data)
    except ValidationError as e:
        raise CatalogError(f"Invalid custom catalog: {e}", context={"path": str(path)}) from e

    return Catalog(
        detectors=tuple(
            Detector(group=d.group, key=d.key, pattern=d.pattern, description=d.description)
            for d in parsed.detectors
        ),
        anti_patterns=tuple(
            AntiPatternRule(pattern=a.pattern, note=a.note) for a in parsed.anti_patterns
        ),
    )


def build_catalog(
    custom_catalog_path: Path | str | None = None,
    disabled_detectors: Iterable[str] | None = None,
) -> CompiledCatalog:
    """Assemble and compile the catalog used for a scan.

    Args:
        custom_catalog_path: Optional file with additional rules, appended
            after the built-ins.
        disabled_detectors: Detector keys to drop from the catalog.

    Returns:
        The compiled catalog.

    Raises:
        CatalogError: If any part of the catalog is invalid.
    """
    catalog = load_catalog()
    if custom_catalog_path is not None:
        custom = load_custom_catalog(custom_catalog_path)
        logger.debug(
            "Loaded %d detector(s) and %d anti-pattern rule(s) from %s",
            len(custom.detectors),
            len(custom.anti_patterns),
            custom_catalog_path,
        )
        catalog = catalog.merge(custom)
    if disabled_detectors:
        catalog = catalog.without(disabled_detectors)

    compiled = compile_catalog(catalog)
    logger.debug(
        "Compiled %d detector(s) and %d anti-pattern rule(s)",
        len(compiled.detectors),
        len(compiled.anti_patterns),
    )
    return compiled

"""Expert Catalog Loading and Lookup.

The catalog is loaded once, validated, and never mutated afterwards.
Every panel operation receives it explicitly.

Integrity rules enforced here, before any record reaches the panel engine:
- every record matches the Expert schema (closed category set,
  performance score within 0-100)
- expert ids are unique
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Iterator
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any

import structlog
from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from packages.core.src.config import get_config
from packages.core.src.errors import (
    CatalogNotFoundError,
    CatalogValidationError,
    ConfigurationError,
    DuplicateExpertIdError,
)
from packages.core.src.types import Category, Expert, ExpertStatus

logger = structlog.get_logger()

BUNDLED_CATALOG_PATH = Path(__file__).parent / "data" / "experts.json"

# Experts below this score are flagged for review
REVIEW_SCORE_THRESHOLD = 80


class CatalogFile(BaseModel):
    """On-disk catalog document."""

    experts: list[Expert] = Field(default_factory=list)


def _ranked(experts: Iterable[Expert]) -> list[Expert]:
    return sorted(experts, key=lambda e: (-e.performance_score, e.id))


class ExpertCatalog:
    """Immutable, validated collection of experts.

    Example:
        catalog = load_catalog(Path("experts.json"))
        catalog.get("inv-002")
        catalog.search("risk")
    """

    def __init__(self, experts: Iterable[Expert]) -> None:
        experts = tuple(experts)
        duplicates = sorted(
            expert_id
            for expert_id, count in Counter(e.id for e in experts).items()
            if count > 1
        )
        if duplicates:
            raise DuplicateExpertIdError(duplicates)

        self._experts = experts
        self._by_id = MappingProxyType({e.id: e for e in experts})

    @classmethod
    def from_records(cls, records: Iterable[dict[str, Any]]) -> ExpertCatalog:
        """Build a catalog from raw dict records.

        Raises:
            CatalogValidationError: If any record fails schema validation
            DuplicateExpertIdError: If two records share an id
        """
        try:
            document = CatalogFile.model_validate({"experts": list(records)})
        except PydanticValidationError as e:
            raise CatalogValidationError(e.errors(include_url=False), cause=e) from e
        return cls(document.experts)

    @property
    def experts(self) -> tuple[Expert, ...]:
        return self._experts

    def __len__(self) -> int:
        return len(self._experts)

    def __iter__(self) -> Iterator[Expert]:
        return iter(self._experts)

    def __contains__(self, expert_id: object) -> bool:
        return expert_id in self._by_id

    def get(self, expert_id: str) -> Expert | None:
        """Get an expert by id.

        Args:
            expert_id: Expert id

        Returns:
            Expert or None
        """
        return self._by_id.get(expert_id)

    def categories(self) -> list[Category]:
        """Categories present in the catalog, in enum order."""
        present = {e.category for e in self._experts}
        return [c for c in Category if c in present]

    def by_category(self, category: Category) -> list[Expert]:
        return [e for e in self._experts if e.category == category]

    def by_specialty(self, specialty: str) -> list[Expert]:
        """Experts whose specialty contains the text (case-insensitive)."""
        needle = specialty.lower()
        return [e for e in self._experts if needle in e.specialty.lower()]

    def active(self) -> list[Expert]:
        return [e for e in self._experts if e.status == ExpertStatus.ACTIVE]

    def search(self, query: str) -> list[Expert]:
        """Free-text search across name, specialty, category, bio, strengths
        and the people an expert is a composite of.

        Matching is a case-insensitive substring test. Results keep
        catalog order.
        """
        needle = query.lower()
        results = []
        for expert in self._experts:
            haystacks = [
                expert.name,
                expert.specialty,
                expert.category.value,
                expert.bio,
                *expert.strengths,
                *expert.composite_of,
            ]
            if any(needle in h.lower() for h in haystacks):
                results.append(expert)
        return results

    def recommend(self, topic: str, limit: int = 5) -> list[Expert]:
        """Best-performing search matches for a topic."""
        if limit <= 0:
            return []
        return _ranked(self.search(topic))[:limit]

    def top_performers(self, limit: int = 10) -> list[Expert]:
        if limit <= 0:
            return []
        return _ranked(self._experts)[:limit]

    def needing_review(self) -> list[Expert]:
        """Experts scoring below the review threshold or already in review."""
        return [
            e
            for e in self._experts
            if e.performance_score < REVIEW_SCORE_THRESHOLD or e.status == ExpertStatus.REVIEW
        ]


def load_catalog(path: Path | str) -> ExpertCatalog:
    """Load and validate a catalog JSON file.

    The file holds a single object with an ``experts`` array.

    Raises:
        CatalogNotFoundError: If the file does not exist
        CatalogValidationError: If the document fails schema validation
        DuplicateExpertIdError: If two records share an id
    """
    path = Path(path)
    if not path.is_file():
        raise CatalogNotFoundError(str(path))

    try:
        document = CatalogFile.model_validate_json(path.read_text(encoding="utf-8"))
    except PydanticValidationError as e:
        logger.warning("catalog_validation_failed", path=str(path), errors=e.error_count())
        raise CatalogValidationError(e.errors(include_url=False), cause=e) from e

    catalog = ExpertCatalog(document.experts)
    logger.info(
        "catalog_loaded",
        path=str(path),
        experts=len(catalog),
        categories=len(catalog.categories()),
    )
    return catalog


@lru_cache
def get_default_catalog() -> ExpertCatalog:
    """Get the process-wide catalog, loaded on first use.

    Uses ``PANEL_CATALOG_PATH`` when set, otherwise the bundled catalog.

    Raises:
        ConfigurationError: If production requirements are not met
    """
    config = get_config()
    production_errors = config.validate_production_requirements()
    if production_errors:
        for error in production_errors:
            logger.error("production_config_error", error=error)
        raise ConfigurationError(
            f"Production configuration errors: {'; '.join(production_errors)}",
            code="PRODUCTION_CONFIG_ERROR",
            details={"errors": production_errors},
        )

    return load_catalog(config.catalog_path or BUNDLED_CATALOG_PATH)


def clear_catalog_cache() -> None:
    """Drop the cached catalog so the next call reloads it."""
    get_default_catalog.cache_clear()

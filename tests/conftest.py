"""Pytest configuration and fixtures for panel engine tests."""

from collections.abc import Callable, Generator
from typing import Any

import pytest

from packages.catalog.src.loader import (
    BUNDLED_CATALOG_PATH,
    ExpertCatalog,
    clear_catalog_cache,
    load_catalog,
)
from packages.core.src.config import clear_config_cache
from packages.core.src.types import Category, Expert

PANEL_ENV_VARS = (
    "PANEL_ENVIRONMENT",
    "PANEL_CATALOG_PATH",
    "PANEL_DEFAULT_PANEL_SIZE",
    "PANEL_DEFAULT_TEAM_SIZE",
    "PANEL_QUICK_PANEL_SIZE",
)


def build_expert(
    expert_id: str,
    category: Category = Category.TECHNOLOGY_AI,
    score: float = 80,
    specialty: str = "",
    bio: str = "",
    **extra: Any,
) -> Expert:
    """Build an expert with only the fields a test cares about."""
    return Expert(
        id=expert_id,
        name=extra.pop("name", expert_id.title()),
        category=category,
        specialty=specialty,
        bio=bio,
        performance_score=score,
        **extra,
    )


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Keep PANEL_* environment and cached config/catalog out of each test."""
    for name in PANEL_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    clear_config_cache()
    clear_catalog_cache()
    yield
    clear_config_cache()
    clear_catalog_cache()


@pytest.fixture
def make_expert() -> Callable[..., Expert]:
    """Factory for synthetic experts."""
    return build_expert


@pytest.fixture
def panel_catalog() -> ExpertCatalog:
    """Fifteen experts spread across all three panel types.

    Relevance for topic "risk" (score after boosts):
        Blue:       mkt-001 115, tech-002 105, inv-002 99, leg-001 98,
                    inv-001 94, strat-001 91, tech-001 90
        Left-Field: reg-001 93, celeb-001 92, lf-001 90, media-001 86, lf-002 84
        Red Team:   gov-004 106, inv-002 99, leg-001 98, gov-001 88, gov-005 84
    """
    return ExpertCatalog(
        [
            # Blue Team by category
            build_expert(
                "inv-001",
                Category.INVESTMENT_FINANCE,
                94,
                "Value Investing",
                "Patient investor focused on intrinsic value.",
            ),
            build_expert(
                "inv-002",
                Category.INVESTMENT_FINANCE,
                89,
                "Global Macro & Economic Cycles",
                "Big-picture thinker with strong risk awareness.",
            ),
            build_expert(
                "tech-001",
                Category.TECHNOLOGY_AI,
                90,
                "AI Strategy",
                "Helps firms adopt machine learning.",
            ),
            build_expert(
                "tech-002",
                Category.TECHNOLOGY_AI,
                85,
                "Cybersecurity Risk",
                "Protects critical systems.",
            ),
            build_expert(
                "mkt-001",
                Category.MARKETING_BRAND,
                95,
                "Brand Risk Management",
                "Protects brands in a crisis.",
            ),
            build_expert(
                "leg-001",
                Category.LEGAL_COMPLIANCE,
                88,
                "Litigation",
                "Fights risky lawsuits.",
            ),
            build_expert(
                "strat-001",
                Category.STRATEGIC_LEADERSHIP,
                91,
                "Executive Leadership",
                "Leads turnarounds.",
            ),
            # Left-Field by category
            build_expert(
                "lf-001",
                Category.LEFT_FIELD,
                80,
                "Chess Strategy",
                "Sees risk like a grandmaster.",
            ),
            build_expert("lf-002", Category.LEFT_FIELD, 84, "Improv Comedy", "Thinks on the spot."),
            build_expert(
                "celeb-001",
                Category.CELEBRITY_CROSSOVER,
                92,
                "Sports Performance",
                "Champion mindset.",
            ),
            build_expert(
                "media-001", Category.MEDIA_ENTERTAINMENT, 86, "Film Production", "Storyteller."
            ),
            build_expert(
                "reg-001",
                Category.REGIONAL_SPECIALISTS,
                83,
                "Southeast Asia Markets",
                "Knows regional risk factors.",
            ),
            # Red Team by category
            build_expert(
                "gov-001",
                Category.GOVERNMENT_POLICY,
                88,
                "Geopolitics & Diplomacy",
                "Expert in international relations.",
            ),
            build_expert(
                "gov-004",
                Category.GOVERNMENT_POLICY,
                86,
                "Regulatory Risk",
                "Regulatory affairs expert.",
            ),
            build_expert(
                "gov-005",
                Category.GOVERNMENT_POLICY,
                84,
                "Defense & Security",
                "Security strategy.",
            ),
        ]
    )


@pytest.fixture(scope="session")
def bundled_catalog() -> ExpertCatalog:
    """The catalog shipped with the package."""
    return load_catalog(BUNDLED_CATALOG_PATH)

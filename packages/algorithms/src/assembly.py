"""Panel and Three-Panel Team Assembly.

Builds expert panels for a topic from an injected, immutable catalog:
- Single panel: eligibility pool -> relevance score -> rank -> diverse select
- Three-panel team: Blue Team, then Left-Field, then Red Team, each
  drawing only from experts not already placed
- Quick panel: search-driven round-robin across categories

Every call builds its own candidate list and result containers, so
concurrent callers share nothing but the read-only catalog.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date

import structlog

from packages.catalog.src.loader import ExpertCatalog
from packages.core.src.config import get_config
from packages.core.src.types import Category, Expert, PanelType, ThreePanelTeam

from .classification import coerce_panel_type, is_eligible
from .scoring import RelevanceScorer
from .selection import DiversitySelector, ScoredCandidate, rank_candidates, round_robin_by_category

logger = structlog.get_logger()

# Left-Field and Red Team never drop below this many seats
MIN_SECONDARY_PANEL_SIZE = 2


def secondary_panel_size(team_size: int) -> int:
    """Seats on the Left-Field and Red Team panels for a given Blue Team size."""
    return max(MIN_SECONDARY_PANEL_SIZE, team_size // 2)


class PanelAssembler:
    """Assemble panels from one catalog.

    Example:
        assembler = PanelAssembler(get_default_catalog())
        red_team = assembler.assemble("market entry", PanelType.RED_TEAM, size=3)
        team = assembler.compose_three_panel_team("pricing", team_size=4)
    """

    def __init__(
        self,
        catalog: ExpertCatalog,
        scorer: RelevanceScorer | None = None,
        selector: DiversitySelector | None = None,
    ) -> None:
        self.catalog = catalog
        self.scorer = scorer or RelevanceScorer()
        self.selector = selector or DiversitySelector()
        self._logger = logger.bind(component="panel_assembler")

    def eligible_pool(
        self,
        panel_type: PanelType | str,
        exclude_ids: Iterable[str] | None = None,
    ) -> list[Expert]:
        """Experts who may sit on this panel, minus exclusions, in catalog order.

        Red Team uses its override rule (allowlist or Government & Policy)
        instead of the category table.
        """
        panel_type = coerce_panel_type(panel_type)
        excluded = frozenset(exclude_ids or ())
        return [
            expert
            for expert in self.catalog
            if expert.id not in excluded and is_eligible(expert, panel_type)
        ]

    def assemble(
        self,
        topic: str,
        panel_type: PanelType | str,
        size: int,
        required_categories: Iterable[Category | str] | None = None,
        exclude_ids: Iterable[str] | None = None,
    ) -> list[Expert]:
        """Assemble one panel for a topic.

        Args:
            topic: Free-text topic biasing the relevance score
            panel_type: Panel to assemble
            size: Maximum panel size; zero or negative yields an empty panel
            required_categories: Categories that earn a relevance boost
            exclude_ids: Expert ids that may not be selected

        Returns:
            Up to ``size`` experts, ranked and category-diverse

        Raises:
            UnknownPanelTypeError: If panel_type is not a PanelType
        """
        panel_type = coerce_panel_type(panel_type)
        if size <= 0:
            return []

        pool = self.eligible_pool(panel_type, exclude_ids)
        required = tuple(required_categories or ())
        ranked = rank_candidates(
            ScoredCandidate(expert, self.scorer.score(expert, topic, required))
            for expert in pool
        )
        panel = self.selector.select(ranked, size)

        self._logger.debug(
            "panel_assembled",
            panel_type=panel_type.value,
            topic=topic,
            requested=size,
            pool_size=len(pool),
            selected=len(panel),
        )
        return panel

    def compose_three_panel_team(self, topic: str, team_size: int) -> ThreePanelTeam:
        """Assemble Blue Team, Left-Field and Red Team for one topic.

        Blue Team has first claim on the best matches. Left-Field and Red
        Team draw from whoever is left, so the three panels never overlap.
        """
        secondary_size = secondary_panel_size(team_size)

        blue_team = self.assemble(topic, PanelType.BLUE_TEAM, team_size)
        excluded = {e.id for e in blue_team}

        left_field = self.assemble(
            topic, PanelType.LEFT_FIELD, secondary_size, exclude_ids=excluded
        )
        excluded |= {e.id for e in left_field}

        red_team = self.assemble(topic, PanelType.RED_TEAM, secondary_size, exclude_ids=excluded)

        self._logger.info(
            "three_panel_team_composed",
            topic=topic,
            team_size=team_size,
            blue_team=len(blue_team),
            left_field=len(left_field),
            red_team=len(red_team),
        )
        return ThreePanelTeam(blue_team=blue_team, left_field=left_field, red_team=red_team)

    def top_performers(self, panel_type: PanelType | str, limit: int = 5) -> list[Expert]:
        """Highest performance_score experts eligible for a panel."""
        if limit <= 0:
            return []
        pool = self.eligible_pool(panel_type)
        return sorted(pool, key=lambda e: (-e.performance_score, e.id))[:limit]

    def recently_used(self, panel_type: PanelType | str, limit: int = 5) -> list[Expert]:
        """Most recently used experts eligible for a panel.

        Experts with no last_used date sort after every dated expert.
        """
        if limit <= 0:
            return []
        pool = self.eligible_pool(panel_type)
        return sorted(pool, key=_recency_key)[:limit]


def _recency_key(expert: Expert) -> tuple[bool, int, str]:
    last_used = expert.last_used or date.min
    return (expert.last_used is None, -last_used.toordinal(), expert.id)


def assemble_panel(
    catalog: ExpertCatalog,
    topic: str,
    panel_type: PanelType | str,
    size: int | None = None,
    required_categories: Iterable[Category | str] | None = None,
    exclude_ids: Iterable[str] | None = None,
) -> list[Expert]:
    """Assemble one panel. ``size`` defaults to PANEL_DEFAULT_PANEL_SIZE."""
    if size is None:
        size = get_config().default_panel_size
    return PanelAssembler(catalog).assemble(
        topic, panel_type, size, required_categories, exclude_ids
    )


def compose_three_panel_team(
    catalog: ExpertCatalog,
    topic: str,
    team_size: int | None = None,
) -> ThreePanelTeam:
    """Assemble a three-panel review team. ``team_size`` defaults to PANEL_DEFAULT_TEAM_SIZE."""
    if team_size is None:
        team_size = get_config().default_team_size
    return PanelAssembler(catalog).compose_three_panel_team(topic, team_size)


def quick_panel(catalog: ExpertCatalog, topic: str, size: int | None = None) -> list[Expert]:
    """Small cross-category panel from catalog search matches.

    Returns every match when they all fit, otherwise takes experts from
    each matching category in turn.
    """
    if size is None:
        size = get_config().quick_panel_size
    if size <= 0:
        return []

    matches = catalog.search(topic)
    if len(matches) <= size:
        return matches
    return round_robin_by_category(matches, size)

"""Panel Engine Algorithms Package.

Deterministic algorithms for assembling expert panels.
Same catalog and inputs always give the same panels, in the same order.

Layer: ANALYTICAL
- Classification: category -> panel type membership
- Scoring: topic relevance with explainable boosts
- Selection: two-pass diversity-aware greedy selection
- Assembly: single panels, three-panel teams, quick panels
- Phases: workflow phase -> recommended panel mix
- Stats: per-panel catalog summaries
"""

from .assembly import (
    PanelAssembler,
    assemble_panel,
    compose_three_panel_team,
    quick_panel,
    secondary_panel_size,
)
from .classification import (
    RED_TEAM_ALLOWLIST,
    coerce_panel_type,
    get_all_panel_types,
    get_panel_type_info,
    get_primary_panel_type,
)
from .phases import (
    WorkflowPhase,
    recommend_panels_for_phase,
)
from .scoring import (
    RelevanceScorer,
    ScoreExplanation,
    score_expert,
)
from .selection import (
    DiversitySelector,
    ScoredCandidate,
    rank_candidates,
    round_robin_by_category,
)
from .stats import get_panel_stats

__all__ = [
    # Classification
    "RED_TEAM_ALLOWLIST",
    "coerce_panel_type",
    "get_primary_panel_type",
    "get_all_panel_types",
    "get_panel_type_info",
    # Scoring
    "RelevanceScorer",
    "ScoreExplanation",
    "score_expert",
    # Selection
    "DiversitySelector",
    "ScoredCandidate",
    "rank_candidates",
    "round_robin_by_category",
    # Assembly
    "PanelAssembler",
    "assemble_panel",
    "compose_three_panel_team",
    "quick_panel",
    "secondary_panel_size",
    # Phases
    "WorkflowPhase",
    "recommend_panels_for_phase",
    # Stats
    "get_panel_stats",
]

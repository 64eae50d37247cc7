"""Per-Panel Catalog Statistics.

Each expert is counted once, under its primary panel type. Secondary
memberships only affect eligibility, never these totals.
"""

from __future__ import annotations

import math
from collections.abc import Iterable

from packages.core.src.types import Expert, PanelStats, PanelType

from .classification import get_primary_panel_type


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def get_panel_stats(catalog: Iterable[Expert]) -> dict[PanelType, PanelStats]:
    """Expert count and average performance score per primary panel type.

    Every panel type is present in the result; empty buckets report
    ``count=0, avg_score=0``.
    """
    counts = dict.fromkeys(PanelType, 0)
    totals = dict.fromkeys(PanelType, 0.0)

    for expert in catalog:
        panel_type = get_primary_panel_type(expert)
        counts[panel_type] += 1
        totals[panel_type] += expert.performance_score

    return {
        panel_type: PanelStats(
            count=counts[panel_type],
            avg_score=(
                _round_half_up(totals[panel_type] / counts[panel_type])
                if counts[panel_type]
                else 0
            ),
        )
        for panel_type in PanelType
    }

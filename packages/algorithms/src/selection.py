"""Diversity-Aware Panel Selection.

Two-phase greedy selection over a pre-sorted candidate list:
1. Diversity pass: admit the best candidate of each category not yet
   represented, in score order
2. Fill pass: admit the remaining best candidates regardless of category

Breadth takes priority for each category's first representative; raw
score governs every slot after that. Both passes walk the same sorted
order, so output is reproducible for identical input.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from packages.core.src.types import Category, Expert


@dataclass(frozen=True)
class ScoredCandidate:
    """An expert paired with its relevance score for one request."""

    expert: Expert
    score: float


def rank_candidates(candidates: Iterable[ScoredCandidate]) -> list[ScoredCandidate]:
    """Sort by score descending, ties by ascending expert id."""
    return sorted(candidates, key=lambda c: (-c.score, c.expert.id))


class DiversitySelector:
    """Bounded, category-diverse selection from ranked candidates."""

    def select(self, sorted_candidates: Sequence[ScoredCandidate], size: int) -> list[Expert]:
        """Pick up to ``size`` experts.

        Args:
            sorted_candidates: Candidates in rank_candidates order
            size: Maximum panel size; zero or negative yields an empty panel

        Returns:
            Selected experts in admission order
        """
        if size <= 0:
            return []

        panel: list[Expert] = []
        admitted: set[str] = set()
        represented: set[Category] = set()

        # Diversity pass: one expert per category
        for candidate in sorted_candidates:
            if len(panel) >= size:
                break
            expert = candidate.expert
            if expert.category not in represented and expert.id not in admitted:
                panel.append(expert)
                admitted.add(expert.id)
                represented.add(expert.category)

        # Fill pass: remaining slots go to the highest scorers
        for candidate in sorted_candidates:
            if len(panel) >= size:
                break
            expert = candidate.expert
            if expert.id not in admitted:
                panel.append(expert)
                admitted.add(expert.id)

        return panel


def round_robin_by_category(experts: Iterable[Expert], size: int) -> list[Expert]:
    """Take the best remaining expert from each category in turn.

    Categories are visited in the order they first appear in ``experts``;
    within a category experts go by performance_score descending, ties by
    id. Each round builds a fresh worklist of categories that still have
    experts left.
    """
    if size <= 0:
        return []

    groups: dict[Category, list[Expert]] = {}
    for expert in experts:
        groups.setdefault(expert.category, []).append(expert)
    queues = {
        category: tuple(sorted(members, key=lambda e: (-e.performance_score, e.id)))
        for category, members in groups.items()
    }
    cursors = dict.fromkeys(queues, 0)

    panel: list[Expert] = []
    worklist = tuple(queues)
    while worklist and len(panel) < size:
        for category in worklist:
            if len(panel) >= size:
                break
            panel.append(queues[category][cursors[category]])
            cursors[category] += 1
        worklist = tuple(c for c in worklist if cursors[c] < len(queues[c]))

    return panel

"""Deterministic Relevance Scoring.

Scores an expert against a free-text topic with a fixed, explainable
formula. Same inputs -> same outputs, with full attribution of why a
score was assigned.

score = performance_score
        + 20 if the topic appears in the specialty
        + 10 if the topic appears in the bio
        + 15 if the expert's category was requested

Matching is a case-insensitive substring test on the topic as given,
whitespace included. A blank topic adds no topic boost, so ranking falls
back to performance_score order.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from packages.core.src.types import Category, Expert

SPECIALTY_MATCH_BOOST = 20.0
BIO_MATCH_BOOST = 10.0
REQUIRED_CATEGORY_BOOST = 15.0


@dataclass
class ScoreExplanation:
    """Explainable score breakdown."""

    total_score: float
    components: dict[str, float] = field(default_factory=dict)
    reasons: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "total_score": round(self.total_score, 3),
            "components": {k: round(v, 3) for k, v in self.components.items()},
            "reasons": self.reasons,
        }


def _normalize_topic(topic: str | None) -> str:
    return (topic or "").lower()


class RelevanceScorer:
    """Topic-biased expert scoring.

    performance_score acts as a topic-agnostic quality prior, so
    historically strong experts still rank well for an empty topic.
    """

    def __init__(
        self,
        specialty_boost: float = SPECIALTY_MATCH_BOOST,
        bio_boost: float = BIO_MATCH_BOOST,
        category_boost: float = REQUIRED_CATEGORY_BOOST,
    ):
        self.specialty_boost = specialty_boost
        self.bio_boost = bio_boost
        self.category_boost = category_boost

    def score(
        self,
        expert: Expert,
        topic: str | None,
        required_categories: Iterable[Category] = (),
    ) -> float:
        """Score an expert for a topic."""
        return self.explain(expert, topic, required_categories).total_score

    def explain(
        self,
        expert: Expert,
        topic: str | None,
        required_categories: Iterable[Category] = (),
    ) -> ScoreExplanation:
        """Score an expert for a topic, keeping each contribution.

        Args:
            expert: Expert to score
            topic: Free-text topic; blank means no topic boosts
            required_categories: Categories the caller wants represented

        Returns:
            Explainable score breakdown
        """
        components: dict[str, float] = {"performance": float(expert.performance_score)}
        reasons: list[str] = []

        needle = _normalize_topic(topic)
        # whitespace is part of the needle; an all-blank topic matches nothing
        if needle.strip():
            if needle in expert.specialty.lower():
                components["specialty_match"] = self.specialty_boost
                reasons.append(f"Topic '{needle}' matches specialty")
            if needle in expert.bio.lower():
                components["bio_match"] = self.bio_boost
                reasons.append(f"Topic '{needle}' mentioned in bio")

        if any(expert.category == c for c in required_categories):
            components["required_category"] = self.category_boost
            reasons.append(f"Category '{expert.category.value}' was requested")

        return ScoreExplanation(
            total_score=sum(components.values()),
            components=components,
            reasons=reasons,
        )


_default_scorer = RelevanceScorer()


def score_expert(
    expert: Expert,
    topic: str | None,
    required_categories: Iterable[Category] = (),
) -> float:
    """Score an expert with the standard boosts."""
    return _default_scorer.score(expert, topic, required_categories)

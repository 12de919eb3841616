#!/usr/bin/env python3
"""
Score Aggregation - weighted overall score, threshold and ranking.

overall = sum(weight_c * score_c) over the six criteria, rounded to
3 decimal places. Weights are fixed and must sum to 1.0.
"""

import math
from typing import Iterable, List, Mapping

from core.matcher.models import CRITERIA, MatchCandidate

WEIGHTS = {
    'skills': 0.25,
    'location': 0.15,
    'budget': 0.20,
    'experience': 0.15,
    'availability': 0.10,
    'semantic': 0.15,
}

MIN_SCORE_THRESHOLD = 0.30

if set(WEIGHTS) != set(CRITERIA) or not math.isclose(sum(WEIGHTS.values()), 1.0):
    raise RuntimeError("Criterion weights must cover every criterion and sum to 1.0")


def calculate_overall_score(scores: Mapping[str, float]) -> float:
    """
    Weighted sum of a ScoreSet, rounded half-up to 3 decimals.

    Iterates the fixed weight table, so the order of keys in scores is
    irrelevant; a missing criterion contributes 0.
    """
    total = 0.0
    for criterion, weight in WEIGHTS.items():
        total += scores.get(criterion, 0.0) * weight
    return math.floor(total * 1000 + 0.5) / 1000


def apply_threshold(
    candidates: Iterable[MatchCandidate],
    min_score: float = MIN_SCORE_THRESHOLD
) -> List[MatchCandidate]:
    """Drop candidates whose overall score is below min_score."""
    return [c for c in candidates if c.overall_score >= min_score]


def rank_candidates(candidates: List[MatchCandidate], limit: int) -> List[MatchCandidate]:
    """
    Sort by overall score descending and keep the first limit entries.

    sorted() is stable, so equal scores keep the pool order (newest
    talent first). Ranks are assigned 1-based by position.
    """
    ranked = sorted(candidates, key=lambda c: c.overall_score, reverse=True)[:limit]
    for position, candidate in enumerate(ranked, start=1):
        candidate.rank = position
    return ranked

#!/usr/bin/env python3
"""
Scoring Module - aggregation and persistence of ranked matches.

- aggregate.py: Criterion weights, overall score, threshold, ranking
- persistence.py: Replace-set storage of a gig's matches (save_matches)
"""

from core.scorer.aggregate import (
    WEIGHTS, MIN_SCORE_THRESHOLD,
    calculate_overall_score, apply_threshold, rank_candidates
)
from core.scorer.persistence import save_matches

__all__ = [
    'WEIGHTS', 'MIN_SCORE_THRESHOLD',
    'calculate_overall_score', 'apply_threshold', 'rank_candidates',
    'save_matches',
]

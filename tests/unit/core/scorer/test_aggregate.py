#!/usr/bin/env python3
"""
Unit tests for score aggregation, thresholding and ranking.
"""

import math
import unittest

from core.matcher.models import CRITERIA, MatchCandidate
from core.scorer.aggregate import (
    WEIGHTS,
    MIN_SCORE_THRESHOLD,
    calculate_overall_score,
    apply_threshold,
    rank_candidates,
)
from tests import make_talent


def _candidate(talent_id, overall):
    return MatchCandidate(talent=make_talent(id=talent_id), scores={}, overall_score=overall)


class TestWeights(unittest.TestCase):

    def test_weights_cover_all_criteria(self):
        self.assertEqual(set(WEIGHTS), set(CRITERIA))

    def test_weights_sum_to_one(self):
        self.assertTrue(math.isclose(sum(WEIGHTS.values()), 1.0))

    def test_default_threshold(self):
        self.assertEqual(MIN_SCORE_THRESHOLD, 0.30)


class TestCalculateOverallScore(unittest.TestCase):

    def test_all_ones(self):
        self.assertEqual(calculate_overall_score({c: 1.0 for c in CRITERIA}), 1.0)

    def test_all_zeros(self):
        self.assertEqual(calculate_overall_score({c: 0.0 for c in CRITERIA}), 0.0)

    def test_weighted_sum(self):
        scores = {
            'skills': 1.0, 'location': 1.0, 'budget': 0.8,
            'experience': 0.8, 'availability': 1.0, 'semantic': 0.2,
        }
        self.assertEqual(calculate_overall_score(scores), 0.81)

    def test_rounded_to_three_decimals(self):
        scores = {c: 0.0 for c in CRITERIA}
        scores['skills'] = 1 / 3
        self.assertEqual(calculate_overall_score(scores), 0.083)

    def test_key_order_is_irrelevant(self):
        scores = {
            'skills': 0.37, 'location': 0.7, 'budget': 0.15,
            'experience': 0.86, 'availability': 0.6, 'semantic': 0.42,
        }
        reordered = dict(reversed(list(scores.items())))
        self.assertEqual(calculate_overall_score(scores), calculate_overall_score(reordered))

    def test_missing_criterion_contributes_nothing(self):
        self.assertEqual(calculate_overall_score({'skills': 1.0}), 0.25)


class TestApplyThreshold(unittest.TestCase):

    def test_boundary_is_inclusive(self):
        kept = apply_threshold([_candidate(1, 0.30), _candidate(2, 0.299), _candidate(3, 0.9)])
        self.assertEqual([c.talent.id for c in kept], [1, 3])

    def test_custom_threshold(self):
        kept = apply_threshold([_candidate(1, 0.5), _candidate(2, 0.7)], min_score=0.6)
        self.assertEqual([c.talent.id for c in kept], [2])


class TestRankCandidates(unittest.TestCase):

    def test_sorted_descending_with_ranks(self):
        ranked = rank_candidates([_candidate(1, 0.4), _candidate(2, 0.9), _candidate(3, 0.6)], limit=10)
        self.assertEqual([c.talent.id for c in ranked], [2, 3, 1])
        self.assertEqual([c.rank for c in ranked], [1, 2, 3])

    def test_ties_keep_input_order(self):
        ranked = rank_candidates([_candidate(1, 0.5), _candidate(2, 0.7), _candidate(3, 0.5)], limit=10)
        self.assertEqual([c.talent.id for c in ranked], [2, 1, 3])

    def test_limit_truncates(self):
        ranked = rank_candidates([_candidate(i, i / 10) for i in range(1, 8)], limit=3)
        self.assertEqual([c.talent.id for c in ranked], [7, 6, 5])

    def test_empty(self):
        self.assertEqual(rank_candidates([], limit=5), [])


if __name__ == '__main__':
    unittest.main()

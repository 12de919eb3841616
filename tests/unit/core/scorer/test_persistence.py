#!/usr/bin/env python3
"""
Unit tests for save_matches.
"""

import unittest
from unittest.mock import MagicMock

from core.matcher.models import MatchCandidate
from core.scorer.persistence import save_matches
from tests import make_talent


class TestSaveMatches(unittest.TestCase):

    def setUp(self):
        self.repo = MagicMock()
        self.repo.matches.replace_for_gig.side_effect = lambda gig_id, rows: [MagicMock() for _ in rows]

    def _candidate(self, talent_id, overall):
        scores = {
            'skills': 0.8567, 'location': 1.0, 'budget': 0.8,
            'experience': 0.8, 'availability': 1.0, 'semantic': 0.3333,
        }
        return MatchCandidate(
            talent=make_talent(id=talent_id), scores=scores,
            overall_score=overall, explanation="why", rank=1
        )

    def test_locks_gig_before_replacing(self):
        save_matches(self.repo, 7, [self._candidate(1, 0.8)])

        calls = [name for name, _, _ in self.repo.mock_calls if name.startswith(('gigs.', 'matches.'))]
        self.assertEqual(calls, ['gigs.lock_for_update', 'matches.replace_for_gig'])
        self.repo.gigs.lock_for_update.assert_called_once_with(7)

    def test_rows_are_rounded_and_suggested(self):
        save_matches(self.repo, 7, [self._candidate(3, 0.81234)])

        gig_id, rows = self.repo.matches.replace_for_gig.call_args.args
        self.assertEqual(gig_id, 7)
        self.assertEqual(rows, [{
            'talent_id': 3,
            'overall_score': 0.812,
            'skill_score': 0.857,
            'location_score': 1.0,
            'budget_score': 0.8,
            'experience_score': 0.8,
            'availability_score': 1.0,
            'semantic_score': 0.333,
            'explanation': "why",
            'status': 'suggested',
        }])

    def test_empty_set_still_replaces(self):
        records = save_matches(self.repo, 7, [])

        self.repo.matches.replace_for_gig.assert_called_once_with(7, [])
        self.assertEqual(records, [])


if __name__ == '__main__':
    unittest.main()

#!/usr/bin/env python3
"""
Unit tests for the matching repositories.

Tests the repository methods the matching service relies on:
- TalentRepository.get_candidate_pool()
- MatchRepository.replace_for_gig() / get_matches_for_gig()
- MatchRepository.upsert_feedback()
- Feedback removal when a match set is replaced
"""

import unittest
from datetime import datetime, timezone

import pytest

from database.models import MatchFeedback
from database.repository import MatchingRepository
from tests import create_test_store, add_gig, add_talent


def _row(talent_id, overall, explanation=""):
    return {
        'talent_id': talent_id,
        'overall_score': overall,
        'skill_score': 0.5,
        'location_score': 0.5,
        'budget_score': 0.5,
        'experience_score': 0.5,
        'availability_score': 1.0,
        'semantic_score': 0.2,
        'explanation': explanation,
        'status': 'suggested',
    }


@pytest.mark.db
class RepositoryTestCase(unittest.TestCase):

    def setUp(self):
        self.engine, self.session_factory = create_test_store()
        self.session = self.session_factory()
        self.repo = MatchingRepository(self.session)

    def tearDown(self):
        self.session.close()
        self.engine.dispose()


class TestCandidatePool(RepositoryTestCase):

    def test_only_available_newest_first(self):
        old = add_talent(self.session_factory, created_at=datetime(2023, 5, 1, tzinfo=timezone.utc))
        new = add_talent(self.session_factory, created_at=datetime(2024, 6, 1, tzinfo=timezone.utc))
        same_time = add_talent(self.session_factory, created_at=datetime(2024, 6, 1, tzinfo=timezone.utc))
        add_talent(self.session_factory, availability_status='busy')

        pool = self.repo.talents.get_candidate_pool()

        self.assertEqual([t.id for t in pool], [same_time, new, old])

    def test_empty_pool(self):
        self.assertEqual(self.repo.talents.get_candidate_pool(), [])


class TestReplaceForGig(RepositoryTestCase):

    def setUp(self):
        super().setUp()
        self.gig_id = add_gig(self.session_factory)
        self.other_gig_id = add_gig(self.session_factory, title="Other")
        self.talent_ids = [add_talent(self.session_factory) for _ in range(3)]

    def test_replace_removes_previous_rows(self):
        a, b, c = self.talent_ids
        self.repo.matches.replace_for_gig(self.gig_id, [_row(a, 0.5), _row(b, 0.9)])
        self.session.commit()

        self.repo.matches.replace_for_gig(self.gig_id, [_row(c, 0.7), _row(a, 0.6)])
        self.session.commit()

        stored = self.repo.matches.get_matches_for_gig(self.gig_id)
        self.assertEqual([m.talent_id for m in stored], [c, a])
        self.assertEqual(len(self.repo.matches.get_matches_for_gig(self.gig_id)), 2)

    def test_replace_with_empty_set(self):
        self.repo.matches.replace_for_gig(self.gig_id, [_row(self.talent_ids[0], 0.5)])
        self.session.commit()

        self.repo.matches.replace_for_gig(self.gig_id, [])
        self.session.commit()

        self.assertEqual(len(self.repo.matches.get_matches_for_gig(self.gig_id)), 0)

    def test_other_gig_untouched(self):
        a = self.talent_ids[0]
        self.repo.matches.replace_for_gig(self.other_gig_id, [_row(a, 0.5)])
        self.repo.matches.replace_for_gig(self.gig_id, [_row(a, 0.8)])
        self.session.commit()

        self.repo.matches.replace_for_gig(self.gig_id, [])
        self.session.commit()

        self.assertEqual(len(self.repo.matches.get_matches_for_gig(self.other_gig_id)), 1)

    def test_rollback_keeps_previous_rows(self):
        a, b, _ = self.talent_ids
        self.repo.matches.replace_for_gig(self.gig_id, [_row(a, 0.5), _row(b, 0.9)])
        self.session.commit()

        self.repo.matches.replace_for_gig(self.gig_id, [])
        self.session.rollback()

        self.assertEqual(len(self.repo.matches.get_matches_for_gig(self.gig_id)), 2)

    def test_matches_load_talent(self):
        self.repo.matches.replace_for_gig(self.gig_id, [_row(self.talent_ids[0], 0.5)])
        self.session.commit()

        match = self.repo.matches.get_matches_for_gig(self.gig_id)[0]
        self.assertEqual(match.talent.name, "Kavya Menon")

    def test_lock_for_update(self):
        gig = self.repo.gigs.lock_for_update(self.gig_id)
        self.assertEqual(gig.id, self.gig_id)
        self.assertIsNone(self.repo.gigs.lock_for_update(9999))


class TestFeedback(RepositoryTestCase):

    def setUp(self):
        super().setUp()
        self.gig_id = add_gig(self.session_factory)
        self.talent_id = add_talent(self.session_factory)
        self.match = self.repo.matches.replace_for_gig(self.gig_id, [_row(self.talent_id, 0.8)])[0]
        self.session.commit()

    def test_insert_then_overwrite(self):
        self.repo.matches.upsert_feedback(self.match.id, None, 2, "Slow to respond")
        self.session.commit()
        self.repo.matches.upsert_feedback(self.match.id, None, 4)
        self.session.commit()

        feedback = self.repo.matches.get_feedback(self.match.id)
        self.assertEqual(feedback.rating, 4)
        self.assertIsNone(feedback.feedback_text)

    def test_replace_removes_feedback_of_replaced_rows(self):
        self.repo.matches.upsert_feedback(self.match.id, None, 1, "Not a fit")
        self.session.commit()

        self.repo.matches.replace_for_gig(self.gig_id, [_row(self.talent_id, 0.6)])
        self.session.commit()

        self.assertEqual(self.session.query(MatchFeedback).count(), 0)

    def test_replace_keeps_feedback_of_other_gigs(self):
        other_gig_id = add_gig(self.session_factory, title="Other")
        other = self.repo.matches.replace_for_gig(other_gig_id, [_row(self.talent_id, 0.7)])[0]
        self.repo.matches.upsert_feedback(other.id, None, 5)
        self.session.commit()

        self.repo.matches.replace_for_gig(self.gig_id, [])
        self.session.commit()

        self.assertEqual(self.repo.matches.get_feedback(other.id).rating, 5)

    def test_update_status(self):
        self.repo.matches.update_status(self.match, 'accepted')
        self.session.commit()

        self.assertEqual(self.repo.matches.get_by_id(self.match.id).status, 'accepted')


if __name__ == '__main__':
    unittest.main()

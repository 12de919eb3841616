#!/usr/bin/env python3
"""
Persistence Operations - Database operations for ranked matches.

The stored set for a gig is always replaced wholesale: every previous
row is deleted and the new ranking inserted in the same transaction.
The caller's unit of work decides commit or rollback, so a failure
leaves the previous set untouched.
"""

import logging
from typing import List

from database.models import Match
from database.repository import MatchingRepository
from core.matcher.models import MatchCandidate

logger = logging.getLogger(__name__)


def save_matches(
    repo: MatchingRepository,
    gig_id: int,
    candidates: List[MatchCandidate]
) -> List[Match]:
    """
    Replace the persisted match set for a gig.

    Takes a row lock on the gig first so concurrent writers for the
    same gig serialize at the database as well.

    Args:
        repo: MatchingRepository bound to the current unit of work
        gig_id: Gig whose matches are replaced
        candidates: Ranked candidates to store (may be empty)

    Returns:
        The inserted Match records
    """
    repo.gigs.lock_for_update(gig_id)

    rows = [candidate.to_row() for candidate in candidates]
    records = repo.matches.replace_for_gig(gig_id, rows)

    logger.info(f"💾 Saved {len(records)} matches for gig {gig_id}")
    return records

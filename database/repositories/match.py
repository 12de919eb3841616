import logging
from typing import Any, Dict, List, Optional

from sqlalchemy import select, delete, func
from sqlalchemy.orm import joinedload

from database.models import Match, MatchFeedback
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class MatchRepository(BaseRepository):
    def get_by_id(self, match_id: int) -> Optional[Match]:
        stmt = (
            select(Match)
            .options(joinedload(Match.gig))
            .where(Match.id == match_id)
        )
        return self.db.execute(stmt).scalar_one_or_none()

    def get_matches_for_gig(self, gig_id: int) -> List[Match]:
        stmt = (
            select(Match)
            .options(joinedload(Match.talent))
            .where(Match.gig_id == gig_id)
            .order_by(Match.overall_score.desc(), Match.id.asc())
        )
        return list(self.db.execute(stmt).scalars().all())

    def replace_for_gig(self, gig_id: int, rows: List[Dict[str, Any]]) -> List[Match]:
        """
        Replace every match stored for a gig with the given rows.

        Runs inside the caller's transaction: the delete and the inserts
        become visible together on commit or not at all on rollback.
        Feedback on the removed rows is deleted with them; the bulk
        delete does not run the ORM cascade.
        """
        stale_ids = select(Match.id).where(Match.gig_id == gig_id)
        self.db.execute(delete(MatchFeedback).where(MatchFeedback.match_id.in_(stale_ids)))

        result = self.db.execute(delete(Match).where(Match.gig_id == gig_id))
        removed = result.rowcount or 0

        records = [Match(gig_id=gig_id, **row) for row in rows]
        self.db.add_all(records)
        self.db.flush()

        logger.debug(f"Replaced {removed} matches with {len(records)} for gig {gig_id}")
        return records

    def update_status(self, match: Match, status: str) -> Match:
        match.status = status
        self.db.flush()
        return match

    def get_feedback(self, match_id: int) -> Optional[MatchFeedback]:
        stmt = select(MatchFeedback).where(MatchFeedback.match_id == match_id)
        return self.db.execute(stmt).scalar_one_or_none()

    def upsert_feedback(
        self,
        match_id: int,
        client_id: Optional[int],
        rating: int,
        feedback_text: Optional[str] = None
    ) -> MatchFeedback:
        """Insert feedback for a match or overwrite the existing entry."""
        existing = self.get_feedback(match_id)

        if existing:
            existing.client_id = client_id
            existing.rating = rating
            existing.feedback_text = feedback_text
            existing.created_at = func.now()
            record = existing
        else:
            record = MatchFeedback(
                match_id=match_id,
                client_id=client_id,
                rating=rating,
                feedback_text=feedback_text
            )
            self.db.add(record)

        self.db.flush()
        return record

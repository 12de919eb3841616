import logging
from typing import Any, Dict, List, Optional

from sqlalchemy import select

from database.models import Talent
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class TalentRepository(BaseRepository):
    def get_by_email(self, email: str) -> Optional[Talent]:
        stmt = select(Talent).where(Talent.email == email)
        return self.db.execute(stmt).scalar_one_or_none()

    def get_candidate_pool(self, availability_status: str = 'available') -> List[Talent]:
        """
        Fetch talents eligible for matching, most recently created first.

        The id tiebreak keeps the order deterministic when several rows
        share a creation timestamp.
        """
        stmt = (
            select(Talent)
            .where(Talent.availability_status == availability_status)
            .order_by(Talent.created_at.desc(), Talent.id.desc())
        )
        return list(self.db.execute(stmt).scalars().all())

    def create_talent(self, talent_data: Dict[str, Any]) -> Talent:
        talent = Talent(**talent_data)
        self.db.add(talent)
        self.db.flush()
        return talent

    def get_or_create(self, talent_data: Dict[str, Any]) -> Talent:
        existing = self.get_by_email(talent_data['email'])
        if existing:
            return existing
        return self.create_talent(talent_data)

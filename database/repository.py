import logging

from sqlalchemy.orm import Session

from database.repositories import (
    GigRepository, ClientRepository, TalentRepository, MatchRepository
)

logger = logging.getLogger(__name__)


class MatchingRepository:
    """
    Facade over the per-table repositories sharing one Session.

    Handed out by matching_uow(); the unit of work owns commit/rollback.
    """

    def __init__(self, db: Session):
        self.db = db
        self.gigs = GigRepository(db)
        self.clients = ClientRepository(db)
        self.talents = TalentRepository(db)
        self.matches = MatchRepository(db)

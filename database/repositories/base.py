from sqlalchemy.orm import Session


class BaseRepository:
    """Holds the Session of the enclosing matching_uow, which owns the transaction."""

    def __init__(self, db: Session):
        self.db = db

import logging
from typing import Any, Dict, Optional

from sqlalchemy import select

from database.models import Client, Gig
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class GigRepository(BaseRepository):
    def get_by_id(self, gig_id: int) -> Optional[Gig]:
        stmt = select(Gig).where(Gig.id == gig_id)
        return self.db.execute(stmt).scalar_one_or_none()

    def lock_for_update(self, gig_id: int) -> Optional[Gig]:
        """Fetch the gig holding a row lock until the transaction ends.

        Backends without row locks (SQLite) ignore FOR UPDATE.
        """
        stmt = select(Gig).where(Gig.id == gig_id).with_for_update()
        return self.db.execute(stmt).scalar_one_or_none()

    def get_by_title(self, client_id: Optional[int], title: str) -> Optional[Gig]:
        stmt = select(Gig).where(Gig.client_id == client_id, Gig.title == title)
        return self.db.execute(stmt).scalars().first()

    def create_gig(self, gig_data: Dict[str, Any]) -> Gig:
        gig = Gig(**gig_data)
        self.db.add(gig)
        self.db.flush()  # Generate ID
        return gig


class ClientRepository(BaseRepository):
    def get_by_email(self, email: str) -> Optional[Client]:
        stmt = select(Client).where(Client.email == email)
        return self.db.execute(stmt).scalar_one_or_none()

    def get_or_create(self, client_data: Dict[str, Any]) -> Client:
        existing = self.get_by_email(client_data['email'])
        if existing:
            return existing
        client = Client(**client_data)
        self.db.add(client)
        self.db.flush()
        return client

from database.repositories.base import BaseRepository
from database.repositories.gig import GigRepository, ClientRepository
from database.repositories.talent import TalentRepository
from database.repositories.match import MatchRepository

__all__ = [
    'BaseRepository',
    'GigRepository',
    'ClientRepository',
    'TalentRepository',
    'MatchRepository',
]

from .base import Base
from .client import Client
from .gig import Gig
from .talent import Talent
from .match import Match, MatchFeedback, MATCH_STATUSES

__all__ = [
    'Base',
    'Client',
    'Gig',
    'Talent',
    'Match',
    'MatchFeedback',
    'MATCH_STATUSES',
]

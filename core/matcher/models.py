#!/usr/bin/env python3
"""
Matcher Models - Data structures for matching results.
"""

from dataclasses import dataclass
from typing import Dict

from core.matcher.dto import TalentProfile

CRITERIA = ('skills', 'location', 'budget', 'experience', 'availability', 'semantic')

# criterion name -> score in [0, 1]; all six CRITERIA keys present
ScoreSet = Dict[str, float]


@dataclass
class MatchCandidate:
    """One scored talent for a gig (output of MatchingService)."""
    talent: TalentProfile
    scores: ScoreSet
    overall_score: float
    explanation: str = ""
    rank: int = 0

    def to_row(self) -> Dict[str, object]:
        """Column values for the persisted match record (gig_id excluded)."""
        return {
            'talent_id': self.talent.id,
            'overall_score': round(self.overall_score, 3),
            'skill_score': round(self.scores.get('skills', 0.0), 3),
            'location_score': round(self.scores.get('location', 0.0), 3),
            'budget_score': round(self.scores.get('budget', 0.0), 3),
            'experience_score': round(self.scores.get('experience', 0.0), 3),
            'availability_score': round(self.scores.get('availability', 0.0), 3),
            'semantic_score': round(self.scores.get('semantic', 0.0), 3),
            'explanation': self.explanation,
            'status': 'suggested',
        }


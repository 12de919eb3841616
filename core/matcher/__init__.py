"""Matcher Module - per-criterion scoring, explanations and the matching service.

MatchingService is imported from core.matcher.service directly.
"""
from core.matcher.dto import GigProfile, TalentProfile
from core.matcher.models import CRITERIA, ScoreSet, MatchCandidate
from core.matcher.locations import LocationTables, DEFAULT_LOCATION_TABLES
from core.matcher.criteria import (
    calculate_skill_score, calculate_location_score, calculate_budget_score,
    calculate_experience_score, calculate_availability_score
)
from core.matcher.similarity import calculate_semantic_score
from core.matcher.explainability import generate_explanation

__all__ = [
    'GigProfile', 'TalentProfile',
    'CRITERIA', 'ScoreSet', 'MatchCandidate',
    'LocationTables', 'DEFAULT_LOCATION_TABLES',
    'calculate_skill_score', 'calculate_location_score', 'calculate_budget_score',
    'calculate_experience_score', 'calculate_availability_score',
    'calculate_semantic_score', 'generate_explanation',
]

#!/usr/bin/env python3
"""
Criterion Scorers - rule-based per-criterion compatibility scores.

Each scorer maps (gig, talent) to a score in [0, 1]. They are pure
functions: no I/O, no logging, no shared mutable state, so the
orchestrator can evaluate candidates in any order or in parallel.
Missing optional fields degrade to neutral defaults instead of raising.

The semantic criterion lives in core.matcher.similarity because it may
consult an embedding provider.
"""

import math
from typing import Iterable, List, Optional, Tuple

from core.matcher.dto import GigProfile, TalentProfile
from core.matcher.locations import LocationTables, DEFAULT_LOCATION_TABLES

# ----------------------------
# Skill matching credits
# ----------------------------
NO_REQUIRED_SKILLS_SCORE = 0.5
DIRECT_SKILL_CREDIT = 1.0
CATEGORY_CREDIT = 0.7
KEYWORD_CREDIT = 0.3

# ----------------------------
# Location scores
# ----------------------------
REMOTE_SCORE = 1.0
UNKNOWN_LOCATION_SCORE = 0.5
SAME_CITY_SCORE = 1.0
SAME_REGION_SCORE = 0.7
BOTH_METRO_SCORE = 0.4
DISTANT_SCORE = 0.2

# ----------------------------
# Budget
# ----------------------------
DEGENERATE_BUDGET_SCORE = 0.3

AVAILABILITY_SCORES = {
    'available': 1.0,
    'partially_available': 0.6,
    'busy': 0.2,
}


def _normalized(labels: Iterable[str]) -> List[str]:
    # Blank labels would substring-match everything
    return [label.lower() for label in labels if label and label.strip()]


def _contains_either_way(needle: str, haystack: Iterable[str]) -> bool:
    return any(item in needle or needle in item for item in haystack)


def _skill_credit(required: str, skills: List[str], categories: List[str], skills_blob: str) -> float:
    """Credit for one required skill; the first tier that matches wins."""
    if _contains_either_way(required, skills):
        return DIRECT_SKILL_CREDIT

    if _contains_either_way(required, categories):
        return CATEGORY_CREDIT

    if any(keyword in skills_blob for keyword in required.split()):
        return KEYWORD_CREDIT

    return 0.0


def calculate_skill_score(gig: GigProfile, talent: TalentProfile) -> float:
    """
    Fraction of the gig's required skills the talent covers.

    Per required skill: direct skill match 1.0, category match 0.7,
    keyword overlap 0.3, otherwise 0. No required skills scores 0.5.
    """
    required_skills = _normalized(gig.required_skills)
    if not required_skills:
        return NO_REQUIRED_SKILLS_SCORE

    skills = _normalized(talent.skills)
    categories = _normalized(talent.categories)
    skills_blob = " ".join(talent.skills).lower()

    matched = sum(
        _skill_credit(required, skills, categories, skills_blob)
        for required in required_skills
    )
    return min(matched / len(required_skills), 1.0)


def calculate_location_score(
    gig: GigProfile,
    talent: TalentProfile,
    tables: LocationTables = DEFAULT_LOCATION_TABLES
) -> float:
    """Geographic compatibility; remote gigs always score 1.0."""
    if gig.is_remote:
        return REMOTE_SCORE

    gig_location = (gig.location or "").strip().lower()
    talent_city = (talent.city or "").strip().lower()

    if not gig_location or not talent_city:
        return UNKNOWN_LOCATION_SCORE

    if talent_city in gig_location or gig_location in talent_city:
        return SAME_CITY_SCORE

    if tables.region_of(gig_location) == tables.region_of(talent_city):
        return SAME_REGION_SCORE

    if tables.is_major_metro(gig_location) and tables.is_major_metro(talent_city):
        return BOTH_METRO_SCORE

    return DISTANT_SCORE


def budget_bounds(min_budget: Optional[float], max_budget: Optional[float]) -> Tuple[float, float]:
    """Missing (or zero) bounds widen the range: min -> 0, max -> infinity."""
    low = float(min_budget) if min_budget else 0.0
    high = float(max_budget) if max_budget else math.inf
    return low, high


def _gap_score(gap: float, denominator: float) -> float:
    # An unbounded denominator makes any finite gap negligible
    if math.isinf(denominator):
        return 1.0
    if denominator <= 0:
        return 0.0
    return max(0.0, 1.0 - (gap / denominator) * 2)


def calculate_budget_score(gig: GigProfile, talent: TalentProfile) -> float:
    """
    Budget range compatibility.

    Overlapping ranges score by overlap relative to the wider range
    (boosted x2, capped at 1.0). Disjoint ranges lose score in
    proportion to the gap.
    """
    gig_min, gig_max = budget_bounds(gig.min_budget, gig.max_budget)
    talent_min, talent_max = budget_bounds(talent.min_budget, talent.max_budget)

    gig_range = gig_max - gig_min
    talent_range = talent_max - talent_min

    if gig_max >= talent_min and gig_min <= talent_max:
        if gig_range == 0 and talent_range == 0:
            return 1.0

        overlap = min(gig_max, talent_max) - max(gig_min, talent_min)
        widest = max(gig_range, talent_range)

        if math.isinf(overlap):
            # Both ranges are open-ended above
            return 1.0
        overlap_ratio = 0.0 if math.isinf(widest) else overlap / widest
        return min(overlap_ratio * 2, 1.0)

    if gig_max < talent_min:
        # Gig underpays
        return _gap_score(talent_min - gig_max, max(talent_range, gig_max))

    if gig_min > talent_max:
        # Gig budget sits above the talent's range
        return _gap_score(gig_min - talent_max, max(gig_range, talent_max))

    return DEGENERATE_BUDGET_SCORE


def calculate_experience_score(gig: GigProfile, talent: TalentProfile) -> float:
    """Years-of-experience bracket plus project-count and rating bonuses."""
    experience = talent.experience_years or 0
    total_projects = talent.total_projects or 0
    rating = float(talent.rating or 0)

    if experience >= 5:
        base = 1.0
    elif experience >= 3:
        base = 0.8
    elif experience >= 1:
        base = 0.6
    else:
        base = 0.3

    project_bonus = min(total_projects * 0.05, 0.2)
    rating_bonus = (rating / 5) * 0.2 if rating > 0 else 0.0

    return min(base + project_bonus + rating_bonus, 1.0)


def calculate_availability_score(gig: GigProfile, talent: TalentProfile) -> float:
    return AVAILABILITY_SCORES.get(talent.availability_status, 0.0)

#!/usr/bin/env python3
"""
Explainability Module - human-readable rationale for a match.

Turns a ScoreSet and the talent's raw attributes into ordered reason
fragments (skills, location, budget, experience). Semantic and
availability scores are never surfaced in the text.
"""

from typing import List, Optional

from core.matcher.dto import TalentProfile
from core.matcher.models import ScoreSet
from core.utils import to_percent

SEPARATOR = " • "


def _money(amount: Optional[float]) -> str:
    if amount is None:
        return "n/a"
    return f"₹{int(amount):,}"


def skill_reason(score: float) -> Optional[str]:
    if score > 0.8:
        return f"🎯 Excellent skill match ({to_percent(score)}%) - has most required skills"
    if score > 0.6:
        return f"✅ Good skill match ({to_percent(score)}%) - covers key requirements"
    if score > 0.3:
        return f"🔶 Partial skill match ({to_percent(score)}%) - some relevant skills"
    return None


def location_reason(score: float, talent: TalentProfile) -> Optional[str]:
    if score == 1.0:
        return f"📍 Perfect location match - based in {talent.city}"
    if score > 0.6:
        return "📍 Good location compatibility - same region"
    if score > 0.3:
        return "📍 Moderate location match - travel may be needed"
    return None


def budget_reason(score: float, talent: TalentProfile) -> Optional[str]:
    if score > 0.8:
        return (
            f"💰 Budget aligns well with requirements "
            f"({_money(talent.min_budget)}-{_money(talent.max_budget)})"
        )
    if score > 0.5:
        return "💰 Budget partially compatible"
    return None


def experience_reason(score: float, talent: TalentProfile) -> Optional[str]:
    if score > 0.8:
        return f"⭐ Strong experience ({talent.experience_years} years, {talent.total_projects} projects)"
    if score > 0.5:
        return f"⭐ Moderate experience ({talent.experience_years} years)"
    return None


def explain_fragments(talent: TalentProfile, scores: ScoreSet) -> List[str]:
    """Reason fragments in fixed criterion order, omitting weak criteria."""
    fragments = [
        skill_reason(scores.get('skills', 0.0)),
        location_reason(scores.get('location', 0.0), talent),
        budget_reason(scores.get('budget', 0.0), talent),
        experience_reason(scores.get('experience', 0.0), talent),
    ]
    return [f for f in fragments if f]


def generate_explanation(talent: TalentProfile, scores: ScoreSet) -> str:
    return SEPARATOR.join(explain_fragments(talent, scores))

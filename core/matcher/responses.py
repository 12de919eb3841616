#!/usr/bin/env python3
"""
Response models for matching service operations.

Component and overall scores are surfaced as whole percentages.
"""

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from core.matcher.dto import GigProfile, TalentProfile
from core.matcher.models import MatchCandidate
from core.utils import to_percent


class TalentSummary(BaseModel):
    """Public view of a matched talent."""
    id: int
    name: str
    city: Optional[str] = None
    categories: List[str] = Field(default_factory=list)
    skills: List[str] = Field(default_factory=list)
    experience_years: int = 0
    rating: float = Field(default=0.0, ge=0, le=5)
    portfolio_links: List[str] = Field(default_factory=list)
    instagram_handle: Optional[str] = None
    bio: Optional[str] = None

    @classmethod
    def from_profile(cls, talent: TalentProfile) -> "TalentSummary":
        return cls(
            id=talent.id,
            name=talent.name,
            city=talent.city,
            categories=list(talent.categories),
            skills=list(talent.skills),
            experience_years=talent.experience_years,
            rating=talent.rating,
            portfolio_links=list(talent.portfolio_links),
            instagram_handle=talent.instagram_handle,
            bio=talent.bio,
        )


class ScoreBreakdown(BaseModel):
    """Per-criterion scores as percentages."""
    skills: int = Field(ge=0, le=100)
    location: int = Field(ge=0, le=100)
    budget: int = Field(ge=0, le=100)
    experience: int = Field(ge=0, le=100)
    availability: int = Field(ge=0, le=100)
    semantic: int = Field(ge=0, le=100)

    @classmethod
    def from_fractions(cls, scores: Any) -> "ScoreBreakdown":
        return cls(**{name: to_percent(scores.get(name, 0.0)) for name in cls.model_fields})


class MatchResponse(BaseModel):
    """A freshly ranked match."""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "talent": {"id": 1, "name": "Kavya Menon", "city": "Goa"},
                "overall_score": 82,
                "scores": {
                    "skills": 85, "location": 100, "budget": 80,
                    "experience": 80, "availability": 100, "semantic": 40
                },
                "explanation": "🎯 Excellent skill match (85%) - has most required skills",
                "rank": 1
            }
        }
    )

    talent: TalentSummary
    overall_score: int = Field(ge=0, le=100)
    scores: ScoreBreakdown
    explanation: str
    rank: int = Field(ge=1)

    @classmethod
    def from_candidate(cls, candidate: MatchCandidate) -> "MatchResponse":
        return cls(
            talent=TalentSummary.from_profile(candidate.talent),
            overall_score=to_percent(candidate.overall_score),
            scores=ScoreBreakdown.from_fractions(candidate.scores),
            explanation=candidate.explanation,
            rank=candidate.rank,
        )


class GigSummary(BaseModel):
    """Gig header echoed with a match run."""
    id: int
    title: str
    category: str
    location: Optional[str] = None
    is_remote: bool = False
    budget: str
    required_skills: List[str] = Field(default_factory=list)

    @classmethod
    def from_profile(cls, gig: GigProfile) -> "GigSummary":
        return cls(
            id=gig.id,
            title=gig.title,
            category=gig.category,
            location=gig.location,
            is_remote=gig.is_remote,
            budget=format_budget(gig.min_budget, gig.max_budget),
            required_skills=list(gig.required_skills),
        )


class FindMatchesResponse(BaseModel):
    success: bool = True
    gig: GigSummary
    total_matches: int
    matches: List[MatchResponse]


class SavedMatchResponse(BaseModel):
    """A stored match read back from the database."""
    match_id: int
    talent: TalentSummary
    overall_score: int = Field(ge=0, le=100)
    scores: ScoreBreakdown
    explanation: Optional[str] = None
    status: str
    rank: int = Field(ge=1)


class SavedMatchesResponse(BaseModel):
    success: bool = True
    gig_id: int
    total_matches: int
    matches: List[SavedMatchResponse]


class FeedbackResponse(BaseModel):
    success: bool = True
    match_id: int
    rating: int
    message: str = "Feedback submitted successfully"


def format_budget(min_budget: Optional[float], max_budget: Optional[float]) -> str:
    def _fmt(amount: Optional[float]) -> str:
        return f"₹{int(amount):,}" if amount is not None else "open"
    return f"{_fmt(min_budget)} - {_fmt(max_budget)}"

"""Data Transfer Objects for the matching service.

DTOs are used to transfer data outside of the Unit of Work context,
allowing ORM objects to be converted to plain, immutable Python objects
that scorers can read from any thread after the session is closed.
"""

from dataclasses import dataclass
from datetime import date
from typing import Any, Optional, Tuple


def _as_tuple(values: Any) -> Tuple[str, ...]:
    if not values:
        return ()
    return tuple(str(v) for v in values if v is not None)


@dataclass(frozen=True)
class GigProfile:
    """Snapshot of a gig taken at the start of a match run."""
    id: int
    title: str
    description: str = ""
    category: str = ""
    required_skills: Tuple[str, ...] = ()
    location: str = ""
    is_remote: bool = False
    min_budget: Optional[float] = None
    max_budget: Optional[float] = None
    style_preferences: Tuple[str, ...] = ()
    additional_requirements: str = ""
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    duration_days: Optional[int] = None
    urgency_level: str = "medium"
    status: str = "open"
    client_id: Optional[int] = None

    @classmethod
    def from_orm(cls, gig: Any) -> "GigProfile":
        return cls(
            id=gig.id,
            title=gig.title or "",
            description=gig.description or "",
            category=gig.category or "",
            required_skills=_as_tuple(gig.required_skills),
            location=gig.location or "",
            is_remote=bool(gig.is_remote),
            min_budget=gig.min_budget,
            max_budget=gig.max_budget,
            style_preferences=_as_tuple(gig.style_preferences),
            additional_requirements=gig.additional_requirements or "",
            start_date=gig.start_date,
            end_date=gig.end_date,
            duration_days=gig.duration_days,
            urgency_level=gig.urgency_level or "medium",
            status=gig.status or "open",
            client_id=gig.client_id,
        )


@dataclass(frozen=True)
class TalentProfile:
    """Snapshot of a candidate talent taken at the start of a match run."""
    id: int
    name: str
    city: str = ""
    categories: Tuple[str, ...] = ()
    skills: Tuple[str, ...] = ()
    experience_years: int = 0
    min_budget: Optional[float] = None
    max_budget: Optional[float] = None
    availability_status: str = "available"
    rating: float = 0.0
    total_projects: int = 0
    bio: str = ""
    portfolio_links: Tuple[str, ...] = ()
    instagram_handle: Optional[str] = None

    @classmethod
    def from_orm(cls, talent: Any) -> "TalentProfile":
        return cls(
            id=talent.id,
            name=talent.name or "",
            city=talent.city or "",
            categories=_as_tuple(talent.categories),
            skills=_as_tuple(talent.skills),
            experience_years=talent.experience_years or 0,
            min_budget=talent.min_budget,
            max_budget=talent.max_budget,
            availability_status=talent.availability_status or "",
            rating=float(talent.rating or 0),
            total_projects=talent.total_projects or 0,
            bio=talent.bio or "",
            portfolio_links=_as_tuple(talent.portfolio_links),
            instagram_handle=talent.instagram_handle,
        )

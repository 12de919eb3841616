#!/usr/bin/env python3
"""
Request models for matching service operations.

Validated before anything reaches the scoring core.
"""

from typing import Literal, Optional

from pydantic import BaseModel, Field

MatchStatus = Literal['suggested', 'contacted', 'accepted', 'rejected']


class FindMatchesRequest(BaseModel):
    """Request to rank talent for a gig."""
    gig_id: int = Field(gt=0, description="Gig to match")
    limit: int = Field(default=10, ge=1, le=50, description="Maximum matches to return (1-50)")


class GigLookupRequest(BaseModel):
    """Request addressing a single gig."""
    gig_id: int = Field(gt=0)


class FeedbackRequest(BaseModel):
    """Client feedback on a suggested match."""
    match_id: int = Field(gt=0)
    rating: int = Field(ge=1, le=5, description="Rating 1-5")
    feedback: Optional[str] = Field(None, max_length=1000)


class MatchStatusUpdate(BaseModel):
    """Move a match through its outreach lifecycle."""
    match_id: int = Field(gt=0)
    status: MatchStatus

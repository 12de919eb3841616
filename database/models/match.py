from sqlalchemy import Column, Text, TIMESTAMP, ForeignKey, Integer, Numeric, UniqueConstraint, Index, CheckConstraint, func
from sqlalchemy.orm import relationship

from .base import Base

MATCH_STATUSES = ('suggested', 'contacted', 'accepted', 'rejected')


class Match(Base):
    """
    Stores a ranked pairing between a gig and a talent.

    The whole set of rows for a gig is replaced every time matching is
    re-run for it, so rows carry no history.
    """
    __tablename__ = 'matches'

    id = Column(Integer, primary_key=True, autoincrement=True)
    gig_id = Column(Integer, ForeignKey('gigs.id', ondelete='CASCADE'), nullable=False)
    talent_id = Column(Integer, ForeignKey('talents.id', ondelete='CASCADE'), nullable=False)

    # Fractions in [0, 1], 3 decimal places
    overall_score = Column(Numeric(5, 3), nullable=False)
    skill_score = Column(Numeric(5, 3))
    location_score = Column(Numeric(5, 3))
    budget_score = Column(Numeric(5, 3))
    experience_score = Column(Numeric(5, 3))
    availability_score = Column(Numeric(5, 3))
    semantic_score = Column(Numeric(5, 3))

    explanation = Column(Text)
    status = Column(Text, nullable=False, default='suggested')
    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())

    gig = relationship("Gig", back_populates="matches")
    talent = relationship("Talent", back_populates="matches")
    feedback = relationship("MatchFeedback", back_populates="match", uselist=False, cascade="all, delete-orphan")

    __table_args__ = (
        UniqueConstraint('gig_id', 'talent_id', name='uq_matches_gig_talent'),
        Index('idx_matches_gig_id', 'gig_id'),
        Index('idx_matches_talent_id', 'talent_id'),
        Index('idx_matches_score', 'overall_score'),
        CheckConstraint(
            "status IN (" + ", ".join(f"'{s}'" for s in MATCH_STATUSES) + ")",
            name='ck_matches_status'
        ),
    )


class MatchFeedback(Base):
    """Client rating of a suggested match, one per match."""
    __tablename__ = 'feedback'

    id = Column(Integer, primary_key=True, autoincrement=True)
    match_id = Column(Integer, ForeignKey('matches.id', ondelete='CASCADE'), nullable=False, unique=True)
    client_id = Column(Integer, ForeignKey('clients.id', ondelete='SET NULL'), nullable=True)
    rating = Column(Integer, nullable=False)
    feedback_text = Column(Text)
    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())

    match = relationship("Match", back_populates="feedback")

    __table_args__ = (
        CheckConstraint('rating >= 1 AND rating <= 5', name='ck_feedback_rating'),
    )

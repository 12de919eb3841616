from sqlalchemy import Column, Integer, Text, TIMESTAMP, ForeignKey, Boolean, Date, Index, func
from sqlalchemy.orm import relationship

from .base import Base, JSONList


class Gig(Base):
    """
    A creative project posting that talent is matched against.

    Budget bounds are optional; a missing bound means the range is
    open on that side.
    """
    __tablename__ = 'gigs'

    id = Column(Integer, primary_key=True, autoincrement=True)
    client_id = Column(Integer, ForeignKey('clients.id', ondelete='SET NULL'), nullable=True)

    title = Column(Text, nullable=False)
    description = Column(Text, nullable=False)
    category = Column(Text, nullable=False)
    required_skills = Column(JSONList, nullable=False, default=list)

    location = Column(Text)
    is_remote = Column(Boolean, nullable=False, default=False)

    start_date = Column(Date)
    end_date = Column(Date)
    duration_days = Column(Integer)

    min_budget = Column(Integer)
    max_budget = Column(Integer)

    style_preferences = Column(JSONList, default=list)
    additional_requirements = Column(Text)

    status = Column(Text, nullable=False, default='open')  # open|closed|...
    urgency_level = Column(Text, nullable=False, default='medium')  # low|medium|high|urgent

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())

    client = relationship("Client", back_populates="gigs")
    matches = relationship("Match", back_populates="gig", cascade="all, delete-orphan")

    __table_args__ = (
        Index('idx_gigs_category', 'category'),
        Index('idx_gigs_status', 'status'),
    )

from sqlalchemy import Column, Integer, Text, TIMESTAMP, Numeric, Index, func
from sqlalchemy.orm import relationship

from .base import Base, JSONList


class Talent(Base):
    """
    Freelance professional profile.

    Only rows with availability_status == 'available' enter the
    candidate pool for matching.
    """
    __tablename__ = 'talents'

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)
    email = Column(Text, nullable=False, unique=True)
    phone = Column(Text)
    city = Column(Text, nullable=False)

    categories = Column(JSONList, nullable=False, default=list)
    skills = Column(JSONList, nullable=False, default=list)
    experience_years = Column(Integer, nullable=False, default=0)

    min_budget = Column(Integer)
    max_budget = Column(Integer)

    portfolio_links = Column(JSONList, default=list)
    bio = Column(Text)
    instagram_handle = Column(Text)
    linkedin_url = Column(Text)
    website_url = Column(Text)

    availability_status = Column(Text, nullable=False, default='available')  # available|partially_available|busy|unavailable
    rating = Column(Numeric(3, 2), nullable=False, default=0)  # 0.00-5.00, 0 = unrated
    total_projects = Column(Integer, nullable=False, default=0)

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())

    matches = relationship("Match", back_populates="talent", cascade="all, delete-orphan")

    __table_args__ = (
        Index('idx_talents_city', 'city'),
        Index('idx_talents_availability', 'availability_status'),
    )

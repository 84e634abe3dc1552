from sqlalchemy import Column, Integer, String, Date, Text, DateTime, ForeignKey
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
import enum
from app.database import Base

class ReviewType(str, enum.Enum):
    QUARTERLY = "quarterly"
    ANNUAL = "annual"

class PerformanceReview(Base):
    """A quarterly or annual check-in."""
    __tablename__ = "performance_reviews"

    id = Column(Integer, primary_key=True, index=True)
    team_member_id = Column(Integer, ForeignKey("team_members.id", ondelete="CASCADE"), nullable=False, index=True)
    type = Column(String, nullable=False, index=True)  # ReviewType value
    review_date = Column(Date, nullable=False, index=True)
    quarter = Column(String, nullable=True)  # "Q1".."Q4", quarterly only
    year = Column(Integer, nullable=True)  # quarterly only
    strengths = Column(Text)
    areas_for_improvement = Column(Text)
    goals = Column(Text)
    overall_rating = Column(Integer, nullable=True)  # 1-5
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    team_member = relationship("TeamMember", back_populates="performance_reviews")

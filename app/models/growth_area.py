from sqlalchemy import Column, Integer, String, Date, Text, Boolean, DateTime, ForeignKey
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from app.database import Base

class GrowthArea(Base):
    __tablename__ = "growth_areas"

    id = Column(Integer, primary_key=True, index=True)
    team_member_id = Column(Integer, ForeignKey("team_members.id", ondelete="CASCADE"), nullable=False, index=True)
    skill_id = Column(Integer, ForeignKey("maturity_skills.id"), nullable=False)
    quarter = Column(String, nullable=True)  # e.g. "Q3 2024"
    rating = Column(Integer, default=3)  # 1-5 progress rating
    leader_comments = Column(Text, nullable=True)
    start_date = Column(Date, nullable=True)
    end_date = Column(Date, nullable=True)
    is_active = Column(Boolean, default=True, nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    team_member = relationship("TeamMember", back_populates="growth_areas")
    skill = relationship("Skill")

from sqlalchemy import Column, Integer, Text, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from app.database import Base

class SkillAssessment(Base):
    __tablename__ = "maturity_assessments"
    __table_args__ = (UniqueConstraint("team_member_id", "skill_id", name="uq_assessment_member_skill"),)

    id = Column(Integer, primary_key=True, index=True)
    team_member_id = Column(Integer, ForeignKey("team_members.id", ondelete="CASCADE"), nullable=False, index=True)
    skill_id = Column(Integer, ForeignKey("maturity_skills.id", ondelete="CASCADE"), nullable=False, index=True)
    leader_rating = Column(Integer, ForeignKey("levels.id"), nullable=True)  # Level id, null = not rated
    self_rating = Column(Integer, ForeignKey("levels.id"), nullable=True)
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    team_member = relationship("TeamMember", back_populates="skill_assessments")
    skill = relationship("Skill")

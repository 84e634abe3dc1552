"""
Team member model.
A direct report tracked by a manager; anchor for every cadence and maturity record.
"""
from sqlalchemy import Column, Integer, String, Date, DateTime, ForeignKey
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
import enum
from app.database import Base


class MemberStatus(str, enum.Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"


class TeamMember(Base):
    __tablename__ = "team_members"

    id = Column(Integer, primary_key=True, index=True)
    full_name = Column(String, nullable=False, index=True)
    email = Column(String, unique=True, index=True, nullable=False)
    role = Column(String, nullable=True)  # Job title, free text
    role_id = Column(Integer, ForeignKey("roles.id", ondelete="SET NULL"), nullable=True, index=True)
    start_date = Column(Date, nullable=True)  # Anchor for the annual check-in
    current_level = Column(String, nullable=True)  # MaturityLevel value
    status = Column(String, default=MemberStatus.ACTIVE.value, nullable=False, index=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    one_on_ones = relationship("OneOnOne", back_populates="team_member", cascade="all, delete-orphan")
    performance_reviews = relationship("PerformanceReview", back_populates="team_member", cascade="all, delete-orphan")
    skill_assessments = relationship("SkillAssessment", back_populates="team_member", cascade="all, delete-orphan")
    growth_areas = relationship("GrowthArea", back_populates="team_member", cascade="all, delete-orphan")
    kras = relationship("KRA", back_populates="team_member", cascade="all, delete-orphan")
    job_role = relationship("Role")

    def __repr__(self):
        return f"<TeamMember {self.full_name} ({self.current_level})>"

    @property
    def is_active(self) -> bool:
        return self.status == MemberStatus.ACTIVE.value

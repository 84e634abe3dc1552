"""
Key Result Area: what a member owns for a period, broken into 3-5 key
responsibilities. Only one KRA per member is active at a time.
"""
from sqlalchemy import Column, Integer, String, Date, Text, Boolean, DateTime, ForeignKey, JSON
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from app.database import Base

class KRA(Base):
    __tablename__ = "kras"

    id = Column(Integer, primary_key=True, index=True)
    team_member_id = Column(Integer, ForeignKey("team_members.id", ondelete="CASCADE"), nullable=False, index=True)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    # [{"responsibility": str, "winning_looks_like": str, "what_it_takes": [str, ...]}]
    key_responsibilities = Column(JSON, nullable=False, default=list)
    success_metrics = Column(JSON, nullable=False, default=list)
    is_active = Column(Boolean, default=True, nullable=False, index=True)
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=True)

    # Follow-up checklist
    leader_alignment = Column(Boolean, default=False, nullable=False)
    uploaded_to_hris = Column(Boolean, default=False, nullable=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    team_member = relationship("TeamMember", back_populates="kras")

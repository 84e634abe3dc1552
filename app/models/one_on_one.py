from sqlalchemy import Column, Integer, String, Date, Text, DateTime, ForeignKey
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from app.database import Base

class OneOnOne(Base):
    __tablename__ = "one_on_ones"

    id = Column(Integer, primary_key=True, index=True)
    team_member_id = Column(Integer, ForeignKey("team_members.id", ondelete="CASCADE"), nullable=False, index=True)
    meeting_date = Column(Date, nullable=False, index=True)  # May be in the future when scheduled
    notes = Column(Text, nullable=True)
    action_items = Column(Text, nullable=True)
    mood = Column(String, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    team_member = relationship("TeamMember", back_populates="one_on_ones")

from pydantic import BaseModel, ConfigDict, Field, model_validator
from datetime import date, datetime
from typing import Optional

from app.models.performance_review import ReviewType


class OneOnOneCreate(BaseModel):
    team_member_id: int
    meeting_date: date
    notes: Optional[str] = None
    action_items: Optional[str] = None
    mood: Optional[str] = None


class OneOnOneResponse(OneOnOneCreate):
    model_config = ConfigDict(from_attributes=True)

    id: int
    created_at: Optional[datetime] = None


class CheckInCreate(BaseModel):
    team_member_id: int
    type: ReviewType
    review_date: date
    quarter: Optional[str] = Field(None, pattern=r"^Q[1-4]$")
    year: Optional[int] = Field(None, ge=2000, le=2100)
    strengths: Optional[str] = None
    areas_for_improvement: Optional[str] = None
    goals: Optional[str] = None
    overall_rating: Optional[int] = Field(None, ge=1, le=5)

    @model_validator(mode="after")
    def annual_has_no_quarter(self):
        if self.type == ReviewType.ANNUAL and (self.quarter or self.year):
            raise ValueError("quarter and year apply to quarterly check-ins only")
        return self


class CheckInResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    team_member_id: int
    type: str
    review_date: date
    quarter: Optional[str] = None
    year: Optional[int] = None
    strengths: Optional[str] = None
    areas_for_improvement: Optional[str] = None
    goals: Optional[str] = None
    overall_rating: Optional[int] = None
    created_at: Optional[datetime] = None

from pydantic import BaseModel, ConfigDict, Field, field_validator
from datetime import date, datetime
from typing import Optional


class GrowthAreaCreate(BaseModel):
    skill_id: int
    quarter: Optional[str] = None  # defaults to the current quarter, e.g. "Q3 2024"
    rating: int = Field(3, ge=1, le=5)
    leader_comments: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    is_active: bool = True


class GrowthAreaUpdate(BaseModel):
    skill_id: Optional[int] = None
    quarter: Optional[str] = None
    rating: Optional[int] = Field(None, ge=1, le=5)
    leader_comments: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    is_active: Optional[bool] = None

    @field_validator("skill_id", "is_active")
    @classmethod
    def not_null(cls, value):
        if value is None:
            raise ValueError("may be omitted but not null")
        return value


class GrowthAreaResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    team_member_id: int
    skill_id: int
    quarter: Optional[str] = None
    rating: Optional[int] = None
    leader_comments: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    is_active: bool
    created_at: Optional[datetime] = None

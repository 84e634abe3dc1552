from pydantic import BaseModel, ConfigDict, Field, field_validator
from datetime import date, datetime
from typing import Optional

from app.models.team_member import MemberStatus
from app.services.levels import MaturityLevel

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+$"


class TeamMemberBase(BaseModel):
    full_name: str = Field(..., min_length=1, max_length=120)
    email: str = Field(..., min_length=3, max_length=254, pattern=EMAIL_PATTERN)
    role: Optional[str] = None
    role_id: Optional[int] = None
    start_date: Optional[date] = None
    current_level: Optional[MaturityLevel] = None


class TeamMemberCreate(TeamMemberBase):
    status: MemberStatus = MemberStatus.ACTIVE


class TeamMemberUpdate(BaseModel):
    full_name: Optional[str] = Field(None, min_length=1, max_length=120)
    email: Optional[str] = Field(None, min_length=3, max_length=254, pattern=EMAIL_PATTERN)
    role: Optional[str] = None
    role_id: Optional[int] = None
    start_date: Optional[date] = None
    current_level: Optional[MaturityLevel] = None
    status: Optional[MemberStatus] = None

    @field_validator("full_name", "email", "status")
    @classmethod
    def not_null(cls, value):
        # Omit the field to leave it unchanged; these columns cannot be cleared
        if value is None:
            raise ValueError("may be omitted but not null")
        return value


class TeamMemberResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    full_name: str
    email: str
    role: Optional[str] = None
    role_id: Optional[int] = None
    start_date: Optional[date] = None
    # Stored as free text; legacy rows may hold names outside MaturityLevel
    current_level: Optional[str] = None
    status: str
    created_at: Optional[datetime] = None

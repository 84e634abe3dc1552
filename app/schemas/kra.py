from pydantic import BaseModel, ConfigDict, Field, field_validator
from datetime import date, datetime
from typing import List, Optional

MIN_KEY_RESPONSIBILITIES = 3
MAX_KEY_RESPONSIBILITIES = 5
MIN_WHAT_IT_TAKES = 2


def _not_blank(value: str) -> str:
    value = value.strip()
    if not value:
        raise ValueError("must not be blank")
    return value


class KeyResponsibility(BaseModel):
    responsibility: str
    winning_looks_like: str
    what_it_takes: List[str] = Field(..., min_length=MIN_WHAT_IT_TAKES)

    @field_validator("responsibility", "winning_looks_like")
    @classmethod
    def text_not_blank(cls, value: str) -> str:
        return _not_blank(value)

    @field_validator("what_it_takes")
    @classmethod
    def entries_not_blank(cls, value: List[str]) -> List[str]:
        return [_not_blank(item) for item in value]


class KRACreate(BaseModel):
    title: str = Field(..., max_length=200)
    description: Optional[str] = None
    key_responsibilities: List[KeyResponsibility] = Field(
        ..., min_length=MIN_KEY_RESPONSIBILITIES, max_length=MAX_KEY_RESPONSIBILITIES
    )
    success_metrics: List[str] = []
    start_date: date
    end_date: Optional[date] = None
    leader_alignment: bool = False
    uploaded_to_hris: bool = False

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, value: str) -> str:
        return _not_blank(value)


class KRAUpdate(BaseModel):
    title: Optional[str] = Field(None, max_length=200)
    description: Optional[str] = None
    key_responsibilities: Optional[List[KeyResponsibility]] = Field(
        None, min_length=MIN_KEY_RESPONSIBILITIES, max_length=MAX_KEY_RESPONSIBILITIES
    )
    success_metrics: Optional[List[str]] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    is_active: Optional[bool] = None
    leader_alignment: Optional[bool] = None
    uploaded_to_hris: Optional[bool] = None

    @field_validator(
        "title", "key_responsibilities", "start_date", "is_active", "leader_alignment", "uploaded_to_hris"
    )
    @classmethod
    def not_null(cls, value):
        if value is None:
            raise ValueError("may be omitted but not null")
        return _not_blank(value) if isinstance(value, str) else value


class KRAResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    team_member_id: int
    title: str
    description: Optional[str] = None
    key_responsibilities: List[KeyResponsibility]
    success_metrics: List[str] = []
    is_active: bool
    start_date: date
    end_date: Optional[date] = None
    leader_alignment: bool
    uploaded_to_hris: bool
    created_at: Optional[datetime] = None

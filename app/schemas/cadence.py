from pydantic import BaseModel
from datetime import date
from typing import List, Optional
import enum


class CadenceStatus(str, enum.Enum):
    OVERDUE = "overdue"
    DUE_SOON = "due-soon"
    CURRENT = "current"


class MemberCadence(BaseModel):
    """Compliance row for one team member across the three cadence tracks."""
    member_id: int
    member_name: str
    start_date: Optional[date] = None
    one_on_one_status: CadenceStatus
    one_on_one_last_date: Optional[date] = None
    quarterly_status: CadenceStatus
    quarterly_last_date: Optional[date] = None
    annual_status: CadenceStatus
    annual_last_date: Optional[date] = None
    annual_expected_date: Optional[date] = None

    @property
    def statuses(self) -> List[CadenceStatus]:
        return [self.one_on_one_status, self.quarterly_status, self.annual_status]


class TrackCounts(BaseModel):
    overdue: int = 0
    due_soon: int = 0
    current: int = 0


class CadenceSummary(BaseModel):
    as_of: date
    total_members: int
    one_on_one: TrackCounts
    quarterly: TrackCounts
    annual: TrackCounts
    members_needing_attention: List[int]

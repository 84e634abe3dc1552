from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import List, Optional
from datetime import date

from app.core.schemas import ApiResponse
from app.database import get_db
from app.schemas.cadence import CadenceSummary, MemberCadence
from app.services.cadence import CadenceService

router = APIRouter(prefix="/cadence", tags=["Cadence Compliance"])

AsOf = Query(None, description="Evaluate as of this date instead of today")


@router.get("", response_model=ApiResponse[List[MemberCadence]])
def team_compliance(as_of: Optional[date] = AsOf, db: Session = Depends(get_db)):
    today = as_of or date.today()
    rows = CadenceService(db).team_compliance(today)
    return ApiResponse.ok(rows, metadata={"as_of": today.isoformat(), "count": len(rows)})


@router.get("/summary", response_model=ApiResponse[CadenceSummary])
def team_summary(as_of: Optional[date] = AsOf, db: Session = Depends(get_db)):
    return ApiResponse.ok(CadenceService(db).team_summary(as_of))


@router.get("/{member_id}", response_model=ApiResponse[MemberCadence])
def member_compliance(member_id: int, as_of: Optional[date] = AsOf, db: Session = Depends(get_db)):
    today = as_of or date.today()
    row = CadenceService(db).member_compliance(member_id, today)
    return ApiResponse.ok(row, metadata={"as_of": today.isoformat()})

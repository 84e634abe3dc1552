from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List, Optional

from app.database import get_db
from app.models.performance_review import ReviewType
from app.schemas.meetings import CheckInCreate, CheckInResponse, OneOnOneCreate, OneOnOneResponse
from app.services.meeting_service import MeetingService

router = APIRouter(tags=["Meetings"])

# --- 1:1s ---

@router.get("/one-on-ones", response_model=List[OneOnOneResponse])
def list_one_on_ones(team_member_id: Optional[int] = None, db: Session = Depends(get_db)):
    return MeetingService(db).list_one_on_ones(team_member_id)


@router.post("/one-on-ones", response_model=OneOnOneResponse, status_code=status.HTTP_201_CREATED)
def create_one_on_one(payload: OneOnOneCreate, db: Session = Depends(get_db)):
    return MeetingService(db).create_one_on_one(payload)


@router.delete("/one-on-ones/{meeting_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_one_on_one(meeting_id: int, db: Session = Depends(get_db)):
    MeetingService(db).delete_one_on_one(meeting_id)

# --- Check-ins ---

@router.get("/check-ins", response_model=List[CheckInResponse])
def list_check_ins(
    team_member_id: Optional[int] = None,
    type: Optional[ReviewType] = None,
    db: Session = Depends(get_db),
):
    return MeetingService(db).list_check_ins(team_member_id, type)


@router.post("/check-ins", response_model=CheckInResponse, status_code=status.HTTP_201_CREATED)
def create_check_in(payload: CheckInCreate, db: Session = Depends(get_db)):
    return MeetingService(db).create_check_in(payload)


@router.delete("/check-ins/{review_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_check_in(review_id: int, db: Session = Depends(get_db)):
    MeetingService(db).delete_check_in(review_id)

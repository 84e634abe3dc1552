from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List, Optional

from app.database import get_db
from app.models.team_member import MemberStatus
from app.schemas.team_member import TeamMemberCreate, TeamMemberResponse, TeamMemberUpdate
from app.services.team_service import TeamService

router = APIRouter(prefix="/team-members", tags=["Team Members"])


@router.get("", response_model=List[TeamMemberResponse])
def list_team_members(
    status: Optional[MemberStatus] = MemberStatus.ACTIVE,
    include_inactive: bool = False,
    db: Session = Depends(get_db),
):
    return TeamService(db).list_members(None if include_inactive else status)


@router.post("", response_model=TeamMemberResponse, status_code=status.HTTP_201_CREATED)
def create_team_member(payload: TeamMemberCreate, db: Session = Depends(get_db)):
    return TeamService(db).create_member(payload)


@router.get("/{member_id}", response_model=TeamMemberResponse)
def get_team_member(member_id: int, db: Session = Depends(get_db)):
    return TeamService(db).get_member(member_id)


@router.patch("/{member_id}", response_model=TeamMemberResponse)
def update_team_member(member_id: int, payload: TeamMemberUpdate, db: Session = Depends(get_db)):
    return TeamService(db).update_member(member_id, payload)


@router.delete("/{member_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_team_member(member_id: int, db: Session = Depends(get_db)):
    TeamService(db).delete_member(member_id)

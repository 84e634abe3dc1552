from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List

from app.database import get_db
from app.schemas.growth_area import GrowthAreaCreate, GrowthAreaResponse, GrowthAreaUpdate
from app.services.growth_area_service import GrowthAreaService

router = APIRouter(tags=["Growth Areas"])


@router.get("/team-members/{member_id}/growth-areas", response_model=List[GrowthAreaResponse])
def list_growth_areas(member_id: int, db: Session = Depends(get_db)):
    return GrowthAreaService(db).list_for_member(member_id)


@router.post(
    "/team-members/{member_id}/growth-areas",
    response_model=GrowthAreaResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_growth_area(member_id: int, payload: GrowthAreaCreate, db: Session = Depends(get_db)):
    return GrowthAreaService(db).create(member_id, payload)


@router.patch("/growth-areas/{area_id}", response_model=GrowthAreaResponse)
def update_growth_area(area_id: int, payload: GrowthAreaUpdate, db: Session = Depends(get_db)):
    return GrowthAreaService(db).update(area_id, payload)


@router.delete("/growth-areas/{area_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_growth_area(area_id: int, db: Session = Depends(get_db)):
    GrowthAreaService(db).delete(area_id)

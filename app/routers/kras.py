from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List

from app.database import get_db
from app.schemas.kra import KRACreate, KRAResponse, KRAUpdate
from app.services.kra_service import KRAService

router = APIRouter(tags=["Key Result Areas"])


@router.get("/team-members/{member_id}/kras", response_model=List[KRAResponse])
def list_kras(member_id: int, db: Session = Depends(get_db)):
    return KRAService(db).list_for_member(member_id)


@router.post("/team-members/{member_id}/kras", response_model=KRAResponse, status_code=status.HTTP_201_CREATED)
def create_kra(member_id: int, payload: KRACreate, db: Session = Depends(get_db)):
    return KRAService(db).create(member_id, payload)


@router.get("/kras/{kra_id}", response_model=KRAResponse)
def get_kra(kra_id: int, db: Session = Depends(get_db)):
    return KRAService(db).get(kra_id)


@router.patch("/kras/{kra_id}", response_model=KRAResponse)
def update_kra(kra_id: int, payload: KRAUpdate, db: Session = Depends(get_db)):
    return KRAService(db).update(kra_id, payload)


@router.delete("/kras/{kra_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_kra(kra_id: int, db: Session = Depends(get_db)):
    KRAService(db).delete(kra_id)

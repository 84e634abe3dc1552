from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List

from app.core.schemas import ApiResponse
from app.database import get_db
from app.schemas.maturity import (
    AssessmentResponse,
    AssessmentUpsert,
    CategoryCreate,
    CategoryResponse,
    LevelCreate,
    LevelResponse,
    MaturityModelCreate,
    MaturityModelResponse,
    MaturityReport,
    RoleCreate,
    RoleResponse,
    SkillCreate,
    SkillResponse,
)
from app.services.maturity import MaturityService

router = APIRouter(prefix="/maturity", tags=["Maturity Model"])

# --- Reference data ---

@router.get("/levels", response_model=List[LevelResponse])
def list_levels(db: Session = Depends(get_db)):
    return MaturityService(db).list_levels()


@router.post("/levels", response_model=LevelResponse, status_code=status.HTTP_201_CREATED)
def create_level(payload: LevelCreate, db: Session = Depends(get_db)):
    return MaturityService(db).create_level(payload)


@router.get("/categories", response_model=List[CategoryResponse])
def list_categories(db: Session = Depends(get_db)):
    return MaturityService(db).list_categories()


@router.post("/categories", response_model=CategoryResponse, status_code=status.HTTP_201_CREATED)
def create_category(payload: CategoryCreate, db: Session = Depends(get_db)):
    return MaturityService(db).create_category(payload)


@router.get("/skills", response_model=List[SkillResponse])
def list_skills(db: Session = Depends(get_db)):
    return MaturityService(db).list_skills()


@router.post("/skills", response_model=SkillResponse, status_code=status.HTTP_201_CREATED)
def create_skill(payload: SkillCreate, db: Session = Depends(get_db)):
    return MaturityService(db).create_skill(payload)


@router.get("/models", response_model=List[MaturityModelResponse])
def list_models(db: Session = Depends(get_db)):
    return MaturityService(db).list_models()


@router.post("/models", response_model=MaturityModelResponse, status_code=status.HTTP_201_CREATED)
def create_model(payload: MaturityModelCreate, db: Session = Depends(get_db)):
    return MaturityService(db).create_model(payload)


@router.get("/roles", response_model=List[RoleResponse])
def list_roles(db: Session = Depends(get_db)):
    return MaturityService(db).list_roles()


@router.post("/roles", response_model=RoleResponse, status_code=status.HTTP_201_CREATED)
def create_role(payload: RoleCreate, db: Session = Depends(get_db)):
    return MaturityService(db).create_role(payload)

# --- Member assessments ---

@router.get("/{member_id}/assessments", response_model=List[AssessmentResponse])
def get_assessments(member_id: int, db: Session = Depends(get_db)):
    return MaturityService(db).get_assessments(member_id)


@router.put("/{member_id}/assessments", response_model=List[AssessmentResponse])
def save_assessments(member_id: int, payload: List[AssessmentUpsert], db: Session = Depends(get_db)):
    return MaturityService(db).upsert_assessments(member_id, payload)


@router.get("/{member_id}/report", response_model=ApiResponse[MaturityReport])
def maturity_report(member_id: int, db: Session = Depends(get_db)):
    return ApiResponse.ok(MaturityService(db).report(member_id))

from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime
from typing import List, Optional
import enum

from app.services.levels import MaturityLevel


class GrowthStatus(str, enum.Enum):
    NEEDS_COACHING = "needs-coaching"
    ON_TRACK = "on-track"
    PROMOTION_READY = "promotion-ready"


# --- Scoring results ---

class CategoryScore(BaseModel):
    category_id: int
    category_name: Optional[str] = None
    avg_score: float
    level_name: MaturityLevel
    skills_rated: int


class AverageCategoryScore(BaseModel):
    avg_score: float
    level_name: MaturityLevel
    categories_rated: int


class ScoredSkill(BaseModel):
    skill_id: int
    skill_name: str = ""
    leader_score: int
    self_score: int
    leader_level_name: str = "Not Rated"
    self_level_name: str = "Not Rated"


class OverallScores(BaseModel):
    avg_leader_score: float
    avg_self_score: float
    leader_level: MaturityLevel
    self_level: MaturityLevel
    strengths: List[ScoredSkill]
    growth_opportunities: List[ScoredSkill]
    total_skills_rated: int


class GrowthIndicator(BaseModel):
    status: GrowthStatus
    label: str
    description: str


class MaturityReport(BaseModel):
    team_member_id: int
    current_level: Optional[str] = None
    # Categories come from the model assigned to the member's role
    maturity_model_id: Optional[int] = None
    maturity_model_name: Optional[str] = None
    category_scores: List[CategoryScore]
    average_category_score: Optional[AverageCategoryScore] = None
    overall: OverallScores
    gap_skill_ids: List[int]
    growth_indicator: Optional[GrowthIndicator] = None


# --- Reference data ---

class LevelCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=50)
    display_order: int = 0


class LevelResponse(LevelCreate):
    model_config = ConfigDict(from_attributes=True)

    id: int


class CategoryCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = None
    display_order: int = 0


class CategoryResponse(CategoryCreate):
    model_config = ConfigDict(from_attributes=True)

    id: int
    skill_ids: List[int] = []


class SkillLevelDescription(BaseModel):
    level_id: int
    description: Optional[str] = None


class SkillLevelResponse(SkillLevelDescription):
    model_config = ConfigDict(from_attributes=True)

    level_name: Optional[str] = None
    display_order: int = 0


class SkillCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=150)
    description: Optional[str] = None
    category_ids: List[int] = []
    levels: List[SkillLevelDescription] = []


class SkillResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: Optional[str] = None
    category_ids: List[int] = []
    levels: List[SkillLevelResponse] = []


class MaturityModelCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = None
    category_ids: List[int] = []  # in display order


class MaturityModelResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: Optional[str] = None
    category_ids: List[int] = []


class RoleCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = None
    maturity_model_id: Optional[int] = None


class RoleResponse(RoleCreate):
    model_config = ConfigDict(from_attributes=True)

    id: int


# --- Assessments ---

class AssessmentUpsert(BaseModel):
    skill_id: int
    leader_rating: Optional[int] = None
    self_rating: Optional[int] = None
    notes: Optional[str] = None


class AssessmentResponse(AssessmentUpsert):
    model_config = ConfigDict(from_attributes=True)

    id: int
    team_member_id: int
    updated_at: Optional[datetime] = None

# Models package
# Importing modules here ensures they are registered with SQLAlchemy Base
from . import (
    team_member, one_on_one, performance_review,
    maturity, skill_assessment, growth_area, kra
)

# Explicit class exports for cleaner imports
from .team_member import TeamMember, MemberStatus
from .one_on_one import OneOnOne
from .performance_review import PerformanceReview, ReviewType
from .maturity import (
    Level, Category, Skill, CategorySkill, SkillLevel,
    MaturityModel, MaturityModelCategory, Role,
)
from .skill_assessment import SkillAssessment
from .growth_area import GrowthArea
from .kra import KRA

__all__ = [
    "TeamMember",
    "MemberStatus",
    "OneOnOne",
    "PerformanceReview",
    "ReviewType",
    "Level",
    "Category",
    "Skill",
    "CategorySkill",
    "SkillLevel",
    "MaturityModel",
    "MaturityModelCategory",
    "Role",
    "SkillAssessment",
    "GrowthArea",
    "KRA",
]

"""
Skill maturity scoring.

Leader and self ratings point at levels; each level name maps to a 0-4
score. Skills without a leader score are "not yet rated" rather than "rated
lowest", so they stay out of every average.
"""
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from sqlalchemy.orm import selectinload

from app.core.exceptions import InvalidReferenceError, NotFoundError
from app.models.maturity import (
    Category,
    CategorySkill,
    Level,
    MaturityModel,
    MaturityModelCategory,
    Role,
    Skill,
    SkillLevel,
)
from app.models.skill_assessment import SkillAssessment
from app.models.team_member import TeamMember
from app.schemas.maturity import (
    AssessmentUpsert,
    AverageCategoryScore,
    CategoryCreate,
    CategoryScore,
    GrowthIndicator,
    GrowthStatus,
    LevelCreate,
    MaturityModelCreate,
    MaturityReport,
    OverallScores,
    RoleCreate,
    ScoredSkill,
    SkillCreate,
)
from app.services.base import BaseService
from app.services.levels import LEVEL_RANGES, MaturityLevel, level_band, level_score, round_score

SIGNIFICANT_GAP = 2
STRENGTH_SCORE = 3
PROMOTION_MARGIN = 0.3

_INDICATOR_TEXT = {
    GrowthStatus.NEEDS_COACHING: ("Needs Coaching", "Below expected level range"),
    GrowthStatus.PROMOTION_READY: ("Promotion Ready", "Performing at or above level expectations"),
    GrowthStatus.ON_TRACK: ("On Track", "Meeting level expectations"),
}


def growth_indicator(current_level: Optional[str], avg_category_score: Optional[float]) -> Optional[GrowthIndicator]:
    """
    Compare the average category score with the range expected for the
    member's declared level. The level must name a MaturityLevel exactly;
    anything else, or a missing score, gives ``None``.
    """
    try:
        level = MaturityLevel(current_level)
    except ValueError:
        return None
    if avg_category_score is None:
        return None

    range_min, range_max = LEVEL_RANGES[level]
    rounded = round_score(avg_category_score)
    promotion_threshold = round_score(range_max - PROMOTION_MARGIN)

    if rounded < range_min:
        status = GrowthStatus.NEEDS_COACHING
    elif rounded >= promotion_threshold:
        status = GrowthStatus.PROMOTION_READY
    else:
        status = GrowthStatus.ON_TRACK

    label, description = _INDICATOR_TEXT[status]
    return GrowthIndicator(status=status, label=label, description=description)


def significant_gap(leader_score: int, self_score: int) -> bool:
    return abs(leader_score - self_score) >= SIGNIFICANT_GAP


class MaturityScorer:
    """
    Scores one member's assessments against the maturity model.

    Args:
        categories: ``(category_id, name)`` pairs in display order.
        category_skills: category id -> skill ids in that category.
        skill_levels: skill id -> {level id: level name} for the levels the
            skill is described at.
        assessments: objects with ``skill_id``, ``leader_rating`` and
            ``self_rating`` (level ids or ``None``).
        skill_names: optional skill id -> name, used in the overall view.
    """

    def __init__(
        self,
        categories: Sequence[Tuple[int, Optional[str]]],
        category_skills: Dict[int, List[int]],
        skill_levels: Dict[int, Dict[int, str]],
        assessments: Iterable,
        skill_names: Optional[Dict[int, str]] = None,
    ):
        self.categories = list(categories)
        self.category_skills = category_skills
        self.skill_levels = skill_levels
        self.skill_names = skill_names or {}
        # One assessment per skill
        self.assessments = {a.skill_id: a for a in assessments}

    def _level_name(self, skill_id: int, level_id: Optional[int]) -> Optional[str]:
        if level_id is None:
            return None
        return self.skill_levels.get(skill_id, {}).get(level_id)

    def score_skill(self, skill_id: int) -> ScoredSkill:
        assessment = self.assessments.get(skill_id)
        leader_name = self._level_name(skill_id, getattr(assessment, "leader_rating", None))
        self_name = self._level_name(skill_id, getattr(assessment, "self_rating", None))
        return ScoredSkill(
            skill_id=skill_id,
            skill_name=self.skill_names.get(skill_id, ""),
            leader_score=level_score(leader_name),
            self_score=level_score(self_name),
            leader_level_name=leader_name or "Not Rated",
            self_level_name=self_name or "Not Rated",
        )

    def category_score(self, category_id: int) -> Optional[CategoryScore]:
        skill_ids = self.category_skills.get(category_id, [])
        scores = [
            self.score_skill(skill_id).leader_score
            for skill_id in skill_ids
            if skill_id in self.assessments
        ]
        scores = [score for score in scores if score > 0]
        if not scores:
            return None

        avg_score = sum(scores) / len(scores)
        return CategoryScore(
            category_id=category_id,
            category_name=dict(self.categories).get(category_id),
            avg_score=avg_score,
            level_name=level_band(avg_score),
            skills_rated=len(scores),
        )

    def category_scores(self) -> List[CategoryScore]:
        scores = (self.category_score(category_id) for category_id, _ in self.categories)
        return [score for score in scores if score is not None]

    def average_category_score(self) -> Optional[AverageCategoryScore]:
        """Mean of the category averages, so a large category does not dominate."""
        scores = self.category_scores()
        if not scores:
            return None
        avg_score = sum(s.avg_score for s in scores) / len(scores)
        return AverageCategoryScore(
            avg_score=avg_score,
            level_name=level_band(avg_score),
            categories_rated=len(scores),
        )

    def overall_scores(self) -> OverallScores:
        """Flat leader and self averages over every skill rated by either side."""
        scored = [self.score_skill(skill_id) for skill_id in self.assessments]
        scored = [s for s in scored if s.leader_score > 0 or s.self_score > 0]
        count = len(scored)

        avg_leader = sum(s.leader_score for s in scored) / count if count else 0.0
        avg_self = sum(s.self_score for s in scored) / count if count else 0.0

        return OverallScores(
            avg_leader_score=avg_leader,
            avg_self_score=avg_self,
            leader_level=level_band(avg_leader),
            self_level=level_band(avg_self),
            strengths=sorted(
                (s for s in scored if s.leader_score >= STRENGTH_SCORE),
                key=lambda s: s.leader_score,
                reverse=True,
            ),
            growth_opportunities=sorted(
                (s for s in scored if s.leader_score < STRENGTH_SCORE),
                key=lambda s: s.leader_score,
            ),
            total_skills_rated=count,
        )

    def has_significant_gap(self, skill_id: int) -> bool:
        assessment = self.assessments.get(skill_id)
        if assessment is None or assessment.leader_rating is None or assessment.self_rating is None:
            return False
        scored = self.score_skill(skill_id)
        return significant_gap(scored.leader_score, scored.self_score)

    def gap_skill_ids(self) -> List[int]:
        return [skill_id for skill_id in self.assessments if self.has_significant_gap(skill_id)]

    def growth_indicator(self, current_level: Optional[str]) -> Optional[GrowthIndicator]:
        average = self.average_category_score()
        return growth_indicator(current_level, average.avg_score if average else None)


class MaturityService(BaseService):
    """Reference data, assessment storage and report assembly for the maturity model."""

    # --- Reference data ---

    def list_levels(self) -> List[Level]:
        return self.db.query(Level).order_by(Level.display_order, Level.id).all()

    def create_level(self, payload: LevelCreate) -> Level:
        if MaturityLevel.from_name(payload.name) is None:
            self.log_warning(f"Level '{payload.name}' does not map to a maturity score and will score 0")
        level = Level(name=payload.name, display_order=payload.display_order)
        self.db.add(level)
        self.commit()
        self.db.refresh(level)
        return level

    def list_categories(self) -> List[Category]:
        return (
            self.db.query(Category)
            .options(selectinload(Category.skill_links))
            .order_by(Category.display_order, Category.id)
            .all()
        )

    def create_category(self, payload: CategoryCreate) -> Category:
        category = Category(**payload.model_dump())
        self.db.add(category)
        self.commit()
        self.db.refresh(category)
        return category

    def list_skills(self) -> List[Skill]:
        return (
            self.db.query(Skill)
            .options(selectinload(Skill.levels).selectinload(SkillLevel.level), selectinload(Skill.category_links))
            .order_by(Skill.id)
            .all()
        )

    def create_skill(self, payload: SkillCreate) -> Skill:
        category_ids = set(payload.category_ids)
        found = {c.id for c in self.db.query(Category).filter(Category.id.in_(category_ids))} if category_ids else set()
        if found != category_ids:
            raise InvalidReferenceError("Unknown category", {"category_ids": sorted(category_ids - found)})

        levels = {l.id: l for l in self.db.query(Level).all()}
        unknown_levels = [item.level_id for item in payload.levels if item.level_id not in levels]
        if unknown_levels:
            raise InvalidReferenceError("Unknown level", {"level_ids": unknown_levels})

        skill = Skill(name=payload.name, description=payload.description)
        for category_id in payload.category_ids:
            position = self.db.query(CategorySkill).filter(CategorySkill.category_id == category_id).count()
            skill.category_links.append(CategorySkill(category_id=category_id, display_order=position))
        for item in payload.levels:
            skill.levels.append(
                SkillLevel(
                    level_id=item.level_id,
                    description=item.description,
                    display_order=levels[item.level_id].display_order,
                )
            )
        self.db.add(skill)
        self.commit()
        self.db.refresh(skill)
        return skill

    def list_models(self) -> List[MaturityModel]:
        return (
            self.db.query(MaturityModel)
            .options(selectinload(MaturityModel.category_links))
            .order_by(MaturityModel.name)
            .all()
        )

    def create_model(self, payload: MaturityModelCreate) -> MaturityModel:
        category_ids = list(dict.fromkeys(payload.category_ids))
        found = {c.id for c in self.db.query(Category).filter(Category.id.in_(category_ids))} if category_ids else set()
        missing = [category_id for category_id in category_ids if category_id not in found]
        if missing:
            raise InvalidReferenceError("Unknown category", {"category_ids": missing})

        model = MaturityModel(name=payload.name, description=payload.description)
        for position, category_id in enumerate(category_ids):
            model.category_links.append(MaturityModelCategory(category_id=category_id, display_order=position))
        self.db.add(model)
        self.commit()
        self.db.refresh(model)
        return model

    def list_roles(self) -> List[Role]:
        return self.db.query(Role).order_by(Role.name).all()

    def create_role(self, payload: RoleCreate) -> Role:
        if payload.maturity_model_id is not None and self.db.get(MaturityModel, payload.maturity_model_id) is None:
            raise InvalidReferenceError("Unknown maturity model", {"maturity_model_id": payload.maturity_model_id})
        role = Role(**payload.model_dump())
        self.db.add(role)
        self.commit()
        self.db.refresh(role)
        return role

    # --- Assessments ---

    def _member(self, member_id: int) -> TeamMember:
        member = self.db.get(TeamMember, member_id)
        if member is None:
            raise NotFoundError("Team member", member_id)
        return member

    def get_assessments(self, member_id: int) -> List[SkillAssessment]:
        self._member(member_id)
        return (
            self.db.query(SkillAssessment)
            .filter(SkillAssessment.team_member_id == member_id)
            .order_by(SkillAssessment.skill_id)
            .all()
        )

    def upsert_assessments(self, member_id: int, items: List[AssessmentUpsert]) -> List[SkillAssessment]:
        """Insert or update one assessment per (member, skill)."""
        self._member(member_id)
        skill_ids = {item.skill_id for item in items}
        skills = {
            s.id: s
            for s in self.db.query(Skill).options(selectinload(Skill.levels)).filter(Skill.id.in_(skill_ids))
        } if skill_ids else {}
        missing = sorted(skill_ids - set(skills))
        if missing:
            raise InvalidReferenceError("Unknown skill", {"skill_ids": missing})

        existing = {
            a.skill_id: a
            for a in self.db.query(SkillAssessment).filter(SkillAssessment.team_member_id == member_id)
        }
        for item in items:
            allowed = {sl.level_id for sl in skills[item.skill_id].levels}
            for rating in (item.leader_rating, item.self_rating):
                if rating is not None and rating not in allowed:
                    raise InvalidReferenceError(
                        "Rating does not match a level described for this skill",
                        {"skill_id": item.skill_id, "level_id": rating},
                    )

            assessment = existing.get(item.skill_id)
            if assessment is None:
                assessment = SkillAssessment(team_member_id=member_id, skill_id=item.skill_id)
                self.db.add(assessment)
                existing[item.skill_id] = assessment
            assessment.leader_rating = item.leader_rating
            assessment.self_rating = item.self_rating
            assessment.notes = item.notes

        self.commit()
        self.log_info(f"Saved {len(items)} assessments for team member {member_id}")
        return self.get_assessments(member_id)

    # --- Scoring ---

    def member_model(self, member: TeamMember) -> Optional[MaturityModel]:
        """The maturity model assigned to the member's role, if any."""
        role = member.job_role
        return role.maturity_model if role is not None else None

    def build_scorer(self, member: TeamMember) -> MaturityScorer:
        """
        Category views only cover the categories of the member's model; a member
        without a role or a role without a model has no category scores.
        """
        model = self.member_model(member)
        links = model.category_links if model is not None else []
        categories = (
            self.db.query(Category)
            .options(selectinload(Category.skill_links))
            .filter(Category.id.in_([link.category_id for link in links]))
            .all()
        ) if links else []
        by_id = {c.id: c for c in categories}

        skills = self.list_skills()
        return MaturityScorer(
            categories=[(link.category_id, by_id[link.category_id].name) for link in links],
            category_skills={c.id: c.skill_ids for c in categories},
            skill_levels={s.id: {sl.level_id: sl.level_name for sl in s.levels} for s in skills},
            assessments=self.get_assessments(member.id),
            skill_names={s.id: s.name for s in skills},
        )

    def report(self, member_id: int) -> MaturityReport:
        member = self._member(member_id)
        model = self.member_model(member)
        if model is None:
            self.log_info(f"Team member {member_id} has no maturity model; category scores omitted")
        scorer = self.build_scorer(member)
        return MaturityReport(
            team_member_id=member.id,
            current_level=member.current_level,
            maturity_model_id=model.id if model else None,
            maturity_model_name=model.name if model else None,
            category_scores=scorer.category_scores(),
            average_category_score=scorer.average_category_score(),
            overall=scorer.overall_scores(),
            gap_skill_ids=scorer.gap_skill_ids(),
            growth_indicator=scorer.growth_indicator(member.current_level),
        )

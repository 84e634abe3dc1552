from datetime import date
from typing import List, Optional

from app.core.config import settings
from app.core.exceptions import GrowthAreaLimitError, InvalidReferenceError, NotFoundError
from app.models.growth_area import GrowthArea
from app.models.maturity import Skill
from app.models.team_member import TeamMember
from app.schemas.growth_area import GrowthAreaCreate, GrowthAreaUpdate
from app.services.base import BaseService
from app.services.dates import quarter_end, quarter_label, quarter_of


class GrowthAreaService(BaseService):
    """Growth areas: skills a member is focusing on, capped per member while active."""

    def __init__(self, db, today: Optional[date] = None):
        super().__init__(db)
        self.today = today or date.today()
        self.limit = settings.max_active_growth_areas

    def list_for_member(self, member_id: int) -> List[GrowthArea]:
        self._require_member(member_id)
        return (
            self.db.query(GrowthArea)
            .filter(GrowthArea.team_member_id == member_id)
            .order_by(GrowthArea.is_active.desc(), GrowthArea.start_date.desc(), GrowthArea.id.desc())
            .all()
        )

    def active_count(self, member_id: int, exclude_id: Optional[int] = None) -> int:
        query = self.db.query(GrowthArea).filter(
            GrowthArea.team_member_id == member_id,
            GrowthArea.is_active.is_(True),
        )
        if exclude_id is not None:
            query = query.filter(GrowthArea.id != exclude_id)
        return query.count()

    def create(self, member_id: int, payload: GrowthAreaCreate) -> GrowthArea:
        self._require_member(member_id)
        self._require_skill(payload.skill_id)
        if payload.is_active and self.active_count(member_id) >= self.limit:
            raise GrowthAreaLimitError(self.limit)

        data = payload.model_dump()
        data["quarter"] = payload.quarter or f"{quarter_label(self.today)} {self.today.year}"
        data["start_date"] = payload.start_date or self.today
        data["end_date"] = payload.end_date or quarter_end(quarter_of(self.today), self.today.year)

        area = GrowthArea(team_member_id=member_id, **data)
        self.db.add(area)
        self.commit()
        self.db.refresh(area)
        return area

    def update(self, area_id: int, payload: GrowthAreaUpdate) -> GrowthArea:
        area = self._get(area_id)
        changes = payload.model_dump(exclude_unset=True)
        if "skill_id" in changes:
            self._require_skill(changes["skill_id"])
        reactivating = changes.get("is_active") is True and not area.is_active
        if reactivating and self.active_count(area.team_member_id, exclude_id=area.id) >= self.limit:
            raise GrowthAreaLimitError(self.limit)

        for field, value in changes.items():
            setattr(area, field, value)
        self.commit()
        self.db.refresh(area)
        return area

    def delete(self, area_id: int) -> None:
        area = self._get(area_id)
        self.db.delete(area)
        self.commit()

    def _get(self, area_id: int) -> GrowthArea:
        area = self.db.get(GrowthArea, area_id)
        if area is None:
            raise NotFoundError("Growth area", area_id)
        return area

    def _require_member(self, member_id: int):
        if self.db.get(TeamMember, member_id) is None:
            raise NotFoundError("Team member", member_id)

    def _require_skill(self, skill_id: int):
        if self.db.get(Skill, skill_id) is None:
            raise InvalidReferenceError("Unknown skill", {"skill_id": skill_id})

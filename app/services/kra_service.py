from datetime import date
from typing import List, Optional

from app.core.exceptions import NotFoundError
from app.models.kra import KRA
from app.models.team_member import TeamMember
from app.schemas.kra import KRACreate, KRAUpdate
from app.services.base import BaseService


class KRAService(BaseService):
    """
    Key Result Areas. A member has at most one active KRA: recording a new one
    (or reactivating an old one) retires the current one with today's end date.
    """

    def __init__(self, db, today: Optional[date] = None):
        super().__init__(db)
        self.today = today or date.today()

    def list_for_member(self, member_id: int) -> List[KRA]:
        self._require_member(member_id)
        return (
            self.db.query(KRA)
            .filter(KRA.team_member_id == member_id)
            .order_by(KRA.created_at.desc(), KRA.id.desc())
            .all()
        )

    def active_for_member(self, member_id: int) -> Optional[KRA]:
        return (
            self.db.query(KRA)
            .filter(KRA.team_member_id == member_id, KRA.is_active.is_(True))
            .order_by(KRA.start_date.desc(), KRA.id.desc())
            .first()
        )

    def get(self, kra_id: int) -> KRA:
        kra = self.db.get(KRA, kra_id)
        if kra is None:
            raise NotFoundError("KRA", kra_id)
        return kra

    def create(self, member_id: int, payload: KRACreate) -> KRA:
        self._require_member(member_id)
        retired = self._retire_active(member_id)

        kra = KRA(team_member_id=member_id, is_active=True, **payload.model_dump())
        self.db.add(kra)
        self.commit()
        self.db.refresh(kra)
        self.log_info(f"Created KRA {kra.id} for team member {member_id}", retired=retired)
        return kra

    def update(self, kra_id: int, payload: KRAUpdate) -> KRA:
        kra = self.get(kra_id)
        changes = payload.model_dump(exclude_unset=True)
        if changes.get("is_active") is True and not kra.is_active:
            self._retire_active(kra.team_member_id, exclude_id=kra.id)
            changes.setdefault("end_date", None)

        for field, value in changes.items():
            setattr(kra, field, value)
        self.commit()
        self.db.refresh(kra)
        return kra

    def delete(self, kra_id: int) -> None:
        kra = self.get(kra_id)
        self.db.delete(kra)
        self.commit()

    def _retire_active(self, member_id: int, exclude_id: Optional[int] = None) -> List[int]:
        query = self.db.query(KRA).filter(KRA.team_member_id == member_id, KRA.is_active.is_(True))
        if exclude_id is not None:
            query = query.filter(KRA.id != exclude_id)
        retired = []
        for kra in query:
            kra.is_active = False
            kra.end_date = self.today
            retired.append(kra.id)
        return retired

    def _require_member(self, member_id: int):
        if self.db.get(TeamMember, member_id) is None:
            raise NotFoundError("Team member", member_id)

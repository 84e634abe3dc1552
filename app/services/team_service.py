from typing import List, Optional

from sqlalchemy.exc import IntegrityError

from app.core.exceptions import AppException, InvalidReferenceError, NotFoundError
from app.models.maturity import Role
from app.models.team_member import TeamMember, MemberStatus
from app.schemas.team_member import TeamMemberCreate, TeamMemberUpdate
from app.services.base import BaseService


def _is_duplicate_email(exc: IntegrityError) -> bool:
    # SQLite: "UNIQUE constraint failed: team_members.email"
    # PostgreSQL: duplicate key value violates unique constraint "ix_team_members_email"
    message = str(exc.orig).lower()
    return ("unique" in message or "duplicate" in message) and "email" in message


class TeamService(BaseService):
    """CRUD for a manager's direct reports."""

    def list_members(self, status: Optional[MemberStatus] = MemberStatus.ACTIVE) -> List[TeamMember]:
        query = self.db.query(TeamMember)
        if status is not None:
            query = query.filter(TeamMember.status == status.value)
        return query.order_by(TeamMember.full_name).all()

    def get_member(self, member_id: int) -> TeamMember:
        member = self.db.get(TeamMember, member_id)
        if member is None:
            raise NotFoundError("Team member", member_id)
        return member

    def _require_role(self, role_id: Optional[int]):
        if role_id is not None and self.db.get(Role, role_id) is None:
            raise InvalidReferenceError("Unknown role", {"role_id": role_id})

    def _save(self, member: TeamMember) -> TeamMember:
        email = member.email
        try:
            self.commit()
        except IntegrityError as e:
            if not _is_duplicate_email(e):
                raise
            raise AppException(
                f"A team member with email {email} already exists",
                status_code=409,
                error_code="DUPLICATE_EMAIL",
            )
        self.db.refresh(member)
        return member

    def create_member(self, payload: TeamMemberCreate) -> TeamMember:
        self._require_role(payload.role_id)
        data = payload.model_dump()
        data["current_level"] = payload.current_level.value if payload.current_level else None
        data["status"] = payload.status.value
        member = TeamMember(**data)
        self.db.add(member)
        member = self._save(member)
        self.log_info(f"Created team member {member.id}")
        return member

    def update_member(self, member_id: int, payload: TeamMemberUpdate) -> TeamMember:
        member = self.get_member(member_id)
        changes = payload.model_dump(exclude_unset=True)
        if "role_id" in changes:
            self._require_role(changes["role_id"])
        for field, value in changes.items():
            if hasattr(value, "value"):
                value = value.value
            setattr(member, field, value)
        return self._save(member)

    def delete_member(self, member_id: int) -> None:
        member = self.get_member(member_id)
        self.db.delete(member)
        self.commit()
        self.log_info(f"Deleted team member {member_id} and their records")

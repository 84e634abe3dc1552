from typing import List, Optional

from app.core.exceptions import NotFoundError
from app.models.one_on_one import OneOnOne
from app.models.performance_review import PerformanceReview, ReviewType
from app.models.team_member import TeamMember
from app.schemas.meetings import CheckInCreate, OneOnOneCreate
from app.services.base import BaseService
from app.services.dates import quarter_label


class MeetingService(BaseService):
    """1:1 meetings and quarterly/annual check-ins."""

    def _require_member(self, member_id: int):
        if self.db.get(TeamMember, member_id) is None:
            raise NotFoundError("Team member", member_id)

    # --- 1:1s ---

    def list_one_on_ones(self, team_member_id: Optional[int] = None) -> List[OneOnOne]:
        query = self.db.query(OneOnOne)
        if team_member_id is not None:
            query = query.filter(OneOnOne.team_member_id == team_member_id)
        return query.order_by(OneOnOne.meeting_date.desc(), OneOnOne.id.desc()).all()

    def create_one_on_one(self, payload: OneOnOneCreate) -> OneOnOne:
        self._require_member(payload.team_member_id)
        meeting = OneOnOne(**payload.model_dump())
        self.db.add(meeting)
        self.commit()
        self.db.refresh(meeting)
        return meeting

    def delete_one_on_one(self, meeting_id: int) -> None:
        meeting = self.db.get(OneOnOne, meeting_id)
        if meeting is None:
            raise NotFoundError("1:1", meeting_id)
        self.db.delete(meeting)
        self.commit()

    # --- Check-ins ---

    def list_check_ins(
        self, team_member_id: Optional[int] = None, review_type: Optional[ReviewType] = None
    ) -> List[PerformanceReview]:
        query = self.db.query(PerformanceReview)
        if team_member_id is not None:
            query = query.filter(PerformanceReview.team_member_id == team_member_id)
        if review_type is not None:
            query = query.filter(PerformanceReview.type == review_type.value)
        return query.order_by(PerformanceReview.review_date.desc(), PerformanceReview.id.desc()).all()

    def create_check_in(self, payload: CheckInCreate) -> PerformanceReview:
        self._require_member(payload.team_member_id)
        data = payload.model_dump()
        data["type"] = payload.type.value
        if payload.type == ReviewType.QUARTERLY:
            # Quarter and year default to the quarter the review falls in
            data["quarter"] = payload.quarter or quarter_label(payload.review_date)
            data["year"] = payload.year or payload.review_date.year
        review = PerformanceReview(**data)
        self.db.add(review)
        self.commit()
        self.db.refresh(review)
        self.log_info(f"Recorded {review.type} check-in for team member {review.team_member_id}")
        return review

    def delete_check_in(self, review_id: int) -> None:
        review = self.db.get(PerformanceReview, review_id)
        if review is None:
            raise NotFoundError("Check-in", review_id)
        self.db.delete(review)
        self.commit()

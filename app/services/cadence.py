"""
Cadence compliance.

Classifies the three recurring obligations a manager has towards each direct
report (1:1s, quarterly check-ins and the annual check-in on the hire-date
anniversary) as overdue, due-soon or current. The track functions are pure:
they only look at the dates they are given and the ``now`` passed in, and bad
or missing record dates fall back to the "no prior record" branch instead of
raising. ``now`` itself is required: an unparseable ``now`` raises ValueError.
"""
from datetime import date, timedelta
from typing import Dict, Iterable, List, Optional, Union

from app.core.exceptions import NotFoundError
from app.models.one_on_one import OneOnOne
from app.models.performance_review import PerformanceReview, ReviewType
from app.models.team_member import TeamMember, MemberStatus
from app.schemas.cadence import CadenceStatus, CadenceSummary, MemberCadence, TrackCounts
from app.services.base import BaseService
from app.services.dates import (
    DateLike,
    anniversary_in_year,
    days_between,
    parse_local_date,
    parse_quarter,
    quarter_end,
    quarter_of,
)

ONE_ON_ONE_INTERVAL_DAYS = 21
ONE_ON_ONE_DUE_SOON_DAYS = 2
QUARTER_END_WINDOW_DAYS = 14
ANNUAL_DUE_SOON_DAYS = 30


def _today(now: DateLike) -> date:
    """The evaluation date. Record dates may be missing, the clock may not."""
    today = parse_local_date(now)
    if today is None:
        raise ValueError(f"now must be a date or an ISO date string, got {now!r}")
    return today


def _to_int(value) -> Optional[int]:
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def one_on_one_status(last_meeting_date: DateLike, now: DateLike) -> CadenceStatus:
    """1:1s recur every three weeks with a two day due-soon window."""
    today = _today(now)
    meeting = parse_local_date(last_meeting_date)
    if meeting is None:
        return CadenceStatus.OVERDUE

    days_until_meeting = days_between(meeting, today)
    if days_until_meeting >= 0:
        # A scheduled meeting is coming up
        if days_until_meeting <= ONE_ON_ONE_DUE_SOON_DAYS:
            return CadenceStatus.DUE_SOON
        return CadenceStatus.CURRENT

    next_expected = meeting + timedelta(days=ONE_ON_ONE_INTERVAL_DAYS)
    days_until_next = days_between(next_expected, today)
    if days_until_next < 0:
        return CadenceStatus.OVERDUE
    if days_until_next <= ONE_ON_ONE_DUE_SOON_DAYS:
        return CadenceStatus.DUE_SOON
    return CadenceStatus.CURRENT


def quarterly_status(
    last_review_date: DateLike,
    last_quarter: Union[str, int, None],
    last_year: Union[int, str, None],
    current_quarter: Union[str, int],
    current_year: int,
    now: DateLike,
) -> CadenceStatus:
    today = _today(now)
    current_q = parse_quarter(current_quarter) or quarter_of(today)
    days_until_quarter_end = days_between(quarter_end(current_q, current_year), today)
    near_quarter_end = days_until_quarter_end <= QUARTER_END_WINDOW_DAYS

    review_date = parse_local_date(last_review_date)
    last_q = parse_quarter(last_quarter)
    last_y = _to_int(last_year)

    if review_date is None or last_q is None or last_y is None:
        # No usable prior review: never "current", only due-soon near quarter end
        if days_until_quarter_end < 0:
            return CadenceStatus.OVERDUE
        if near_quarter_end:
            return CadenceStatus.DUE_SOON
        return CadenceStatus.OVERDUE

    if last_y < current_year - 1:
        return CadenceStatus.OVERDUE
    if last_y == current_year - 1 and current_q > 1:
        return CadenceStatus.OVERDUE
    if last_y == current_year and last_q < current_q - 1:
        return CadenceStatus.OVERDUE
    if last_y == current_year and last_q == current_q - 1:
        return CadenceStatus.DUE_SOON if near_quarter_end else CadenceStatus.OVERDUE
    if last_y == current_year and last_q == current_q:
        # Done for this quarter, but flag the next one as the quarter closes
        return CadenceStatus.DUE_SOON if near_quarter_end else CadenceStatus.CURRENT
    return CadenceStatus.CURRENT


def annual_expected_date(start_date: DateLike, current_year: int) -> Optional[date]:
    """Hire-date anniversary in ``current_year``."""
    start = parse_local_date(start_date)
    if start is None:
        return None
    return anniversary_in_year(start, current_year)


def annual_status(
    start_date: DateLike,
    last_annual_review_date: DateLike,
    current_year: int,
    now: DateLike,
) -> CadenceStatus:
    today = _today(now)
    expected = annual_expected_date(start_date, current_year)
    if expected is None:
        return CadenceStatus.OVERDUE

    last_review = parse_local_date(last_annual_review_date)
    if last_review is not None and last_review >= expected:
        return CadenceStatus.CURRENT

    days_until_expected = days_between(expected, today)
    if days_until_expected < 0:
        return CadenceStatus.OVERDUE
    if days_until_expected <= ANNUAL_DUE_SOON_DAYS:
        return CadenceStatus.DUE_SOON
    return CadenceStatus.CURRENT


def _latest(records: Iterable, attr: str):
    latest, latest_date = None, None
    for record in records:
        record_date = parse_local_date(getattr(record, attr, None))
        if record_date is None:
            continue
        if latest_date is None or record_date > latest_date:
            latest, latest_date = record, record_date
    return latest, latest_date


def evaluate_member(member, one_on_ones: Iterable, reviews: Iterable, now: DateLike) -> MemberCadence:
    """
    Build the compliance row for one member.

    ``one_on_ones`` need a ``meeting_date``; ``reviews`` need ``type``,
    ``review_date``, ``quarter`` and ``year``. Only the most recent record of
    each kind is considered.
    """
    today = _today(now)
    current_year = today.year
    reviews = list(reviews)

    _, last_meeting = _latest(one_on_ones, "meeting_date")
    last_quarterly, last_quarterly_date = _latest(
        (r for r in reviews if r.type == ReviewType.QUARTERLY.value), "review_date"
    )
    _, last_annual_date = _latest(
        (r for r in reviews if r.type == ReviewType.ANNUAL.value), "review_date"
    )

    return MemberCadence(
        member_id=member.id,
        member_name=member.full_name,
        start_date=parse_local_date(member.start_date),
        one_on_one_status=one_on_one_status(last_meeting, today),
        one_on_one_last_date=last_meeting,
        quarterly_status=quarterly_status(
            last_quarterly_date,
            getattr(last_quarterly, "quarter", None),
            getattr(last_quarterly, "year", None),
            quarter_of(today),
            current_year,
            today,
        ),
        quarterly_last_date=last_quarterly_date,
        annual_status=annual_status(member.start_date, last_annual_date, current_year, today),
        annual_last_date=last_annual_date,
        annual_expected_date=annual_expected_date(member.start_date, current_year),
    )


def summarize(rows: List[MemberCadence], now: DateLike) -> CadenceSummary:
    tracks: Dict[str, TrackCounts] = {
        "one_on_one": TrackCounts(),
        "quarterly": TrackCounts(),
        "annual": TrackCounts(),
    }
    needing_attention = []
    for row in rows:
        for name, status in zip(tracks, row.statuses):
            counts = tracks[name]
            field = status.value.replace("-", "_")
            setattr(counts, field, getattr(counts, field) + 1)
        if CadenceStatus.OVERDUE in row.statuses:
            needing_attention.append(row.member_id)

    return CadenceSummary(
        as_of=_today(now),
        total_members=len(rows),
        members_needing_attention=needing_attention,
        **tracks,
    )


class CadenceService(BaseService):
    """Loads a fresh snapshot of meetings and check-ins and evaluates it."""

    def _snapshot(self, member_ids: List[int]):
        one_on_ones: Dict[int, list] = {member_id: [] for member_id in member_ids}
        reviews: Dict[int, list] = {member_id: [] for member_id in member_ids}
        if not member_ids:
            return one_on_ones, reviews

        for meeting in self.db.query(OneOnOne).filter(OneOnOne.team_member_id.in_(member_ids)):
            one_on_ones[meeting.team_member_id].append(meeting)
        for review in self.db.query(PerformanceReview).filter(PerformanceReview.team_member_id.in_(member_ids)):
            reviews[review.team_member_id].append(review)
        return one_on_ones, reviews

    def team_compliance(self, as_of: Optional[date] = None) -> List[MemberCadence]:
        today = as_of or date.today()
        members = (
            self.db.query(TeamMember)
            .filter(TeamMember.status == MemberStatus.ACTIVE.value)
            .order_by(TeamMember.full_name)
            .all()
        )
        one_on_ones, reviews = self._snapshot([m.id for m in members])
        rows = [evaluate_member(m, one_on_ones[m.id], reviews[m.id], today) for m in members]
        self.log_info(f"Evaluated cadence for {len(rows)} team members", as_of=today.isoformat())
        return rows

    def member_compliance(self, member_id: int, as_of: Optional[date] = None) -> MemberCadence:
        member = self.db.get(TeamMember, member_id)
        if member is None:
            raise NotFoundError("Team member", member_id)
        one_on_ones, reviews = self._snapshot([member.id])
        return evaluate_member(member, one_on_ones[member.id], reviews[member.id], as_of or date.today())

    def team_summary(self, as_of: Optional[date] = None) -> CadenceSummary:
        today = as_of or date.today()
        return summarize(self.team_compliance(today), today)

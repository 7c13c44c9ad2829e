"""Pickup window validation against calendar and carrier notice rules."""

from datetime import datetime, timedelta

from freightpickup.services.pickup.errors import (
    DateMismatch,
    InsufficientLeadTime,
    PastSchedule,
    TimezoneMismatch,
)
from freightpickup.services.pickup.models import ScheduleWindow


MIN_LEAD_TIME = timedelta(hours=2)


def _is_aware(value: datetime) -> bool:
    return value.utcoffset() is not None


def _resolve_now(start: datetime, now: datetime | None) -> datetime:
    if now is not None:
        return now
    # Naive input is read as local wall time; aware input compares as an instant.
    return datetime.now(start.tzinfo) if start.tzinfo is not None else datetime.now()


def validate_schedule(start: datetime, end: datetime, now: datetime | None = None) -> ScheduleWindow:
    """Return a `ScheduleWindow` for `start`/`end` or raise a schedule error.

    The lead-time rule is measured from `now` to `start`, matching the
    carrier's minimum-notice requirement. `end` is only checked for being on
    the same date as `start`.
    """

    if start.date() != end.date():
        raise DateMismatch(f"start {start.date()} and end {end.date()} are not the same date")

    now = _resolve_now(start, now)
    if _is_aware(start) != _is_aware(now):
        raise TimezoneMismatch(
            f"start {start.isoformat()} and now {now.isoformat()} must both be naive or both carry a timezone"
        )
    lead = start - now
    if lead <= timedelta(0):
        raise PastSchedule(f"start {start.isoformat()} is not in the future")
    if lead < MIN_LEAD_TIME:
        raise InsufficientLeadTime(
            f"start {start.isoformat()} is {lead} from now; carrier requires {MIN_LEAD_TIME}"
        )

    return ScheduleWindow(start=start, end=end)

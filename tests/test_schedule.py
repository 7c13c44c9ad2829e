"""Pickup window validation: same date, future start, two hours of notice."""

from datetime import datetime, timedelta, timezone

import pytest

from freightpickup.services.pickup.errors import (
    DateMismatch,
    InsufficientLeadTime,
    PastSchedule,
    ScheduleValidationError,
    TimezoneMismatch,
)
from freightpickup.services.pickup.schedule import MIN_LEAD_TIME, validate_schedule


def test_valid_window_formats_date_and_times(now):
    window = validate_schedule(now + timedelta(hours=3), now + timedelta(hours=8), now=now)

    assert window.pickup_date == "20261019"
    assert window.earliest_time_ready == "1100"
    assert window.latest_time_ready == "1600"
    assert len(window.pickup_date) == 8
    assert len(window.earliest_time_ready) == 4
    assert len(window.latest_time_ready) == 4


def test_times_are_zero_padded(now):
    start = datetime(2026, 10, 20, 7, 5)
    window = validate_schedule(start, start + timedelta(hours=2), now=now)

    assert window.pickup_date == "20261020"
    assert window.earliest_time_ready == "0705"
    assert window.latest_time_ready == "0905"


def test_different_dates_rejected(now):
    start = now + timedelta(hours=3)
    with pytest.raises(DateMismatch):
        validate_schedule(start, start + timedelta(days=1), now=now)


def test_date_mismatch_checked_before_past(now):
    start = now - timedelta(days=1)
    with pytest.raises(DateMismatch):
        validate_schedule(start, now, now=now)


@pytest.mark.parametrize("offset", [timedelta(0), timedelta(minutes=-1), timedelta(hours=-5)])
def test_start_not_in_future_rejected(now, offset):
    start = now + offset
    with pytest.raises(PastSchedule):
        validate_schedule(start, start, now=now)


@pytest.mark.parametrize("offset", [timedelta(seconds=1), timedelta(hours=1), timedelta(hours=2, seconds=-1)])
def test_short_notice_rejected(now, offset):
    start = now + offset
    with pytest.raises(InsufficientLeadTime):
        validate_schedule(start, start + timedelta(hours=4), now=now)


def test_exactly_two_hours_notice_accepted(now):
    window = validate_schedule(now + MIN_LEAD_TIME, now + timedelta(hours=6), now=now)

    assert window.earliest_time_ready == "1000"


def test_lead_time_measured_to_start_not_end(now):
    # A late end does not compensate for a start that is too soon.
    with pytest.raises(InsufficientLeadTime):
        validate_schedule(now + timedelta(hours=1), now + timedelta(hours=10), now=now)


def test_schedule_errors_are_value_errors(now):
    with pytest.raises(ValueError):
        validate_schedule(now, now, now=now)
    assert issubclass(PastSchedule, ScheduleValidationError)


def test_aware_timestamps_formatted_in_callers_zone():
    eastern = timezone(timedelta(hours=-5))
    now = datetime(2026, 10, 19, 20, 0, tzinfo=timezone.utc)
    start = datetime(2026, 10, 19, 18, 30, tzinfo=eastern)

    window = validate_schedule(start, start + timedelta(hours=3), now=now)

    assert window.pickup_date == "20261019"
    assert window.earliest_time_ready == "1830"
    assert window.latest_time_ready == "2130"


def test_default_clock_rejects_short_notice():
    start = datetime.now() + timedelta(minutes=30)
    with pytest.raises(InsufficientLeadTime):
        validate_schedule(start, start)


def test_default_clock_aware_past_start():
    start = datetime.now(timezone.utc) - timedelta(hours=1)
    with pytest.raises(PastSchedule):
        validate_schedule(start, start)


def test_aware_start_against_naive_now_rejected(now):
    start = datetime(2026, 10, 19, 15, 0, tzinfo=timezone.utc)
    with pytest.raises(TimezoneMismatch):
        validate_schedule(start, start + timedelta(hours=1), now=now)


def test_naive_start_against_aware_now_rejected(now):
    aware_now = now.replace(tzinfo=timezone.utc)
    with pytest.raises(TimezoneMismatch):
        validate_schedule(now + timedelta(hours=3), now + timedelta(hours=4), now=aware_now)

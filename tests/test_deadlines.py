"""Urgency classification and countdown tests."""

from __future__ import annotations

from datetime import datetime, timedelta

import pytest
from conftest import make_project

from pdash.models.urgency import Countdown, Urgency
from pdash.services.deadlines import (
    classify_deadline,
    compute_countdown,
    days_left_label,
    urgency_for,
)


@pytest.mark.parametrize(
    ("offset", "expected"),
    [
        (timedelta(days=-30), Urgency.RED),
        (timedelta(seconds=-1), Urgency.RED),
        (timedelta(0), Urgency.RED),
        (timedelta(minutes=30), Urgency.RED),
        (timedelta(days=1), Urgency.RED),
        (timedelta(days=1, microseconds=1), Urgency.ORANGE),
        (timedelta(days=3), Urgency.ORANGE),
        (timedelta(days=3, seconds=1), Urgency.YELLOW),
        (timedelta(days=7), Urgency.YELLOW),
        (timedelta(days=7, seconds=1), Urgency.GREEN),
        (timedelta(days=10), Urgency.GREEN),
        (timedelta(days=400), Urgency.GREEN),
    ],
)
def test_classify_deadline_tiers(now: datetime, offset: timedelta, expected: Urgency) -> None:
    assert classify_deadline(now + offset, now) is expected


def test_urgency_for_missing_deadline_is_gray(now: datetime) -> None:
    assert urgency_for(make_project(deadline=None), now) is Urgency.GRAY
    assert urgency_for(make_project(deadline=now + timedelta(days=5)), now) is Urgency.YELLOW


@pytest.mark.parametrize("offset", [timedelta(0), timedelta(hours=-1), timedelta(days=-3)])
def test_countdown_expired_has_zero_fields(now: datetime, offset: timedelta) -> None:
    assert compute_countdown(now + offset, now) == Countdown(expired=True)


def test_countdown_breakdown(now: datetime) -> None:
    deadline = now + timedelta(days=3, hours=4, minutes=5, seconds=6, milliseconds=900)
    countdown = compute_countdown(deadline, now)
    assert countdown == Countdown(days=3, hours=4, minutes=5, seconds=6, expired=False)


def test_countdown_days_are_unbounded(now: datetime) -> None:
    countdown = compute_countdown(now + timedelta(days=512, seconds=59), now)
    assert countdown.days == 512
    assert (countdown.hours, countdown.minutes, countdown.seconds) == (0, 0, 59)


@pytest.mark.parametrize("total_seconds", [1, 59, 61, 3_599, 3_601, 86_399, 86_401, 1_000_003])
def test_countdown_fields_stay_within_modulus(now: datetime, total_seconds: int) -> None:
    remaining = timedelta(seconds=total_seconds, milliseconds=250)
    countdown = compute_countdown(now + remaining, now)
    assert not countdown.expired
    assert 0 <= countdown.hours < 24
    assert 0 <= countdown.minutes < 60
    assert 0 <= countdown.seconds < 60
    rebuilt = timedelta(
        days=countdown.days,
        hours=countdown.hours,
        minutes=countdown.minutes,
        seconds=countdown.seconds,
    )
    assert timedelta(0) <= remaining - rebuilt < timedelta(seconds=1)


def test_thirty_minutes_left(now: datetime) -> None:
    deadline = now + timedelta(minutes=30)
    assert classify_deadline(deadline, now) is Urgency.RED
    countdown = compute_countdown(deadline, now)
    assert not countdown.expired
    assert (countdown.days, countdown.hours) == (0, 0)
    assert countdown.minutes in (29, 30)


def test_one_hour_overdue(now: datetime) -> None:
    deadline = now - timedelta(hours=1)
    assert classify_deadline(deadline, now) is Urgency.RED
    assert compute_countdown(deadline, now).expired is True


def test_ten_days_left_is_green(now: datetime) -> None:
    assert classify_deadline(now + timedelta(days=10), now) is Urgency.GREEN


def test_days_left_label(now: datetime) -> None:
    assert days_left_label(None, now) == "No deadline"
    assert days_left_label(now - timedelta(minutes=1), now) == "Overdue"
    assert days_left_label(now + timedelta(hours=23), now) == "Today"
    assert days_left_label(now + timedelta(days=1, hours=2), now) == "1 day"
    assert days_left_label(now + timedelta(days=9, hours=2), now) == "9 days"


def test_countdown_clock_text() -> None:
    assert Countdown(days=2, hours=3, minutes=4, seconds=5).clock_text() == "02:03:04:05"

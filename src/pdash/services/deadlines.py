"""Deadline urgency classification and countdown arithmetic."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

from pdash.models.projects import Project
from pdash.models.urgency import Countdown, Urgency

ONE_DAY = timedelta(days=1)

# Inclusive upper bounds in days, tightest first.
URGENCY_THRESHOLDS: tuple[tuple[float, Urgency], ...] = (
    (1.0, Urgency.RED),
    (3.0, Urgency.ORANGE),
    (7.0, Urgency.YELLOW),
)


def utc_now() -> datetime:
    return datetime.now(UTC)


def classify_deadline(deadline: datetime, now: datetime) -> Urgency:
    """Map a present deadline to an urgency tier relative to ``now``.

    Overdue deadlines are red. Boundaries are inclusive on the tighter tier,
    so exactly one day left is still red.
    """
    remaining = deadline - now
    if remaining < timedelta(0):
        return Urgency.RED
    remaining_days = remaining / ONE_DAY
    for limit, urgency in URGENCY_THRESHOLDS:
        if remaining_days <= limit:
            return urgency
    return Urgency.GREEN


def urgency_for(project: Project, now: datetime) -> Urgency:
    """Urgency of a project; gray when it has no deadline."""
    if project.deadline is None:
        return Urgency.GRAY
    return classify_deadline(project.deadline, now)


def compute_countdown(deadline: datetime, now: datetime) -> Countdown:
    """Break the time left before ``deadline`` into days, hours, minutes, seconds."""
    remaining = deadline - now
    if remaining <= timedelta(0):
        return Countdown(expired=True)

    total_seconds = remaining // timedelta(seconds=1)
    days, rest = divmod(total_seconds, 86_400)
    hours, rest = divmod(rest, 3_600)
    minutes, seconds = divmod(rest, 60)
    return Countdown(days=days, hours=hours, minutes=minutes, seconds=seconds)


def days_left_label(deadline: datetime | None, now: datetime) -> str:
    """Short label for the admin board."""
    if deadline is None:
        return "No deadline"
    remaining = deadline - now
    if remaining < timedelta(0):
        return "Overdue"
    days = remaining // ONE_DAY
    match days:
        case 0:
            return "Today"
        case 1:
            return "1 day"
        case _:
            return f"{days} days"

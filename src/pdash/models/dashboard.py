"""View models consumed by the admin and client surfaces."""

from __future__ import annotations

from pydantic import BaseModel

from pdash.models.projects import Project
from pdash.models.urgency import Countdown, Urgency


class ProjectCard(BaseModel):
    """A project as shown on the admin board."""

    project: Project
    urgency: Urgency
    days_left: str


class DashboardStats(BaseModel):
    """Counters for the admin stats bar."""

    total: int = 0
    active: int = 0
    completed: int = 0
    overdue: int = 0


class ClientDashboard(BaseModel):
    """Everything the client view renders for one tick."""

    project: Project
    urgency: Urgency
    countdown: Countdown | None = None

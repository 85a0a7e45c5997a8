"""Pydantic models for pdash."""

from pdash.models.dashboard import ClientDashboard, DashboardStats, ProjectCard
from pdash.models.projects import (
    PROJECT_LIST_ADAPTER,
    Project,
    ProjectDraft,
    ProjectStatus,
    normalize_instant,
)
from pdash.models.sessions import SESSION_ADAPTER, AdminSession, ClientSession, Session
from pdash.models.urgency import (
    STYLE_BY_URGENCY,
    URGENCY_STYLES,
    Countdown,
    Urgency,
    UrgencyStyle,
    urgency_label,
)

__all__ = [
    "AdminSession",
    "ClientDashboard",
    "ClientSession",
    "Countdown",
    "DashboardStats",
    "Project",
    "ProjectCard",
    "ProjectDraft",
    "ProjectStatus",
    "Session",
    "Urgency",
    "UrgencyStyle",
    "PROJECT_LIST_ADAPTER",
    "SESSION_ADAPTER",
    "STYLE_BY_URGENCY",
    "URGENCY_STYLES",
    "normalize_instant",
    "urgency_label",
]

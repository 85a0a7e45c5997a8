"""Demo fixtures for a fresh install."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta
from typing import TYPE_CHECKING

from pdash.models.projects import Project

if TYPE_CHECKING:
    from pdash.data.repositories import ProjectRepository

logger = logging.getLogger(__name__)

# (name, description, client name, deadline offset in days, notes)
DEMO_FIXTURES: tuple[tuple[str, str, str, float, str], ...] = (
    (
        "Corporate Website Redesign",
        "Full site refresh with new branding, a design system and UX improvements.",
        "Carlos Mendoza",
        2,
        "Delivery covers homepage, about, contact and three inner pages. "
        "Review the color palette before presenting.",
    ),
    (
        "E-commerce Mobile App",
        "iOS and Android storefront with cart, payments and push notifications.",
        "Sofia Ramirez",
        18,
        "Sprint 1 done (auth, catalog). Sprint 2 in progress: cart and checkout.",
    ),
    (
        "Electronic Invoicing System",
        "Tax authority integration for issuing, stamping and emailing invoices.",
        "Luis Torres",
        5,
        "Pending: tax validations and certificates. Client must send updated signing keys.",
    ),
    (
        "Real-time Analytics Dashboard",
        "Metrics panel with interactive charts, spreadsheet export and automatic alerts.",
        "Ana Flores",
        -1,
        "Urgent review required. Analytics API integration still pending.",
    ),
    (
        "Online Course Platform",
        "LMS with video streaming, quizzes, digital certificates and progress tracking.",
        "Mariana Vega",
        30,
        "First module content ready. Waiting on video recordings from the client.",
    ),
    (
        "Real Estate Agency CRM",
        "Client, property and sales pipeline management with automatic reports.",
        "Roberto Salinas",
        -0.5,
        "Final delivery. Deploy to production before 6pm.",
    ),
)


def build_demo_projects(now: datetime) -> list[Project]:
    """Fixture projects with deadlines relative to ``now``."""
    return [
        Project(
            id=f"proj-{number}",
            name=name,
            description=description,
            client_name=client_name,
            client_id=f"CLI-{number:03d}",
            deadline=now + timedelta(days=offset_days),
            status="active",
            notes=notes,
            created_at=now,
        )
        for number, (name, description, client_name, offset_days, notes) in enumerate(
            DEMO_FIXTURES, start=1
        )
    ]


async def seed_demo_data(repository: ProjectRepository, now: datetime) -> bool:
    """Populate an empty repository with demo projects.

    Returns True when fixtures were written. A non-empty collection is never
    touched.
    """
    if not await repository.is_empty():
        return False
    projects = build_demo_projects(now)
    await repository.save_all(projects)
    logger.info("Seeded %d demo projects", len(projects))
    return True

"""Project-level models."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any, ClassVar, Literal

from pydantic import BaseModel, ConfigDict, TypeAdapter, field_validator
from pydantic.alias_generators import to_camel

ProjectStatus = Literal["active", "completed", "paused"]


def normalize_instant(value: datetime) -> datetime:
    """Return an aware UTC datetime; naive values are read as local time."""
    if value.tzinfo is None:
        value = value.astimezone()
    return value.astimezone(UTC)


class CamelModel(BaseModel):
    """Base model persisted with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ProjectFields(CamelModel):
    """Editable fields shared by stored projects and the admin form."""

    name: str = ""
    description: str = ""
    client_name: str = ""
    client_id: str = ""
    deadline: datetime | None = None
    status: ProjectStatus = "active"
    notes: str = ""

    @field_validator("deadline", mode="before")
    @classmethod
    def _blank_deadline_is_absent(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("deadline")
    @classmethod
    def _deadline_to_utc(cls, value: datetime | None) -> datetime | None:
        if value is None:
            return None
        return normalize_instant(value)


class Project(ProjectFields):
    """One tracked unit of work.

    Stored records are immutable; edits go through ``ProjectDraft`` and a
    full replacement keyed by ``id``.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    created_at: datetime

    @field_validator("created_at")
    @classmethod
    def _created_at_to_utc(cls, value: datetime) -> datetime:
        return normalize_instant(value)


class ProjectDraft(ProjectFields):
    """Admin form state: every project field except id and created_at."""

    REQUIRED_FIELDS: ClassVar[tuple[str, ...]] = ("name", "client_id", "deadline")

    @classmethod
    def from_project(cls, project: Project) -> ProjectDraft:
        return cls.model_validate(project.model_dump(include=set(ProjectFields.model_fields)))

    def missing_fields(self) -> list[str]:
        """Names of required fields that are blank."""
        missing: list[str] = []
        for name in self.REQUIRED_FIELDS:
            value = getattr(self, name)
            if value is None or (isinstance(value, str) and not value.strip()):
                missing.append(name)
        return missing

    @property
    def is_complete(self) -> bool:
        return not self.missing_fields()


PROJECT_LIST_ADAPTER: TypeAdapter[list[Project]] = TypeAdapter(list[Project])

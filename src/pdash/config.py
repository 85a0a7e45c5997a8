"""Configuration for pdash."""

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class Config:
    """Application configuration."""

    data_dir: Path = field(default_factory=lambda: Path.home() / ".local" / "share" / "pdash")
    projects_key: str = "dashboard_projects"
    session_key: str = "dashboard_session"
    admin_password: str = "admin123"
    tick_interval: float = 1.0
    seed_demo: bool = True

    @property
    def db_path(self) -> Path:
        return self.data_dir / "storage.db"

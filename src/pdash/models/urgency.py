"""Urgency tiers and countdown breakdown."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from pydantic import BaseModel, ConfigDict


class Urgency(StrEnum):
    """How close a deadline is, from most relaxed to most pressing."""

    GREEN = "green"
    YELLOW = "yellow"
    ORANGE = "orange"
    RED = "red"
    GRAY = "gray"


@dataclass(frozen=True)
class UrgencyStyle:
    """Display metadata for one urgency tier."""

    urgency: Urgency
    label: str
    color: str  # terminal color name


URGENCY_STYLES: tuple[UrgencyStyle, ...] = (
    UrgencyStyle(Urgency.GREEN, "On time", "green"),
    UrgencyStyle(Urgency.YELLOW, "Soon", "bright_yellow"),
    UrgencyStyle(Urgency.ORANGE, "Urgent", "yellow"),
    UrgencyStyle(Urgency.RED, "Critical", "red"),
    UrgencyStyle(Urgency.GRAY, "No deadline", "bright_black"),
)
STYLE_BY_URGENCY: dict[Urgency, UrgencyStyle] = {item.urgency: item for item in URGENCY_STYLES}


def urgency_label(urgency: Urgency) -> str:
    return STYLE_BY_URGENCY[urgency].label


class Countdown(BaseModel):
    """Remaining time to a deadline in whole civil units."""

    model_config = ConfigDict(frozen=True)

    days: int = 0
    hours: int = 0
    minutes: int = 0
    seconds: int = 0
    expired: bool = False

    def clock_text(self) -> str:
        """Render as ``DD:HH:MM:SS`` with two-digit padding."""
        return (
            f"{self.days:02d}:{self.hours:02d}:{self.minutes:02d}:{self.seconds:02d}"
        )

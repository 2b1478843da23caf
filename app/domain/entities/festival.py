"""Domain entity representing a festival."""

from dataclasses import dataclass
from datetime import date, datetime

FESTIVAL_STATUSES = ("Active", "Inactive", "Upcoming")
FESTIVAL_CATEGORIES = ("Religious", "Cultural", "Music", "Food")


@dataclass
class Festival:
    """Core attributes describing a festival."""

    id: int | None
    name: str
    organizer: str
    date: date
    status: str
    address: str
    category: str
    created_at: datetime | None = None


__all__ = ["Festival", "FESTIVAL_STATUSES", "FESTIVAL_CATEGORIES"]

"""Domain entity representing a festival vendor."""

from dataclasses import dataclass
from datetime import datetime

REVIEW_STATUS_PENDING = "Pending"
REVIEW_STATUS_APPROVED = "Approved"
REVIEW_STATUS_REJECTED = "Rejected"
REVIEW_STATUSES = (REVIEW_STATUS_PENDING, REVIEW_STATUS_APPROVED, REVIEW_STATUS_REJECTED)

STALL_TYPES = ("Food", "Beverage", "Merchandise", "Service", "Other")


@dataclass
class Vendor:
    """A stall holder registered for a festival."""

    id: int | None
    name: str
    email: str
    phone: str
    stall_name: str
    stall_type: str
    festival_id: int | None
    registration_status: str = REVIEW_STATUS_PENDING
    payment_status: str | None = None
    payment_attachment: str | None = None
    created_at: datetime | None = None


__all__ = [
    "Vendor",
    "REVIEW_STATUS_PENDING",
    "REVIEW_STATUS_APPROVED",
    "REVIEW_STATUS_REJECTED",
    "REVIEW_STATUSES",
    "STALL_TYPES",
]

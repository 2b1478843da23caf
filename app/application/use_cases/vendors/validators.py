"""Validation helpers shared by the vendor use cases."""

import re

from app.domain.entities import REVIEW_STATUSES, STALL_TYPES

_EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
_PHONE_PATTERN = re.compile(r"^[0-9]{10,}$")

ALLOWED_RECEIPT_EXTENSIONS = ("jpg", "jpeg", "png", "pdf")


def ensure_valid_email(email: str) -> str:
    normalized = email.strip().lower()
    if not _EMAIL_PATTERN.match(normalized):
        raise ValueError("Invalid email format")
    return normalized


def ensure_valid_phone(phone: str) -> str:
    normalized = phone.strip()
    if not _PHONE_PATTERN.match(normalized):
        raise ValueError("Invalid phone number format (10+ digits required)")
    return normalized


def ensure_stall_type(stall_type: str) -> str:
    if stall_type not in STALL_TYPES:
        raise ValueError(f"Invalid stall type. Must be one of: {', '.join(STALL_TYPES)}")
    return stall_type


def ensure_review_status(status: str) -> str:
    """Return ``status`` when it is one of ``Pending``, ``Approved`` or ``Rejected``."""

    if status not in REVIEW_STATUSES:
        raise ValueError(f"Status must be one of: {', '.join(REVIEW_STATUSES)}")
    return status


def ensure_receipt_file_name(file_name: str) -> str:
    normalized = file_name.strip()
    extension = normalized.rsplit(".", 1)[-1].lower() if "." in normalized else ""
    if extension not in ALLOWED_RECEIPT_EXTENSIONS:
        raise ValueError(
            f"Only {', '.join(ALLOWED_RECEIPT_EXTENSIONS)} files are allowed"
        )
    return normalized

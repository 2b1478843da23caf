"""Domain entity representing a persisted notification."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from datetime import datetime
from enum import Enum
from numbers import Real
from typing import Any, Iterable, Mapping

from app.domain.exceptions import ValidationError


class Role(str, Enum):
    """Audience roles a notification can be addressed to."""

    ADMIN = "admin"
    VENDOR = "vendor"
    USER = "user"


class NotificationType(str, Enum):
    """Closed set of business facts that produce a notification."""

    NEW_VENDOR = "new_vendor"
    NEW_ATTENDEE = "new_attendee"
    PAYMENT_ATTACHMENT = "payment_attachment"
    STATUS_UPDATE = "status_update"
    NEW_USER = "new_user"
    FESTIVAL_REVIEW = "festival_review"
    NEW_TICKET = "new_ticket"
    TICKET_STATUS_UPDATE = "ticket_status_update"
    USER_VERIFIED = "user_verified"
    BOOTH_ASSIGNED = "booth_assigned"
    NEW_SALE = "new_sale"
    NEW_REVIEW = "new_review"
    USER_LOGIN = "user_login"
    LOGIN_ERROR = "login_error"
    LOGIN_ATTEMPT_UNVERIFIED = "login_attempt_unverified"
    WELCOME = "welcome"
    LOGIN_ATTEMPT_INACTIVE = "login_attempt_inactive"


# Metadata shapes. Attribute names are the keys clients render.


@dataclass(frozen=True)
class NamedMetadata:
    name: str | None = None


@dataclass(frozen=True)
class VendorRegistrationMetadata:
    name: str | None = None
    registrationStatus: str | None = None


@dataclass(frozen=True)
class AttendeeMetadata:
    name: str | None = None
    ticketType: str | None = None


@dataclass(frozen=True)
class DocumentMetadata:
    documentType: str | None = None
    name: str | None = None


@dataclass(frozen=True)
class StatusMetadata:
    status: str | None = None
    name: str | None = None


@dataclass(frozen=True)
class AmountMetadata:
    name: str | None = None
    amount: float | None = None


@dataclass(frozen=True)
class BoothMetadata:
    name: str | None = None
    boothNumber: str | None = None


@dataclass(frozen=True)
class ReviewMetadata:
    name: str | None = None
    rating: float | None = None


METADATA_SCHEMAS: dict[NotificationType, type] = {
    NotificationType.NEW_VENDOR: VendorRegistrationMetadata,
    NotificationType.NEW_ATTENDEE: AttendeeMetadata,
    NotificationType.PAYMENT_ATTACHMENT: DocumentMetadata,
    NotificationType.STATUS_UPDATE: StatusMetadata,
    NotificationType.TICKET_STATUS_UPDATE: StatusMetadata,
    NotificationType.NEW_SALE: AmountMetadata,
    NotificationType.NEW_TICKET: AmountMetadata,
    NotificationType.BOOTH_ASSIGNED: BoothMetadata,
    NotificationType.FESTIVAL_REVIEW: ReviewMetadata,
    NotificationType.NEW_REVIEW: ReviewMetadata,
}

_NUMERIC_METADATA_KEYS = frozenset({"amount", "rating"})

# Types that only concern the addressed identity; admins do not observe them.
USER_PRIVATE_TYPES: frozenset[NotificationType] = frozenset(
    {
        NotificationType.WELCOME,
        NotificationType.LOGIN_ERROR,
        NotificationType.LOGIN_ATTEMPT_UNVERIFIED,
        NotificationType.LOGIN_ATTEMPT_INACTIVE,
    }
)


def parse_notification_type(value: NotificationType | str) -> NotificationType:
    """Return the :class:`NotificationType` for ``value``."""

    try:
        return NotificationType(value)
    except ValueError as exc:
        raise ValidationError(f"Unknown notification type: {value!r}") from exc


def parse_role(value: Role | str | None) -> Role:
    """Return the :class:`Role` for ``value`` or raise :class:`ValidationError`."""

    if isinstance(value, Role):
        return value
    if value is None or value == "":
        raise ValidationError("A role is required")
    if not isinstance(value, str):
        raise ValidationError(f"Unknown role: {value!r}")
    try:
        return Role(value.strip().lower())
    except ValueError as exc:
        raise ValidationError(f"Unknown role: {value!r}") from exc


def normalize_target_roles(roles: Iterable[Role | str] | None) -> tuple[Role, ...]:
    """Parse ``roles`` into an ordered, duplicate-free tuple."""

    ordered: list[Role] = []
    for raw in roles or ():
        role = parse_role(raw)
        if role not in ordered:
            ordered.append(role)
    return tuple(ordered)


def build_metadata(
    notification_type: NotificationType, raw: Mapping[str, Any] | None
) -> dict[str, Any]:
    """Validate ``raw`` against the metadata shape declared for the type."""

    if not raw:
        return {}

    schema = METADATA_SCHEMAS.get(notification_type, NamedMetadata)
    allowed = {item.name for item in fields(schema)}
    unknown = sorted(set(raw) - allowed)
    if unknown:
        raise ValidationError(
            f"Unsupported metadata for {notification_type.value}: {', '.join(unknown)}"
        )

    cleaned: dict[str, Any] = {}
    for key, value in raw.items():
        if value is None:
            continue
        if key in _NUMERIC_METADATA_KEYS:
            if isinstance(value, bool) or not isinstance(value, Real):
                raise ValidationError(f"Metadata field '{key}' must be numeric")
            cleaned[key] = value
        else:
            cleaned[key] = value.value if isinstance(value, Enum) else str(value)
    return cleaned


@dataclass
class Notification:
    """A message addressed to one user, to one or more roles, or both."""

    id: int | None
    type: NotificationType
    message: str
    entity_id: str | None = None
    target_roles: tuple[Role, ...] = ()
    target_user_id: str | None = None
    metadata: dict[str, Any] = field(default_factory=dict)
    timestamp: datetime | None = None
    read: bool = False

    def __post_init__(self) -> None:
        self.type = parse_notification_type(self.type)
        self.target_roles = normalize_target_roles(self.target_roles)
        if self.target_user_id is not None:
            self.target_user_id = str(self.target_user_id).strip() or None
        if not self.target_roles and not self.target_user_id:
            raise ValidationError(
                "A notification must target at least one role or a specific user"
            )
        if not self.message or not self.message.strip():
            raise ValidationError("A notification message is required")
        self.metadata = build_metadata(self.type, self.metadata)

    def is_addressed_to(self, *, role: Role | None = None, user_id: str | None = None) -> bool:
        """Return ``True`` when ``role`` or ``user_id`` is one of the targets."""

        if user_id is not None and self.target_user_id == user_id:
            return True
        return role is not None and role in self.target_roles


__all__ = [
    "Role",
    "NotificationType",
    "Notification",
    "METADATA_SCHEMAS",
    "USER_PRIVATE_TYPES",
    "build_metadata",
    "normalize_target_roles",
    "parse_notification_type",
    "parse_role",
]

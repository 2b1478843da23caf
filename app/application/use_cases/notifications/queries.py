"""Identity-scoped queries over persisted notifications."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from app.domain.entities import Notification, Role, parse_role
from app.domain.exceptions import NotFoundError, ValidationError
from app.infrastructure.notifications import NotificationFanOut
from app.infrastructure.repositories import NotificationRepository


def resolve_identity(
    role: Role | str | None, user_id: str | None
) -> tuple[Role | None, str | None]:
    """Validate the caller identity used to scope notification queries."""

    normalized_user = str(user_id).strip() if user_id is not None else ""
    if not role and not normalized_user:
        raise ValidationError("Either role or user_id must be provided")
    parsed_role = parse_role(role) if role else None
    return parsed_role, normalized_user or None


def list_notifications(
    session: Session,
    *,
    role: Role | str | None = None,
    user_id: str | None = None,
    limit: int = 50,
    skip: int = 0,
) -> Sequence[Notification]:
    """Return the caller's notifications, newest first."""

    parsed_role, parsed_user = resolve_identity(role, user_id)
    if limit <= 0:
        raise ValidationError("limit must be a positive integer")
    if skip < 0:
        raise ValidationError("skip cannot be negative")
    return NotificationRepository(session).list_for_identity(
        role=parsed_role, user_id=parsed_user, limit=limit, skip=skip
    )


def count_unread_notifications(
    session: Session,
    *,
    role: Role | str | None = None,
    user_id: str | None = None,
) -> int:
    parsed_role, parsed_user = resolve_identity(role, user_id)
    return NotificationRepository(session).count_unread_for_identity(
        role=parsed_role, user_id=parsed_user
    )


def mark_notification_read(
    session: Session,
    notification_id: int,
    *,
    role: Role | str | None = None,
    user_id: str | None = None,
    fanout: NotificationFanOut | None = None,
) -> Notification:
    """Mark a notification addressed to the caller as read.

    Records that exist but target somebody else are reported as missing.
    Marking an already read record succeeds without touching it again.
    """

    parsed_role, parsed_user = resolve_identity(role, user_id)
    repository = NotificationRepository(session)
    notification = repository.get_for_identity(
        notification_id, role=parsed_role, user_id=parsed_user
    )
    if notification is None:
        raise NotFoundError("Notification not found or unauthorized")
    if notification.read:
        return notification

    updated = repository.mark_as_read(notification_id)
    if fanout is not None:
        fanout.publish_unread_counts(updated)
    return updated


__all__ = [
    "count_unread_notifications",
    "list_notifications",
    "mark_notification_read",
    "resolve_identity",
]

"""Snapshots pushed to a realtime client right after it authenticates."""

from __future__ import annotations

from typing import Any

from sqlalchemy.orm import Session

from app.domain.entities import Role
from app.infrastructure.notifications import serialize_notification
from app.infrastructure.repositories import NotificationRepository


def build_catch_up_events(
    session: Session,
    *,
    role: Role,
    user_id: str | None = None,
    page_size: int = 50,
) -> list[tuple[str, dict[str, Any]]]:
    """Return ``(event_name, payload)`` pairs describing missed notifications.

    A user gets ``userNotificationsUpdate`` scoped to its id or its role; every
    client also gets ``roleNotificationsUpdate`` scoped to the role alone.
    ``unread`` always lists every unread record, however many there are.
    """

    repository = NotificationRepository(session)
    events: list[tuple[str, dict[str, Any]]] = []
    if user_id:
        events.append(
            (
                "userNotificationsUpdate",
                _snapshot(repository, role=role, user_id=user_id, page_size=page_size),
            )
        )
    events.append(
        (
            "roleNotificationsUpdate",
            _snapshot(repository, role=role, user_id=None, page_size=page_size),
        )
    )
    return events


def _snapshot(
    repository: NotificationRepository,
    *,
    role: Role,
    user_id: str | None,
    page_size: int,
) -> dict[str, Any]:
    recent = repository.list_for_identity(role=role, user_id=user_id, limit=page_size)
    unread = repository.list_for_identity(
        role=role, user_id=user_id, limit=None, unread_only=True
    )
    return {
        "role": role.value,
        "userId": user_id,
        "notifications": [serialize_notification(item) for item in recent],
        "unread": [serialize_notification(item) for item in unread],
        "unreadCount": repository.count_unread_for_identity(role=role, user_id=user_id),
    }


__all__ = ["build_catch_up_events"]

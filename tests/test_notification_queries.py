"""Tests for identity-scoped notification queries and read tracking."""

from __future__ import annotations

import pytest

from app.application.use_cases.notifications import (
    build_catch_up_events,
    count_unread_notifications,
    list_notifications,
    mark_notification_read,
)
from app.domain.entities import Notification, Role
from app.domain.exceptions import NotFoundError, ValidationError
from app.infrastructure.repositories import NotificationRepository


def _store(session, **overrides) -> Notification:
    values = {"id": None, "type": "new_user", "message": "Someone joined"}
    values.update(overrides)
    return NotificationRepository(session).create(Notification(**values))


def test_identity_matches_user_or_role(session) -> None:
    for_user = _store(session, type="welcome", message="Welcome!", target_user_id="U1")
    for_role = _store(session, message="Festival starts soon", target_roles=["user"])
    for_admin = _store(session, message="New signup", target_roles=["admin"])

    by_user = list_notifications(session, user_id="U1")
    by_both = list_notifications(session, role="user", user_id="U1")
    by_admin = list_notifications(session, role="admin")

    assert [item.id for item in by_user] == [for_user.id]
    assert [item.id for item in by_both] == [for_role.id, for_user.id]
    assert [item.id for item in by_admin] == [for_admin.id]


def test_identity_is_required(session) -> None:
    with pytest.raises(ValidationError, match="Either role or user_id"):
        list_notifications(session)
    with pytest.raises(ValidationError):
        count_unread_notifications(session, role="", user_id="  ")
    with pytest.raises(ValidationError):
        list_notifications(session, role="admin", limit=0)


def test_pagination_skips_newest_records(session) -> None:
    stored = [_store(session, message=f"Signup {index}", target_roles=["admin"]) for index in range(4)]

    page = list_notifications(session, role="admin", limit=2, skip=1)

    assert [item.id for item in page] == [stored[2].id, stored[1].id]


def test_mark_read_is_idempotent(session) -> None:
    notification = _store(session, target_roles=["admin"])

    first = mark_notification_read(session, notification.id, role="admin")
    second = mark_notification_read(session, notification.id, role="admin")

    assert first.read is True
    assert second.read is True
    assert count_unread_notifications(session, role="admin") == 0


def test_mark_read_requires_an_addressed_identity(session) -> None:
    notification = _store(session, target_roles=["admin"])

    with pytest.raises(NotFoundError):
        mark_notification_read(session, notification.id, role="user", user_id="U1")
    with pytest.raises(NotFoundError):
        mark_notification_read(session, 999, role="admin")

    assert NotificationRepository(session).get(notification.id).read is False


@pytest.mark.anyio
async def test_mark_read_pushes_unread_counts(session, fanout, connect) -> None:
    _, vendor = await connect("vendor", "5")
    notification = _store(
        session, type="status_update", message="Approved", target_roles=["vendor"], target_user_id="5"
    )
    _store(session, message="Another", target_roles=["vendor"])

    mark_notification_read(session, notification.id, user_id="5", fanout=fanout)
    await fanout.wait_idle()

    assert vendor.events("unreadCountUpdate") == [
        {"userId": "5", "count": 0},
        {"role": "vendor", "count": 1},
    ]

    # Nothing changes, so nothing is pushed.
    mark_notification_read(session, notification.id, user_id="5", fanout=fanout)
    await fanout.wait_idle()
    assert len(vendor.events("unreadCountUpdate")) == 2


def test_catch_up_describes_user_and_role_views(session) -> None:
    personal = _store(session, type="welcome", message="Welcome!", target_user_id="U1")
    shared = _store(session, message="Gates open at 6", target_roles=["user"])
    mark_notification_read(session, shared.id, role="user")

    events = dict(build_catch_up_events(session, role=Role.USER, user_id="U1"))

    assert list(events) == ["userNotificationsUpdate", "roleNotificationsUpdate"]
    user_view = events["userNotificationsUpdate"]
    assert user_view["role"] == "user"
    assert user_view["userId"] == "U1"
    assert [item["id"] for item in user_view["notifications"]] == [shared.id, personal.id]
    assert [item["id"] for item in user_view["unread"]] == [personal.id]
    assert user_view["unreadCount"] == 1

    role_view = events["roleNotificationsUpdate"]
    assert role_view["userId"] is None
    assert [item["id"] for item in role_view["notifications"]] == [shared.id]
    assert role_view["unreadCount"] == 0


def test_catch_up_without_user_only_sends_role_view(session) -> None:
    events = build_catch_up_events(session, role=Role.ADMIN)

    assert [name for name, _ in events] == ["roleNotificationsUpdate"]
    assert events[0][1]["notifications"] == []


def test_catch_up_lists_every_unread_record_beyond_the_page(session) -> None:
    stored = [
        _store(session, message=f"Signup {index}", target_roles=["admin"]) for index in range(5)
    ]

    (_, snapshot), = build_catch_up_events(session, role=Role.ADMIN, page_size=2)

    assert [item["id"] for item in snapshot["notifications"]] == [stored[4].id, stored[3].id]
    assert [item["id"] for item in snapshot["unread"]] == [item.id for item in reversed(stored)]
    assert len(snapshot["unread"]) == snapshot["unreadCount"] == 5

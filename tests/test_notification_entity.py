"""Unit tests for the notification domain entity."""

from __future__ import annotations

import pytest

from app.domain.entities import (
    Notification,
    NotificationType,
    Role,
    build_metadata,
    parse_role,
    sentiment_for_rating,
)
from app.domain.exceptions import ValidationError


def test_notification_requires_a_target() -> None:
    with pytest.raises(ValidationError):
        Notification(id=None, type="new_vendor", message="New vendor registered: Ana")

    with pytest.raises(ValidationError):
        Notification(
            id=None,
            type="new_vendor",
            message="New vendor registered: Ana",
            target_roles=(),
            target_user_id="   ",
        )


def test_target_roles_are_parsed_and_deduplicated_in_order() -> None:
    notification = Notification(
        id=None,
        type=NotificationType.STATUS_UPDATE,
        message="Your registration has been approved",
        target_roles=["vendor", "ADMIN", Role.VENDOR],
        target_user_id=42,
    )

    assert notification.target_roles == (Role.VENDOR, Role.ADMIN)
    assert notification.target_user_id == "42"
    assert notification.is_addressed_to(user_id="42")
    assert notification.is_addressed_to(role=Role.ADMIN)
    assert not notification.is_addressed_to(role=Role.USER, user_id="7")


def test_unknown_type_and_role_are_rejected() -> None:
    with pytest.raises(ValidationError):
        Notification(id=None, type="party_started", message="hi", target_roles=["user"])

    with pytest.raises(ValidationError):
        Notification(id=None, type="welcome", message="hi", target_roles=["guest"])

    with pytest.raises(ValidationError):
        parse_role(None)
    assert parse_role(" Vendor ") is Role.VENDOR


def test_metadata_follows_the_shape_of_its_type() -> None:
    assert build_metadata(
        NotificationType.NEW_SALE, {"name": "Taco stand", "amount": 12.5}
    ) == {"name": "Taco stand", "amount": 12.5}
    assert build_metadata(NotificationType.BOOTH_ASSIGNED, {"boothNumber": 7, "name": None}) == {
        "boothNumber": "7"
    }

    with pytest.raises(ValidationError, match="rating"):
        build_metadata(NotificationType.NEW_REVIEW, {"rating": "five"})
    with pytest.raises(ValidationError, match="amount"):
        build_metadata(NotificationType.NEW_TICKET, {"amount": True})
    with pytest.raises(ValidationError, match="boothNumber"):
        build_metadata(NotificationType.WELCOME, {"boothNumber": "A1"})


def test_message_is_required() -> None:
    with pytest.raises(ValidationError):
        Notification(id=None, type="welcome", message="  ", target_user_id="u-1")


def test_role_members_parse_to_themselves() -> None:
    assert parse_role(Role.ADMIN) is Role.ADMIN

    notification = Notification(
        id=None, type="new_user", message="New signup", target_roles=(Role.ADMIN,)
    )

    assert notification.target_roles == (Role.ADMIN,)
    with pytest.raises(ValidationError):
        parse_role(3)


def test_attendee_metadata_carries_the_ticket_type() -> None:
    assert build_metadata(
        NotificationType.NEW_ATTENDEE, {"name": "Priya", "ticketType": "VIP"}
    ) == {"name": "Priya", "ticketType": "VIP"}


def test_review_sentiment_follows_the_rating() -> None:
    assert [sentiment_for_rating(rating) for rating in range(1, 6)] == [
        "Negative",
        "Negative",
        "Neutral",
        "Positive",
        "Positive",
    ]

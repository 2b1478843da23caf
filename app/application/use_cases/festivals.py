"""Use cases for managing festivals."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import replace
from datetime import date

from sqlalchemy.orm import Session

from app.application.use_cases.notifications import broadcast_festivals
from app.domain.entities import FESTIVAL_CATEGORIES, FESTIVAL_STATUSES, Festival
from app.infrastructure.notifications import NotificationFanOut
from app.infrastructure.repositories import FestivalRepository


def _ensure_choice(value: str, allowed: Sequence[str], label: str) -> str:
    if value not in allowed:
        raise ValueError(f"Invalid {label}. Must be one of: {', '.join(allowed)}")
    return value


def list_festivals(session: Session, *, status: str | None = None) -> Sequence[Festival]:
    return FestivalRepository(session).list(status=status)


def get_festival(session: Session, festival_id: int) -> Festival:
    festival = FestivalRepository(session).get(festival_id)
    if festival is None:
        raise ValueError("Festival not found")
    return festival


def create_festival(
    session: Session,
    fanout: NotificationFanOut,
    *,
    name: str,
    organizer: str,
    date: date,
    status: str,
    address: str,
    category: str,
) -> Festival:
    """Create a festival and resend the festival list to connected dashboards."""

    festival = FestivalRepository(session).create(
        Festival(
            id=None,
            name=name.strip(),
            organizer=organizer.strip(),
            date=date,
            status=_ensure_choice(status, FESTIVAL_STATUSES, "status"),
            address=address.strip(),
            category=_ensure_choice(category, FESTIVAL_CATEGORIES, "category"),
        )
    )
    broadcast_festivals(fanout, session)
    return festival


def update_festival(
    session: Session,
    fanout: NotificationFanOut,
    *,
    festival_id: int,
    **changes: object,
) -> Festival:
    """Apply ``changes`` (only non-``None`` values) to an existing festival."""

    current = get_festival(session, festival_id)
    updates = {key: value for key, value in changes.items() if value is not None}
    if "status" in updates:
        _ensure_choice(str(updates["status"]), FESTIVAL_STATUSES, "status")
    if "category" in updates:
        _ensure_choice(str(updates["category"]), FESTIVAL_CATEGORIES, "category")

    festival = FestivalRepository(session).update(replace(current, **updates))
    broadcast_festivals(fanout, session)
    return festival


def delete_festival(session: Session, fanout: NotificationFanOut, festival_id: int) -> None:
    get_festival(session, festival_id)
    FestivalRepository(session).delete(festival_id)
    broadcast_festivals(fanout, session)


__all__ = [
    "create_festival",
    "delete_festival",
    "get_festival",
    "list_festivals",
    "update_festival",
]

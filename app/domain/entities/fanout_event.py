"""Domain events handed to the fan-out engine after a successful write."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Mapping, Union

from .notification import NotificationType, Role


@dataclass(frozen=True)
class TargetedNotification:
    """A business fact that must be persisted and pushed to its targets.

    ``notify_admin`` overrides the per-type admin observer policy when set.
    """

    type: NotificationType | str
    message: str
    entity_id: str | None = None
    target_roles: Iterable[Role | str] = ()
    target_user_id: str | None = None
    metadata: Mapping[str, Any] = field(default_factory=dict)
    notify_admin: bool | None = None


@dataclass(frozen=True)
class ListRefresh:
    """Resend the authoritative snapshot of a collection to every client."""

    collection_name: str
    fetch: Callable[[], Any]

    @property
    def event_name(self) -> str:
        return f"{self.collection_name}Update"


@dataclass(frozen=True)
class StatusCountsRefresh:
    """Resend aggregate counters keyed by status value to every client."""

    event_name: str
    fetch: Callable[[], Mapping[str, Any]]


FanOutEvent = Union[TargetedNotification, ListRefresh, StatusCountsRefresh]


__all__ = [
    "FanOutEvent",
    "ListRefresh",
    "StatusCountsRefresh",
    "TargetedNotification",
]

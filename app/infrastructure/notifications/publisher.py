"""Fan-out of domain events to persisted notifications and websocket groups."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Awaitable, Callable, Set

from anyio import from_thread
from fastapi.encoders import jsonable_encoder
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.domain.entities import (
    USER_PRIVATE_TYPES,
    FanOutEvent,
    ListRefresh,
    Notification,
    Role,
    StatusCountsRefresh,
    TargetedNotification,
)
from app.domain.exceptions import DeliveryFailure, ValidationError
from app.infrastructure.repositories import NotificationRepository
from app.utils import isoformat_or_none, now_in_app_timezone

from .manager import ConnectionRegistry, role_group, user_group

logger = logging.getLogger(__name__)

SessionFactory = Callable[[], Session]


class NotificationFanOut:
    """Translate domain events into notification records and live pushes.

    ``publish`` must only be called once the originating write committed.
    Target validation errors are raised to the caller; every other failure
    (store unavailable, closed sockets, unserializable snapshots) is logged
    and swallowed. Pushes run as background tasks on the event loop so they
    never hold up the HTTP response.
    """

    def __init__(
        self,
        registry: ConnectionRegistry,
        session_factory: SessionFactory,
        *,
        admin_observes: bool = True,
    ) -> None:
        self._registry = registry
        self._session_factory = session_factory
        self._admin_observes = admin_observes
        self._tasks: Set[asyncio.Task[Any]] = set()

    @property
    def registry(self) -> ConnectionRegistry:
        return self._registry

    @property
    def session_factory(self) -> SessionFactory:
        return self._session_factory

    def publish(self, event: FanOutEvent) -> Notification | None:
        """Fan out ``event``; return the stored record for targeted notifications."""

        if isinstance(event, TargetedNotification):
            return self._publish_notification(event)
        if isinstance(event, ListRefresh):
            self._publish_snapshot(event.event_name, event.fetch)
            return None
        if isinstance(event, StatusCountsRefresh):
            self._publish_snapshot(event.event_name, event.fetch)
            return None
        raise TypeError(f"Unsupported fan-out event: {event!r}")

    def dispatch(self, *events: FanOutEvent) -> None:
        """Publish ``events`` on behalf of a resource handler.

        Invalid notifications are logged instead of raised: the domain write
        that produced them already succeeded.
        """

        for event in events:
            try:
                self.publish(event)
            except ValidationError:
                logger.exception("Discarded invalid notification event %r", event)

    def publish_unread_counts(self, notification: Notification) -> None:
        """Push refreshed unread counters to every group ``notification`` targets."""

        session = self._session_factory()
        try:
            repository = NotificationRepository(session)
            updates: list[tuple[str, dict[str, Any]]] = []
            if notification.target_user_id:
                count = repository.count_unread_for_identity(
                    user_id=notification.target_user_id
                )
                updates.append(
                    (
                        user_group(notification.target_user_id),
                        {"userId": notification.target_user_id, "count": count},
                    )
                )
            for role in notification.target_roles:
                count = repository.count_unread_for_identity(role=role)
                updates.append((role_group(role), {"role": role.value, "count": count}))
        except SQLAlchemyError:
            logger.exception(
                "Could not compute unread counts after notification %s was read",
                notification.id,
            )
            return
        finally:
            session.close()

        for group, payload in updates:
            self._spawn(
                f"unreadCountUpdate to {group}",
                self._registry.broadcast_to_group,
                group,
                "unreadCountUpdate",
                payload,
            )

    async def wait_idle(self) -> None:
        """Wait until every scheduled push has finished."""

        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    async def aclose(self) -> None:
        await self.wait_idle()

    def observed_by_admin(self, notification: Notification, notify_admin: bool | None) -> bool:
        """Return ``True`` when admins get an extra ``adminNotification`` push."""

        if Role.ADMIN in notification.target_roles:
            return False
        if notify_admin is not None:
            return notify_admin
        return self._admin_observes and notification.type not in USER_PRIVATE_TYPES

    def _publish_notification(self, event: TargetedNotification) -> Notification:
        notification = Notification(
            id=None,
            type=event.type,
            message=event.message,
            entity_id=str(event.entity_id) if event.entity_id is not None else None,
            target_roles=tuple(event.target_roles or ()),
            target_user_id=(
                str(event.target_user_id) if event.target_user_id is not None else None
            ),
            metadata=dict(event.metadata or {}),
            timestamp=now_in_app_timezone(),
        )
        try:
            notification = self._store(notification)
        except DeliveryFailure:
            logger.exception(
                "Notification '%s' for %s was not stored; pushing it anyway",
                notification.type.value,
                notification.entity_id,
            )

        self._spawn(
            f"{notification.type.value} notification",
            self._deliver_notification,
            notification,
            self.observed_by_admin(notification, event.notify_admin),
        )
        return notification

    def _store(self, notification: Notification) -> Notification:
        session = self._session_factory()
        try:
            return NotificationRepository(session).create(notification)
        except SQLAlchemyError as exc:
            session.rollback()
            raise DeliveryFailure("Notification store unavailable") from exc
        finally:
            session.close()

    async def _deliver_notification(self, notification: Notification, notify_admin: bool) -> None:
        payload = serialize_notification(notification)
        if notification.target_user_id:
            await self._registry.broadcast_to_group(
                user_group(notification.target_user_id), "userNotification", payload
            )
        for role in notification.target_roles:
            await self._registry.broadcast_to_group(
                role_group(role), f"{role.value}Notification", payload
            )
        if notify_admin:
            await self._registry.broadcast_to_group(
                role_group(Role.ADMIN), "adminNotification", payload
            )

    def _publish_snapshot(self, event_name: str, fetch: Callable[[], Any]) -> None:
        try:
            snapshot = jsonable_encoder(fetch())
        except Exception:  # the query is arbitrary caller code
            logger.exception("Could not build the '%s' snapshot", event_name)
            return
        self._spawn(event_name, self._registry.broadcast_to_all, event_name, snapshot)

    def _spawn(
        self, description: str, func: Callable[..., Awaitable[Any]], *args: Any
    ) -> None:
        try:
            asyncio.get_running_loop()
        except RuntimeError:
            try:
                from_thread.run_sync(self._start_task, description, func, args)
            except RuntimeError:
                logger.warning("No event loop available, dropped realtime %s", description)
        else:
            self._start_task(description, func, args)

    def _start_task(
        self, description: str, func: Callable[..., Awaitable[Any]], args: tuple[Any, ...]
    ) -> None:
        task = asyncio.get_running_loop().create_task(self._run_guarded(description, func, args))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    @staticmethod
    async def _run_guarded(
        description: str, func: Callable[..., Awaitable[Any]], args: tuple[Any, ...]
    ) -> None:
        try:
            await func(*args)
        except Exception:  # pushes are best-effort
            logger.exception("Realtime delivery of %s failed", description)


def serialize_notification(notification: Notification) -> dict[str, Any]:
    """Return the JSON representation clients receive for ``notification``."""

    return {
        "id": notification.id,
        "type": notification.type.value,
        "message": notification.message,
        "timestamp": isoformat_or_none(notification.timestamp),
        "read": notification.read,
        "entityId": notification.entity_id,
        "targetRoles": [role.value for role in notification.target_roles],
        "targetUserId": notification.target_user_id,
        "metadata": dict(notification.metadata),
    }


__all__ = ["NotificationFanOut", "SessionFactory", "serialize_notification"]

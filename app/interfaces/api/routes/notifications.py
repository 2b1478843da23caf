"""Endpoints and websocket handler for realtime notifications."""

from __future__ import annotations

import logging

from anyio import to_thread
from fastapi import APIRouter, Depends, HTTPException, Query, WebSocket, WebSocketDisconnect, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from starlette.websockets import WebSocketState

from app.application.use_cases.notifications import (
    build_catch_up_events,
    count_unread_notifications,
    list_notifications as list_notifications_uc,
    mark_notification_read as mark_notification_read_uc,
)
from app.config import get_settings
from app.domain.entities import Notification, Role, parse_role
from app.domain.exceptions import InvalidAuthentication, NotFoundError, ValidationError
from app.infrastructure.database import get_db
from app.infrastructure.notifications import (
    POLICY_VIOLATION,
    NotificationFanOut,
    serialize_notification,
)
from app.interfaces.api.dependencies import get_fanout
from app.interfaces.api.schemas import NotificationRead, UnreadCountRead

router = APIRouter(prefix="/notifications", tags=["notifications"])
logger = logging.getLogger(__name__)


def _notification_to_schema(notification: Notification) -> NotificationRead:
    return NotificationRead.model_validate(serialize_notification(notification))


@router.get("/", response_model=list[NotificationRead])
def list_notifications(
    role: str | None = Query(default=None),
    user_id: str | None = Query(default=None),
    limit: int | None = Query(default=None, ge=1),
    skip: int = Query(default=0, ge=0),
    db: Session = Depends(get_db),
) -> list[NotificationRead]:
    """Return the notifications addressed to ``user_id`` or ``role``, newest first."""

    settings = get_settings()
    page_size = min(limit or settings.notification_page_size, settings.notification_max_page_size)
    try:
        notifications = list_notifications_uc(
            db, role=role, user_id=user_id, limit=page_size, skip=skip
        )
    except ValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return [_notification_to_schema(notification) for notification in notifications]


@router.get("/unread-count", response_model=UnreadCountRead)
def unread_count(
    role: str | None = Query(default=None),
    user_id: str | None = Query(default=None),
    db: Session = Depends(get_db),
) -> UnreadCountRead:
    try:
        count = count_unread_notifications(db, role=role, user_id=user_id)
    except ValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return UnreadCountRead(count=count)


@router.patch("/{notification_id}/read", response_model=NotificationRead)
def mark_notification_read(
    notification_id: int,
    role: str | None = Query(default=None),
    user_id: str | None = Query(default=None),
    db: Session = Depends(get_db),
    fanout: NotificationFanOut = Depends(get_fanout),
) -> NotificationRead:
    """Mark a notification read on behalf of the user or role it targets."""

    try:
        notification = mark_notification_read_uc(
            db, notification_id, role=role, user_id=user_id, fanout=fanout
        )
    except ValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except NotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return _notification_to_schema(notification)


@router.websocket("/ws")
async def notifications_websocket(websocket: WebSocket) -> None:
    """Stream notifications to a client once it authenticates with its role.

    Until then the connection only receives broadcasts meant for everybody.
    """

    fanout: NotificationFanOut = websocket.app.state.fanout
    registry = fanout.registry
    connection_id = await registry.connect(websocket)
    try:
        while True:
            try:
                message = await websocket.receive_json()
            except WebSocketDisconnect:
                raise
            except Exception:
                if websocket.application_state != WebSocketState.CONNECTED:
                    break
                continue

            if not isinstance(message, dict):
                continue

            message_type = message.get("type")
            if message_type == "ping":
                await websocket.send_json({"type": "pong"})
                continue

            if message_type == "authenticate":
                user_id = message.get("userId")
                try:
                    registry.authenticate(
                        connection_id, role=message.get("role"), user_id=user_id
                    )
                except InvalidAuthentication as exc:
                    logger.warning(
                        "Closing realtime client %s: %s", connection_id, exc
                    )
                    await registry.close(connection_id, code=POLICY_VIOLATION)
                    return
                await _send_catch_up(
                    fanout,
                    connection_id,
                    role=parse_role(message.get("role")),
                    user_id=str(user_id).strip() if user_id is not None else None,
                )
    except WebSocketDisconnect:
        logger.info("Realtime client disconnected: %s", connection_id)
    finally:
        registry.disconnect(connection_id)


async def _send_catch_up(
    fanout: NotificationFanOut,
    connection_id: str,
    *,
    role: Role,
    user_id: str | None,
) -> None:
    settings = get_settings()

    def _build() -> list[tuple[str, dict]]:
        session = fanout.session_factory()
        try:
            return build_catch_up_events(
                session,
                role=role,
                user_id=user_id or None,
                page_size=settings.notification_page_size,
            )
        finally:
            session.close()

    try:
        events = await to_thread.run_sync(_build)
    except SQLAlchemyError:
        logger.exception("Could not load catch-up notifications for %s", connection_id)
        return

    for event_name, payload in events:
        await fanout.registry.send_to_connection(connection_id, event_name, payload)


__all__ = ["router"]

"""Persistence helpers for notification entities."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import false, or_
from sqlalchemy.orm import Query, Session

from app.domain.entities import Notification, Role
from app.infrastructure.models import NotificationModel, NotificationTargetRoleModel
from app.utils import ensure_app_naive_datetime, ensure_app_timezone, now_in_app_timezone


class NotificationRepository:
    """Provide storage and identity-scoped queries for :class:`Notification`.

    Every query takes the caller identity as ``role`` and/or ``user_id``; a
    record matches when ``target_user_id == user_id`` or ``role`` is one of its
    target roles.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def create(self, notification: Notification) -> Notification:
        model = NotificationModel(
            type=notification.type.value,
            message=notification.message,
            timestamp=ensure_app_naive_datetime(
                notification.timestamp or now_in_app_timezone()
            ),
            read=notification.read,
            entity_id=notification.entity_id,
            target_user_id=notification.target_user_id,
            details=dict(notification.metadata),
        )
        model.target_roles = [
            NotificationTargetRoleModel(role=role.value, position=position)
            for position, role in enumerate(notification.target_roles)
        ]
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def get(self, notification_id: int) -> Notification | None:
        model = self.session.get(NotificationModel, notification_id)
        return self._to_entity(model) if model else None

    def get_for_identity(
        self,
        notification_id: int,
        *,
        role: Role | None = None,
        user_id: str | None = None,
    ) -> Notification | None:
        model = (
            self._identity_query(role=role, user_id=user_id)
            .filter(NotificationModel.id == notification_id)
            .one_or_none()
        )
        return self._to_entity(model) if model else None

    def list_for_identity(
        self,
        *,
        role: Role | None = None,
        user_id: str | None = None,
        limit: int | None = 50,
        skip: int = 0,
        unread_only: bool = False,
    ) -> Sequence[Notification]:
        query = self._identity_query(role=role, user_id=user_id)
        if unread_only:
            query = query.filter(NotificationModel.read.is_(False))
        query = query.order_by(
            NotificationModel.timestamp.desc(), NotificationModel.id.desc()
        )
        if skip:
            query = query.offset(skip)
        if limit is not None:
            query = query.limit(limit)
        return [self._to_entity(model) for model in query.all()]

    def count_unread_for_identity(
        self, *, role: Role | None = None, user_id: str | None = None
    ) -> int:
        return (
            self._identity_query(role=role, user_id=user_id)
            .filter(NotificationModel.read.is_(False))
            .count()
        )

    def mark_as_read(self, notification_id: int) -> Notification:
        model = self.session.get(NotificationModel, notification_id)
        if model is None:
            msg = f"Notification with id {notification_id} not found"
            raise ValueError(msg)
        if not model.read:
            model.read = True
            self.session.add(model)
            self.session.commit()
            self.session.refresh(model)
        return self._to_entity(model)

    def _identity_query(
        self, *, role: Role | None, user_id: str | None
    ) -> Query:
        conditions = []
        if user_id:
            conditions.append(NotificationModel.target_user_id == user_id)
        if role is not None:
            conditions.append(
                NotificationModel.target_roles.any(
                    NotificationTargetRoleModel.role == role.value
                )
            )
        query = self.session.query(NotificationModel)
        if not conditions:
            return query.filter(false())
        return query.filter(or_(*conditions))

    @staticmethod
    def _to_entity(model: NotificationModel) -> Notification:
        return Notification(
            id=model.id,
            type=model.type,
            message=model.message,
            entity_id=model.entity_id,
            target_roles=tuple(target.role for target in model.target_roles),
            target_user_id=model.target_user_id,
            metadata=dict(model.details or {}),
            timestamp=ensure_app_timezone(model.timestamp),
            read=bool(model.read),
        )


__all__ = ["NotificationRepository"]

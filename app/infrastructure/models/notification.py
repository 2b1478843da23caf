"""SQLAlchemy models for persisted notifications."""

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, JSON, String, Text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import expression

from app.infrastructure.database import Base


class NotificationModel(Base):
    """Database representation for notifications."""

    __tablename__ = "notification"

    id = Column(Integer, primary_key=True, index=True)
    type = Column(String(50), nullable=False)
    message = Column(Text, nullable=False)
    timestamp = Column(DateTime(), nullable=False, index=True)
    read = Column(
        Boolean, nullable=False, default=False, server_default=expression.false()
    )
    entity_id = Column(String(64), nullable=True, index=True)
    target_user_id = Column(String(64), nullable=True, index=True)
    # ``metadata`` is reserved on declarative classes.
    details = Column("metadata", JSON, nullable=False, default=dict)

    target_roles = relationship(
        "NotificationTargetRoleModel",
        back_populates="notification",
        order_by="NotificationTargetRoleModel.position",
        cascade="all, delete-orphan",
        passive_deletes=True,
        lazy="selectin",
    )


class NotificationTargetRoleModel(Base):
    """One role a notification is addressed to."""

    __tablename__ = "notification_target_role"

    notification_id = Column(
        Integer,
        ForeignKey("notification.id", ondelete="CASCADE"),
        primary_key=True,
    )
    role = Column(String(20), primary_key=True, index=True)
    position = Column(Integer, nullable=False, default=0)

    notification = relationship("NotificationModel", back_populates="target_roles")


__all__ = ["NotificationModel", "NotificationTargetRoleModel"]

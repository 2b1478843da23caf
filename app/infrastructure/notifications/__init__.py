"""Realtime notification helpers for the infrastructure layer."""

from .manager import POLICY_VIOLATION, ConnectionRegistry, role_group, user_group
from .publisher import NotificationFanOut, SessionFactory, serialize_notification

__all__ = [
    "ConnectionRegistry",
    "POLICY_VIOLATION",
    "role_group",
    "user_group",
    "NotificationFanOut",
    "SessionFactory",
    "serialize_notification",
]

"""Public helpers for emitting and querying notifications."""

from .catch_up import build_catch_up_events
from .events import (
    broadcast_festival_reviews,
    broadcast_festivals,
    broadcast_reviews,
    broadcast_sales,
    broadcast_vendors,
    notify_festival_review,
    notify_new_review,
    notify_new_sale,
    notify_payment_attachment,
    notify_vendor_payment_status,
    notify_vendor_registered,
    notify_vendor_registration_status,
    serialize_festival,
    serialize_festival_review,
    serialize_review,
    serialize_sale,
    serialize_vendor,
)
from .queries import (
    count_unread_notifications,
    list_notifications,
    mark_notification_read,
    resolve_identity,
)

__all__ = [
    "build_catch_up_events",
    "broadcast_festival_reviews",
    "broadcast_festivals",
    "broadcast_reviews",
    "broadcast_sales",
    "broadcast_vendors",
    "notify_festival_review",
    "notify_new_review",
    "notify_new_sale",
    "notify_payment_attachment",
    "notify_vendor_payment_status",
    "notify_vendor_registered",
    "notify_vendor_registration_status",
    "serialize_festival",
    "serialize_festival_review",
    "serialize_review",
    "serialize_sale",
    "serialize_vendor",
    "count_unread_notifications",
    "list_notifications",
    "mark_notification_read",
    "resolve_identity",
]

"""Domain entities exposed by the application."""

from .fanout_event import FanOutEvent, ListRefresh, StatusCountsRefresh, TargetedNotification
from .festival import FESTIVAL_CATEGORIES, FESTIVAL_STATUSES, Festival
from .notification import (
    METADATA_SCHEMAS,
    USER_PRIVATE_TYPES,
    Notification,
    NotificationType,
    Role,
    build_metadata,
    normalize_target_roles,
    parse_notification_type,
    parse_role,
)
from .review import (
    MAX_RATING,
    MIN_RATING,
    FestivalReview,
    Review,
    sentiment_for_rating,
)
from .sale import Sale
from .vendor import (
    REVIEW_STATUS_APPROVED,
    REVIEW_STATUS_PENDING,
    REVIEW_STATUS_REJECTED,
    REVIEW_STATUSES,
    STALL_TYPES,
    Vendor,
)

__all__ = [
    "FanOutEvent",
    "ListRefresh",
    "StatusCountsRefresh",
    "TargetedNotification",
    "Festival",
    "FESTIVAL_CATEGORIES",
    "FESTIVAL_STATUSES",
    "Notification",
    "NotificationType",
    "Role",
    "METADATA_SCHEMAS",
    "USER_PRIVATE_TYPES",
    "build_metadata",
    "normalize_target_roles",
    "parse_notification_type",
    "parse_role",
    "FestivalReview",
    "MAX_RATING",
    "MIN_RATING",
    "Review",
    "Sale",
    "sentiment_for_rating",
    "Vendor",
    "REVIEW_STATUS_PENDING",
    "REVIEW_STATUS_APPROVED",
    "REVIEW_STATUS_REJECTED",
    "REVIEW_STATUSES",
    "STALL_TYPES",
]

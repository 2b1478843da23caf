"""ORM models used by the application infrastructure."""

from .festival import FestivalModel
from .notification import NotificationModel, NotificationTargetRoleModel
from .review import FestivalReviewModel, ReviewModel
from .sale import SaleModel
from .vendor import VendorModel

__all__ = [
    "FestivalModel",
    "FestivalReviewModel",
    "NotificationModel",
    "NotificationTargetRoleModel",
    "ReviewModel",
    "SaleModel",
    "VendorModel",
]

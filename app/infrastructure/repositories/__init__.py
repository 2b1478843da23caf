"""Repository implementations for infrastructure layer."""

from .festival_repository import FestivalRepository
from .notification_repository import NotificationRepository
from .review_repository import FestivalReviewRepository, ReviewRepository
from .sale_repository import SaleRepository
from .vendor_repository import VendorRepository

__all__ = [
    "FestivalRepository",
    "FestivalReviewRepository",
    "NotificationRepository",
    "ReviewRepository",
    "SaleRepository",
    "VendorRepository",
]

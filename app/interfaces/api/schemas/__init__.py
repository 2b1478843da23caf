from .festival import FestivalCreate, FestivalRead, FestivalUpdate
from .notification import NotificationRead, UnreadCountRead
from .review import FestivalReviewCreate, FestivalReviewRead, ReviewCreate, ReviewRead
from .sale import SaleCreate, SaleRead
from .vendor import (
    VendorCreate,
    VendorPaymentAttachment,
    VendorRead,
    VendorStatusCountsRead,
    VendorStatusUpdate,
)

__all__ = [
    "FestivalCreate",
    "FestivalRead",
    "FestivalReviewCreate",
    "FestivalReviewRead",
    "FestivalUpdate",
    "NotificationRead",
    "ReviewCreate",
    "ReviewRead",
    "SaleCreate",
    "SaleRead",
    "UnreadCountRead",
    "VendorCreate",
    "VendorPaymentAttachment",
    "VendorRead",
    "VendorStatusCountsRead",
    "VendorStatusUpdate",
]

"""Use cases for managing festival vendors."""

from .create_vendor import create_vendor
from .get_vendor import get_vendor, get_vendor_status_counts, list_vendors
from .update_vendor_status import (
    attach_payment_receipt,
    update_payment_status,
    update_registration_status,
)

__all__ = [
    "attach_payment_receipt",
    "create_vendor",
    "get_vendor",
    "get_vendor_status_counts",
    "list_vendors",
    "update_payment_status",
    "update_registration_status",
]

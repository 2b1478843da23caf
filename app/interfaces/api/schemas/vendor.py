"""Schemas for vendor endpoints."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

ReviewStatus = Literal["Pending", "Approved", "Rejected"]


class VendorCreate(BaseModel):
    """Payload required to register a vendor."""

    name: str = Field(..., min_length=2, max_length=120)
    email: str = Field(..., max_length=120)
    phone: str = Field(..., max_length=30)
    stall_name: str = Field(..., min_length=2, max_length=120)
    stall_type: str
    festival_id: int | None = None


class VendorStatusUpdate(BaseModel):
    status: ReviewStatus


class VendorPaymentAttachment(BaseModel):
    """Name of the receipt file stored by the upload service."""

    file_name: str = Field(..., min_length=1, max_length=255)


class VendorRead(BaseModel):
    id: int
    name: str
    email: str
    phone: str
    stall_name: str
    stall_type: str
    festival_id: int | None
    registration_status: str
    payment_status: str | None
    payment_attachment: str | None
    created_at: datetime | None

    model_config = ConfigDict(from_attributes=True)


class VendorStatusCountsRead(BaseModel):
    registration: dict[str, int]
    payment: dict[str, int]
    paymentVendors: int


__all__ = [
    "ReviewStatus",
    "VendorCreate",
    "VendorPaymentAttachment",
    "VendorRead",
    "VendorStatusCountsRead",
    "VendorStatusUpdate",
]

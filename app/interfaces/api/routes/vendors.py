"""Routes for vendor registration and review."""

import logging
from typing import NoReturn

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from app.application.use_cases.vendors import (
    attach_payment_receipt as attach_payment_receipt_uc,
    create_vendor as create_vendor_uc,
    get_vendor as get_vendor_uc,
    get_vendor_status_counts as get_vendor_status_counts_uc,
    list_vendors as list_vendors_uc,
    update_payment_status as update_payment_status_uc,
    update_registration_status as update_registration_status_uc,
)
from app.domain.entities import Vendor
from app.infrastructure.database import get_db
from app.infrastructure.email import send_payment_status_email
from app.infrastructure.notifications import NotificationFanOut
from app.interfaces.api.dependencies import get_fanout
from app.interfaces.api.schemas import (
    VendorCreate,
    VendorPaymentAttachment,
    VendorRead,
    VendorStatusCountsRead,
    VendorStatusUpdate,
)

router = APIRouter(prefix="/vendors", tags=["vendors"])
logger = logging.getLogger(__name__)


def _to_read_model(vendor: Vendor) -> VendorRead:
    return VendorRead.model_validate(vendor)


def _raise_for_vendor_error(exc: ValueError) -> NoReturn:
    status_code = status.HTTP_400_BAD_REQUEST
    if str(exc) == "Vendor not found":
        status_code = status.HTTP_404_NOT_FOUND
    raise HTTPException(status_code=status_code, detail=str(exc)) from exc


@router.get("/", response_model=list[VendorRead])
def list_vendors(
    registration_status: str | None = Query(default=None),
    payment_status: str | None = Query(default=None),
    has_payment: bool | None = Query(default=None),
    festival_id: int | None = Query(default=None),
    db: Session = Depends(get_db),
) -> list[VendorRead]:
    vendors = list_vendors_uc(
        db,
        registration_status=registration_status,
        payment_status=payment_status,
        has_payment=has_payment,
        festival_id=festival_id,
    )
    return [_to_read_model(vendor) for vendor in vendors]


@router.get("/status-counts", response_model=VendorStatusCountsRead)
def vendor_status_counts(db: Session = Depends(get_db)) -> VendorStatusCountsRead:
    return VendorStatusCountsRead.model_validate(get_vendor_status_counts_uc(db))


@router.get("/{vendor_id}", response_model=VendorRead)
def get_vendor(vendor_id: int, db: Session = Depends(get_db)) -> VendorRead:
    try:
        vendor = get_vendor_uc(db, vendor_id)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return _to_read_model(vendor)


@router.post("/", response_model=VendorRead, status_code=status.HTTP_201_CREATED)
def register_vendor(
    vendor_in: VendorCreate,
    db: Session = Depends(get_db),
    fanout: NotificationFanOut = Depends(get_fanout),
) -> VendorRead:
    """Register a vendor; administrators are notified in realtime."""

    try:
        vendor = create_vendor_uc(
            db,
            fanout,
            name=vendor_in.name,
            email=vendor_in.email,
            phone=vendor_in.phone,
            stall_name=vendor_in.stall_name,
            stall_type=vendor_in.stall_type,
            festival_id=vendor_in.festival_id,
        )
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return _to_read_model(vendor)


@router.patch("/{vendor_id}/registration-status", response_model=VendorRead)
def update_registration_status(
    vendor_id: int,
    payload: VendorStatusUpdate,
    db: Session = Depends(get_db),
    fanout: NotificationFanOut = Depends(get_fanout),
) -> VendorRead:
    try:
        vendor = update_registration_status_uc(
            db, fanout, vendor_id=vendor_id, status=payload.status
        )
    except ValueError as exc:
        _raise_for_vendor_error(exc)
    return _to_read_model(vendor)


@router.patch("/{vendor_id}/payment-status", response_model=VendorRead)
def update_payment_status(
    vendor_id: int,
    payload: VendorStatusUpdate,
    db: Session = Depends(get_db),
    fanout: NotificationFanOut = Depends(get_fanout),
) -> VendorRead:
    """Review a vendor payment; the vendor is also told by email."""

    try:
        vendor = update_payment_status_uc(db, fanout, vendor_id=vendor_id, status=payload.status)
    except ValueError as exc:
        _raise_for_vendor_error(exc)

    if payload.status in ("Approved", "Rejected") and not send_payment_status_email(
        name=vendor.name, email=vendor.email, status=payload.status
    ):
        logger.warning("Payment status email was not sent to vendor %s", vendor.id)
    return _to_read_model(vendor)


@router.patch("/{vendor_id}/payment-attachment", response_model=VendorRead)
def attach_payment_receipt(
    vendor_id: int,
    payload: VendorPaymentAttachment,
    db: Session = Depends(get_db),
    fanout: NotificationFanOut = Depends(get_fanout),
) -> VendorRead:
    try:
        vendor = attach_payment_receipt_uc(
            db, fanout, vendor_id=vendor_id, file_name=payload.file_name
        )
    except ValueError as exc:
        _raise_for_vendor_error(exc)
    return _to_read_model(vendor)


__all__ = ["router"]

"""Use cases for reviewing vendor registrations and payments."""

from dataclasses import replace

from sqlalchemy.orm import Session

from app.application.use_cases.notifications import (
    broadcast_vendors,
    notify_payment_attachment,
    notify_vendor_payment_status,
    notify_vendor_registration_status,
)
from app.domain.entities import REVIEW_STATUS_PENDING, Vendor
from app.infrastructure.notifications import NotificationFanOut
from app.infrastructure.repositories import VendorRepository
from .get_vendor import get_vendor
from .validators import ensure_receipt_file_name, ensure_review_status


def update_registration_status(
    session: Session, fanout: NotificationFanOut, *, vendor_id: int, status: str
) -> Vendor:
    """Approve or reject a vendor registration."""

    ensure_review_status(status)
    current = get_vendor(session, vendor_id)
    vendor = VendorRepository(session).update(replace(current, registration_status=status))

    if status != current.registration_status:
        notify_vendor_registration_status(fanout, vendor=vendor)
    broadcast_vendors(fanout, session)
    return vendor


def update_payment_status(
    session: Session, fanout: NotificationFanOut, *, vendor_id: int, status: str
) -> Vendor:
    """Approve or reject the payment receipt a vendor uploaded."""

    ensure_review_status(status)
    current = get_vendor(session, vendor_id)
    vendor = VendorRepository(session).update(replace(current, payment_status=status))

    notify_vendor_payment_status(fanout, vendor=vendor)
    broadcast_vendors(fanout, session)
    return vendor


def attach_payment_receipt(
    session: Session, fanout: NotificationFanOut, *, vendor_id: int, file_name: str
) -> Vendor:
    """Record the receipt a vendor uploaded; a receipt can only be sent once."""

    normalized = ensure_receipt_file_name(file_name)
    current = get_vendor(session, vendor_id)
    if current.payment_attachment:
        raise ValueError(
            "Payment attachment already exists. You cannot submit payment attachment multiple times."
        )

    vendor = VendorRepository(session).update(
        replace(
            current,
            payment_attachment=normalized,
            payment_status=REVIEW_STATUS_PENDING,
        )
    )

    notify_payment_attachment(fanout, vendor=vendor, file_name=normalized)
    broadcast_vendors(fanout, session)
    return vendor

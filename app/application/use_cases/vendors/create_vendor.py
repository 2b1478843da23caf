"""Use case for registering a vendor."""

from sqlalchemy.orm import Session

from app.application.use_cases.notifications import broadcast_vendors, notify_vendor_registered
from app.domain.entities import REVIEW_STATUS_PENDING, Vendor
from app.infrastructure.notifications import NotificationFanOut
from app.infrastructure.repositories import FestivalRepository, VendorRepository
from .validators import ensure_stall_type, ensure_valid_email, ensure_valid_phone


def create_vendor(
    session: Session,
    fanout: NotificationFanOut,
    *,
    name: str,
    email: str,
    phone: str,
    stall_name: str,
    stall_type: str,
    festival_id: int | None = None,
) -> Vendor:
    """Register a vendor pending review and notify administrators."""

    repository = VendorRepository(session)
    normalized_email = ensure_valid_email(email)
    if repository.get_by_email(normalized_email):
        raise ValueError("A vendor with this email is already registered")
    if festival_id is not None and FestivalRepository(session).get(festival_id) is None:
        raise ValueError("Festival not found")

    vendor = repository.create(
        Vendor(
            id=None,
            name=name.strip(),
            email=normalized_email,
            phone=ensure_valid_phone(phone),
            stall_name=stall_name.strip(),
            stall_type=ensure_stall_type(stall_type),
            festival_id=festival_id,
            registration_status=REVIEW_STATUS_PENDING,
        )
    )

    notify_vendor_registered(fanout, vendor=vendor)
    broadcast_vendors(fanout, session)
    return vendor

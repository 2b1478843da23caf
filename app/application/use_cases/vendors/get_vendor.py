"""Use cases for reading vendors."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from app.domain.entities import Vendor
from app.infrastructure.repositories import VendorRepository


def get_vendor(session: Session, vendor_id: int) -> Vendor:
    """Return the vendor identified by ``vendor_id`` or raise an error."""

    vendor = VendorRepository(session).get(vendor_id)
    if vendor is None:
        raise ValueError("Vendor not found")
    return vendor


def list_vendors(
    session: Session,
    *,
    registration_status: str | None = None,
    payment_status: str | None = None,
    has_payment: bool | None = None,
    festival_id: int | None = None,
) -> Sequence[Vendor]:
    return VendorRepository(session).list(
        registration_status=registration_status,
        payment_status=payment_status,
        has_payment=has_payment,
        festival_id=festival_id,
    )


def get_vendor_status_counts(session: Session) -> dict[str, object]:
    return VendorRepository(session).status_counts()

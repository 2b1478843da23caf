"""Use cases for recording vendor sales."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from sqlalchemy.orm import Session

from app.application.use_cases.notifications import broadcast_sales, notify_new_sale
from app.application.use_cases.vendors import get_vendor
from app.domain.entities import Sale
from app.infrastructure.notifications import NotificationFanOut
from app.infrastructure.repositories import SaleRepository


def list_sales(session: Session, *, vendor_id: int | None = None) -> Sequence[Sale]:
    return SaleRepository(session).list(vendor_id=vendor_id)


def record_sale(
    session: Session,
    fanout: NotificationFanOut,
    *,
    vendor_id: int,
    customer_id: str,
    customer_name: str,
    product_name: str,
    quantity: int,
    price: float,
    sale_date: datetime | None = None,
) -> Sale:
    """Store a sale, notify its vendor and resend that vendor's sales list."""

    get_vendor(session, vendor_id)
    if quantity < 1:
        raise ValueError("Quantity must be at least 1")
    if price < 0:
        raise ValueError("Price cannot be negative")

    sale = SaleRepository(session).create(
        Sale(
            id=None,
            vendor_id=vendor_id,
            customer_id=customer_id.strip(),
            customer_name=customer_name.strip(),
            product_name=product_name.strip(),
            quantity=quantity,
            price=price,
            sale_date=sale_date,
        )
    )
    notify_new_sale(fanout, sale=sale)
    broadcast_sales(fanout, session, vendor_id=vendor_id)
    return sale


__all__ = ["list_sales", "record_sale"]

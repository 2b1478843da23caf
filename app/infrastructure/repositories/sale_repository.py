"""Persistence layer for vendor sales."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import desc
from sqlalchemy.orm import Session

from app.domain.entities import Sale
from app.infrastructure.models import SaleModel
from app.utils import ensure_app_naive_datetime, ensure_app_timezone, now_in_app_timezone


class SaleRepository:
    """Provide storage and per-vendor listings for :class:`Sale`."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(self, *, vendor_id: int | None = None) -> Sequence[Sale]:
        query = self.session.query(SaleModel)
        if vendor_id is not None:
            query = query.filter(SaleModel.vendor_id == vendor_id)
        query = query.order_by(desc(SaleModel.sale_date), desc(SaleModel.id))
        return [self._to_entity(model) for model in query.all()]

    def create(self, sale: Sale) -> Sale:
        model = SaleModel(
            vendor_id=sale.vendor_id,
            customer_id=sale.customer_id,
            customer_name=sale.customer_name,
            product_name=sale.product_name,
            quantity=sale.quantity,
            price=sale.price,
            total_price=sale.total_price,
            sale_date=ensure_app_naive_datetime(sale.sale_date or now_in_app_timezone()),
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: SaleModel) -> Sale:
        return Sale(
            id=model.id,
            vendor_id=model.vendor_id,
            customer_id=model.customer_id,
            customer_name=model.customer_name,
            product_name=model.product_name,
            quantity=model.quantity,
            price=model.price,
            total_price=model.total_price,
            sale_date=ensure_app_timezone(model.sale_date),
        )


__all__ = ["SaleRepository"]

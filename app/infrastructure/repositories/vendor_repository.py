"""Persistence layer for vendor data."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import desc, func
from sqlalchemy.orm import Session

from app.domain.entities import Vendor
from app.infrastructure.models import VendorModel
from app.utils import ensure_app_timezone


class VendorRepository:
    """Provide CRUD operations and status aggregates for vendors."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(
        self,
        *,
        registration_status: str | None = None,
        payment_status: str | None = None,
        has_payment: bool | None = None,
        festival_id: int | None = None,
    ) -> Sequence[Vendor]:
        query = self.session.query(VendorModel)
        if registration_status:
            query = query.filter(VendorModel.registration_status == registration_status)
        if payment_status:
            query = query.filter(VendorModel.payment_status == payment_status)
        if has_payment:
            query = query.filter(VendorModel.payment_attachment.is_not(None))
        if festival_id is not None:
            query = query.filter(VendorModel.festival_id == festival_id)
        query = query.order_by(desc(VendorModel.created_at), desc(VendorModel.id))
        return [self._to_entity(model) for model in query.all()]

    def get(self, vendor_id: int) -> Vendor | None:
        model = self.session.get(VendorModel, vendor_id)
        return self._to_entity(model) if model else None

    def get_by_email(self, email: str) -> Vendor | None:
        model = (
            self.session.query(VendorModel)
            .filter(func.lower(VendorModel.email) == email.lower())
            .first()
        )
        return self._to_entity(model) if model else None

    def create(self, vendor: Vendor) -> Vendor:
        model = VendorModel()
        self._apply_entity_to_model(model, vendor)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, vendor: Vendor) -> Vendor:
        model = self.session.get(VendorModel, vendor.id)
        if model is None:
            msg = f"Vendor with id {vendor.id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, vendor)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def status_counts(self) -> dict[str, object]:
        """Return vendor counters grouped by registration and payment status."""

        registration = dict(
            self.session.query(VendorModel.registration_status, func.count(VendorModel.id))
            .group_by(VendorModel.registration_status)
            .all()
        )
        payment = dict(
            self.session.query(VendorModel.payment_status, func.count(VendorModel.id))
            .filter(VendorModel.payment_status.is_not(None))
            .group_by(VendorModel.payment_status)
            .all()
        )
        payment_vendors = (
            self.session.query(func.count(VendorModel.id))
            .filter(VendorModel.payment_attachment.is_not(None))
            .scalar()
        )
        return {
            "registration": registration,
            "payment": payment,
            "paymentVendors": payment_vendors or 0,
        }

    @staticmethod
    def _apply_entity_to_model(model: VendorModel, vendor: Vendor) -> None:
        model.name = vendor.name
        model.email = vendor.email.lower()
        model.phone = vendor.phone
        model.stall_name = vendor.stall_name
        model.stall_type = vendor.stall_type
        model.festival_id = vendor.festival_id
        model.registration_status = vendor.registration_status
        model.payment_status = vendor.payment_status
        model.payment_attachment = vendor.payment_attachment

    @staticmethod
    def _to_entity(model: VendorModel) -> Vendor:
        return Vendor(
            id=model.id,
            name=model.name,
            email=model.email,
            phone=model.phone,
            stall_name=model.stall_name,
            stall_type=model.stall_type,
            festival_id=model.festival_id,
            registration_status=model.registration_status,
            payment_status=model.payment_status,
            payment_attachment=model.payment_attachment,
            created_at=ensure_app_timezone(model.created_at),
        )


__all__ = ["VendorRepository"]

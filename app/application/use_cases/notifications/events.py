"""Helpers that turn vendor, festival, sale and review writes into fan-out events."""

from __future__ import annotations

from sqlalchemy.orm import Session

from app.domain.entities import (
    Festival,
    FestivalReview,
    ListRefresh,
    NotificationType,
    Review,
    Role,
    Sale,
    StatusCountsRefresh,
    TargetedNotification,
    Vendor,
)
from app.infrastructure.notifications import NotificationFanOut
from app.infrastructure.repositories import (
    FestivalRepository,
    FestivalReviewRepository,
    ReviewRepository,
    SaleRepository,
    VendorRepository,
)
from app.utils import isoformat_or_none


def notify_vendor_registered(fanout: NotificationFanOut, *, vendor: Vendor) -> None:
    """Tell administrators a vendor signed up and waits for review."""

    fanout.dispatch(
        TargetedNotification(
            type=NotificationType.NEW_VENDOR,
            message=f"New vendor registered: {vendor.name}",
            entity_id=str(vendor.id),
            target_roles=(Role.ADMIN,),
            metadata={
                "name": vendor.name,
                "registrationStatus": vendor.registration_status,
            },
        )
    )


def notify_vendor_registration_status(fanout: NotificationFanOut, *, vendor: Vendor) -> None:
    fanout.dispatch(
        TargetedNotification(
            type=NotificationType.STATUS_UPDATE,
            message=f"Your registration has been {vendor.registration_status.lower()}",
            entity_id=str(vendor.id),
            target_roles=(Role.VENDOR,),
            target_user_id=str(vendor.id),
            metadata={"status": vendor.registration_status, "name": vendor.name},
        )
    )


def notify_vendor_payment_status(fanout: NotificationFanOut, *, vendor: Vendor) -> None:
    status = vendor.payment_status or "Pending"
    fanout.dispatch(
        TargetedNotification(
            type=NotificationType.STATUS_UPDATE,
            message=f"Your payment has been {status.lower()}",
            entity_id=str(vendor.id),
            target_roles=(Role.VENDOR,),
            target_user_id=str(vendor.id),
            metadata={"status": status, "name": vendor.name},
        )
    )


def notify_payment_attachment(
    fanout: NotificationFanOut, *, vendor: Vendor, file_name: str
) -> None:
    """Tell administrators a payment receipt is waiting for review."""

    fanout.dispatch(
        TargetedNotification(
            type=NotificationType.PAYMENT_ATTACHMENT,
            message=f"Payment document uploaded by {vendor.name}",
            entity_id=str(vendor.id),
            target_roles=(Role.ADMIN,),
            metadata={"documentType": "Payment Receipt", "name": file_name},
        )
    )

def notify_new_sale(fanout: NotificationFanOut, *, sale: Sale) -> None:
    """Tell the vendor who made a sale that it was recorded."""

    fanout.dispatch(
        TargetedNotification(
            type=NotificationType.NEW_SALE,
            message=f"New sale added: {sale.quantity} x {sale.product_name}",
            entity_id=str(sale.id),
            target_roles=(Role.VENDOR,),
            target_user_id=str(sale.vendor_id),
            metadata={"name": sale.product_name, "amount": sale.total_price},
        )
    )


def notify_new_review(fanout: NotificationFanOut, *, review: Review, vendor: Vendor) -> None:
    fanout.dispatch(
        TargetedNotification(
            type=NotificationType.NEW_REVIEW,
            message=f"New {review.sentiment} feedback added",
            entity_id=str(review.id),
            target_roles=(Role.VENDOR,),
            target_user_id=str(vendor.id),
            metadata={"name": vendor.name, "rating": review.rating},
        )
    )


def notify_festival_review(
    fanout: NotificationFanOut, *, review: FestivalReview, festival: Festival
) -> None:
    """Tell administrators an attendee reviewed a festival."""

    fanout.dispatch(
        TargetedNotification(
            type=NotificationType.FESTIVAL_REVIEW,
            message=f"New {review.sentiment} festival review added",
            entity_id=str(review.id),
            target_roles=(Role.ADMIN,),
            metadata={"name": festival.name, "rating": review.rating},
        )
    )


def broadcast_sales(fanout: NotificationFanOut, session: Session, *, vendor_id: int) -> None:
    """Resend the sales of ``vendor_id``; the snapshot only holds that vendor's rows."""

    repository = SaleRepository(session)
    fanout.dispatch(
        ListRefresh(
            collection_name="sales",
            fetch=lambda: [serialize_sale(sale) for sale in repository.list(vendor_id=vendor_id)],
        )
    )


def broadcast_reviews(fanout: NotificationFanOut, session: Session) -> None:
    repository = ReviewRepository(session)
    fanout.dispatch(
        ListRefresh(
            collection_name="reviews",
            fetch=lambda: [serialize_review(review) for review in repository.list()],
        )
    )


def broadcast_festival_reviews(fanout: NotificationFanOut, session: Session) -> None:
    repository = FestivalReviewRepository(session)
    fanout.dispatch(
        ListRefresh(
            collection_name="festivalReviews",
            fetch=lambda: [serialize_festival_review(review) for review in repository.list()],
        )
    )



def broadcast_vendors(fanout: NotificationFanOut, session: Session) -> None:
    """Resend the vendor list and the vendor status counters."""

    repository = VendorRepository(session)
    fanout.dispatch(
        ListRefresh(
            collection_name="vendors",
            fetch=lambda: [serialize_vendor(vendor) for vendor in repository.list()],
        ),
        StatusCountsRefresh(event_name="vendorStatusCounts", fetch=repository.status_counts),
    )


def broadcast_festivals(fanout: NotificationFanOut, session: Session) -> None:
    repository = FestivalRepository(session)
    fanout.dispatch(
        ListRefresh(
            collection_name="festivals",
            fetch=lambda: [serialize_festival(festival) for festival in repository.list()],
        )
    )


def serialize_vendor(vendor: Vendor) -> dict[str, object]:
    return {
        "id": vendor.id,
        "name": vendor.name,
        "email": vendor.email,
        "phone": vendor.phone,
        "stall_name": vendor.stall_name,
        "stall_type": vendor.stall_type,
        "festival_id": vendor.festival_id,
        "registration_status": vendor.registration_status,
        "payment_status": vendor.payment_status,
        "payment_attachment": vendor.payment_attachment,
        "created_at": isoformat_or_none(vendor.created_at),
    }


def serialize_festival(festival: Festival) -> dict[str, object]:
    return {
        "id": festival.id,
        "name": festival.name,
        "organizer": festival.organizer,
        "date": festival.date.isoformat(),
        "status": festival.status,
        "address": festival.address,
        "category": festival.category,
        "created_at": isoformat_or_none(festival.created_at),
    }

def serialize_sale(sale: Sale) -> dict[str, object]:
    return {
        "id": sale.id,
        "vendor_id": sale.vendor_id,
        "customer_id": sale.customer_id,
        "customer_name": sale.customer_name,
        "product_name": sale.product_name,
        "quantity": sale.quantity,
        "price": sale.price,
        "total_price": sale.total_price,
        "sale_date": isoformat_or_none(sale.sale_date),
    }


def serialize_review(review: Review) -> dict[str, object]:
    return {
        "id": review.id,
        "vendor_id": review.vendor_id,
        "customer_id": review.customer_id,
        "rating": review.rating,
        "comment": review.comment,
        "sentiment": review.sentiment,
        "created_at": isoformat_or_none(review.created_at),
    }


def serialize_festival_review(review: FestivalReview) -> dict[str, object]:
    return {
        "id": review.id,
        "festival_id": review.festival_id,
        "attendee_id": review.attendee_id,
        "rating": review.rating,
        "comment": review.comment,
        "sentiment": review.sentiment,
        "created_at": isoformat_or_none(review.created_at),
    }


__all__ = [
    "broadcast_festival_reviews",
    "broadcast_festivals",
    "broadcast_reviews",
    "broadcast_sales",
    "broadcast_vendors",
    "notify_festival_review",
    "notify_new_review",
    "notify_new_sale",
    "notify_payment_attachment",
    "notify_vendor_payment_status",
    "notify_vendor_registered",
    "notify_vendor_registration_status",
    "serialize_festival",
    "serialize_festival_review",
    "serialize_review",
    "serialize_sale",
    "serialize_vendor",
]

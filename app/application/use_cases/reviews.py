"""Use cases for vendor and festival feedback."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from app.application.use_cases.festivals import get_festival
from app.application.use_cases.notifications import (
    broadcast_festival_reviews,
    broadcast_reviews,
    notify_festival_review,
    notify_new_review,
)
from app.application.use_cases.vendors import get_vendor
from app.domain.entities import (
    MAX_RATING,
    MIN_RATING,
    FestivalReview,
    Review,
    sentiment_for_rating,
)
from app.infrastructure.notifications import NotificationFanOut
from app.infrastructure.repositories import FestivalReviewRepository, ReviewRepository


def _ensure_rating(rating: int) -> int:
    if not MIN_RATING <= rating <= MAX_RATING:
        raise ValueError(f"Rating must be between {MIN_RATING} and {MAX_RATING}")
    return rating


def list_reviews(session: Session, *, vendor_id: int | None = None) -> Sequence[Review]:
    return ReviewRepository(session).list(vendor_id=vendor_id)


def create_review(
    session: Session,
    fanout: NotificationFanOut,
    *,
    vendor_id: int,
    customer_id: str,
    rating: int,
    comment: str,
) -> Review:
    """Store customer feedback and let the reviewed vendor know about it."""

    vendor = get_vendor(session, vendor_id)
    review = ReviewRepository(session).create(
        Review(
            id=None,
            vendor_id=vendor_id,
            customer_id=customer_id.strip(),
            rating=_ensure_rating(rating),
            comment=comment.strip(),
            sentiment=sentiment_for_rating(rating),
        )
    )
    notify_new_review(fanout, review=review, vendor=vendor)
    broadcast_reviews(fanout, session)
    return review


def list_festival_reviews(
    session: Session, *, festival_id: int | None = None
) -> Sequence[FestivalReview]:
    return FestivalReviewRepository(session).list(festival_id=festival_id)


def create_festival_review(
    session: Session,
    fanout: NotificationFanOut,
    *,
    festival_id: int,
    attendee_id: str,
    rating: int,
    comment: str,
) -> FestivalReview:
    festival = get_festival(session, festival_id)
    review = FestivalReviewRepository(session).create(
        FestivalReview(
            id=None,
            festival_id=festival_id,
            attendee_id=attendee_id.strip(),
            rating=_ensure_rating(rating),
            comment=comment.strip(),
            sentiment=sentiment_for_rating(rating),
        )
    )
    notify_festival_review(fanout, review=review, festival=festival)
    broadcast_festival_reviews(fanout, session)
    return review


__all__ = [
    "create_festival_review",
    "create_review",
    "list_festival_reviews",
    "list_reviews",
]

"""Persistence layer for vendor and festival reviews."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import desc
from sqlalchemy.orm import Session

from app.domain.entities import FestivalReview, Review
from app.infrastructure.models import FestivalReviewModel, ReviewModel
from app.utils import ensure_app_timezone


class ReviewRepository:
    """Store customer feedback about vendors."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(self, *, vendor_id: int | None = None) -> Sequence[Review]:
        query = self.session.query(ReviewModel)
        if vendor_id is not None:
            query = query.filter(ReviewModel.vendor_id == vendor_id)
        query = query.order_by(desc(ReviewModel.created_at), desc(ReviewModel.id))
        return [self._to_entity(model) for model in query.all()]

    def create(self, review: Review) -> Review:
        model = ReviewModel(
            vendor_id=review.vendor_id,
            customer_id=review.customer_id,
            rating=review.rating,
            comment=review.comment,
            sentiment=review.sentiment,
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: ReviewModel) -> Review:
        return Review(
            id=model.id,
            vendor_id=model.vendor_id,
            customer_id=model.customer_id,
            rating=model.rating,
            comment=model.comment,
            sentiment=model.sentiment,
            created_at=ensure_app_timezone(model.created_at),
        )


class FestivalReviewRepository:
    """Store attendee feedback about festivals."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(self, *, festival_id: int | None = None) -> Sequence[FestivalReview]:
        query = self.session.query(FestivalReviewModel)
        if festival_id is not None:
            query = query.filter(FestivalReviewModel.festival_id == festival_id)
        query = query.order_by(
            desc(FestivalReviewModel.created_at), desc(FestivalReviewModel.id)
        )
        return [self._to_entity(model) for model in query.all()]

    def create(self, review: FestivalReview) -> FestivalReview:
        model = FestivalReviewModel(
            festival_id=review.festival_id,
            attendee_id=review.attendee_id,
            rating=review.rating,
            comment=review.comment,
            sentiment=review.sentiment,
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: FestivalReviewModel) -> FestivalReview:
        return FestivalReview(
            id=model.id,
            festival_id=model.festival_id,
            attendee_id=model.attendee_id,
            rating=model.rating,
            comment=model.comment,
            sentiment=model.sentiment,
            created_at=ensure_app_timezone(model.created_at),
        )


__all__ = ["FestivalReviewRepository", "ReviewRepository"]

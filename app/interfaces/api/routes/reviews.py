"""Routes for vendor and festival feedback."""

from typing import NoReturn

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from app.application.use_cases.reviews import (
    create_festival_review as create_festival_review_uc,
    create_review as create_review_uc,
    list_festival_reviews as list_festival_reviews_uc,
    list_reviews as list_reviews_uc,
)
from app.infrastructure.database import get_db
from app.infrastructure.notifications import NotificationFanOut
from app.interfaces.api.dependencies import get_fanout
from app.interfaces.api.schemas import (
    FestivalReviewCreate,
    FestivalReviewRead,
    ReviewCreate,
    ReviewRead,
)

router = APIRouter(tags=["reviews"])


def _raise_for(exc: ValueError) -> NoReturn:
    status_code = status.HTTP_400_BAD_REQUEST
    if str(exc).endswith("not found"):
        status_code = status.HTTP_404_NOT_FOUND
    raise HTTPException(status_code=status_code, detail=str(exc)) from exc


@router.get("/reviews/", response_model=list[ReviewRead])
def list_reviews(
    vendor_id: int | None = Query(default=None),
    db: Session = Depends(get_db),
) -> list[ReviewRead]:
    return [ReviewRead.model_validate(review) for review in list_reviews_uc(db, vendor_id=vendor_id)]


@router.post("/reviews/", response_model=ReviewRead, status_code=status.HTTP_201_CREATED)
def create_review(
    review_in: ReviewCreate,
    db: Session = Depends(get_db),
    fanout: NotificationFanOut = Depends(get_fanout),
) -> ReviewRead:
    try:
        review = create_review_uc(db, fanout, **review_in.model_dump())
    except ValueError as exc:
        _raise_for(exc)
    return ReviewRead.model_validate(review)


@router.get("/festival-reviews/", response_model=list[FestivalReviewRead])
def list_festival_reviews(
    festival_id: int | None = Query(default=None),
    db: Session = Depends(get_db),
) -> list[FestivalReviewRead]:
    return [
        FestivalReviewRead.model_validate(review)
        for review in list_festival_reviews_uc(db, festival_id=festival_id)
    ]


@router.post(
    "/festival-reviews/",
    response_model=FestivalReviewRead,
    status_code=status.HTTP_201_CREATED,
)
def create_festival_review(
    review_in: FestivalReviewCreate,
    db: Session = Depends(get_db),
    fanout: NotificationFanOut = Depends(get_fanout),
) -> FestivalReviewRead:
    try:
        review = create_festival_review_uc(db, fanout, **review_in.model_dump())
    except ValueError as exc:
        _raise_for(exc)
    return FestivalReviewRead.model_validate(review)


__all__ = ["router"]

"""Schemas for vendor and festival review endpoints."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from app.domain.entities import MAX_RATING, MIN_RATING


class ReviewCreate(BaseModel):
    vendor_id: int
    customer_id: str = Field(..., min_length=1, max_length=64)
    rating: int = Field(..., ge=MIN_RATING, le=MAX_RATING)
    comment: str = Field(..., min_length=1)


class ReviewRead(BaseModel):
    id: int
    vendor_id: int
    customer_id: str
    rating: int
    comment: str
    sentiment: str
    created_at: datetime | None

    model_config = ConfigDict(from_attributes=True)


class FestivalReviewCreate(BaseModel):
    festival_id: int
    attendee_id: str = Field(..., min_length=1, max_length=64)
    rating: int = Field(..., ge=MIN_RATING, le=MAX_RATING)
    comment: str = Field(..., min_length=1)


class FestivalReviewRead(BaseModel):
    id: int
    festival_id: int
    attendee_id: str
    rating: int
    comment: str
    sentiment: str
    created_at: datetime | None

    model_config = ConfigDict(from_attributes=True)


__all__ = ["FestivalReviewCreate", "FestivalReviewRead", "ReviewCreate", "ReviewRead"]

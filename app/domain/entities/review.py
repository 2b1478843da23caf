"""Domain entities for customer feedback on vendors and festivals."""

from dataclasses import dataclass
from datetime import datetime

SENTIMENT_POSITIVE = "Positive"
SENTIMENT_NEUTRAL = "Neutral"
SENTIMENT_NEGATIVE = "Negative"

MIN_RATING = 1
MAX_RATING = 5


def sentiment_for_rating(rating: int) -> str:
    """Classify a 1-5 star rating as positive, neutral or negative feedback."""

    if rating >= 4:
        return SENTIMENT_POSITIVE
    if rating <= 2:
        return SENTIMENT_NEGATIVE
    return SENTIMENT_NEUTRAL


@dataclass
class Review:
    """Feedback a customer left for a vendor."""

    id: int | None
    vendor_id: int
    customer_id: str
    rating: int
    comment: str
    sentiment: str
    created_at: datetime | None = None


@dataclass
class FestivalReview:
    """Feedback an attendee left for a festival."""

    id: int | None
    festival_id: int
    attendee_id: str
    rating: int
    comment: str
    sentiment: str
    created_at: datetime | None = None


__all__ = [
    "FestivalReview",
    "MAX_RATING",
    "MIN_RATING",
    "Review",
    "SENTIMENT_NEGATIVE",
    "SENTIMENT_NEUTRAL",
    "SENTIMENT_POSITIVE",
    "sentiment_for_rating",
]

"""SQLAlchemy models for vendor and festival reviews."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text, func

from app.infrastructure.database import Base


class ReviewModel(Base):
    """Database representation of a vendor review."""

    __tablename__ = "review"

    id = Column(Integer, primary_key=True, index=True)
    vendor_id = Column(
        Integer, ForeignKey("vendor.id", ondelete="CASCADE"), nullable=False, index=True
    )
    customer_id = Column(String(64), nullable=False)
    rating = Column(Integer, nullable=False)
    comment = Column(Text, nullable=False)
    sentiment = Column(String(20), nullable=False)
    created_at = Column(DateTime, nullable=False, server_default=func.now())


class FestivalReviewModel(Base):
    """Database representation of a festival review."""

    __tablename__ = "festival_review"

    id = Column(Integer, primary_key=True, index=True)
    festival_id = Column(
        Integer, ForeignKey("festival.id", ondelete="CASCADE"), nullable=False, index=True
    )
    attendee_id = Column(String(64), nullable=False)
    rating = Column(Integer, nullable=False)
    comment = Column(Text, nullable=False)
    sentiment = Column(String(20), nullable=False)
    created_at = Column(DateTime, nullable=False, server_default=func.now())


__all__ = ["FestivalReviewModel", "ReviewModel"]

"""SQLAlchemy model for the festival table."""

from sqlalchemy import Column, Date, DateTime, Integer, String, func

from app.infrastructure.database import Base


class FestivalModel(Base):
    """Database representation of a festival."""

    __tablename__ = "festival"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(120), nullable=False)
    organizer = Column(String(120), nullable=False)
    date = Column(Date, nullable=False)
    status = Column(String(20), nullable=False)
    address = Column(String(255), nullable=False)
    category = Column(String(30), nullable=False)
    created_at = Column(DateTime, nullable=False, server_default=func.now())


__all__ = ["FestivalModel"]

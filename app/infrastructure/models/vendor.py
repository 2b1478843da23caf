"""SQLAlchemy model for the vendor table."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, func

from app.infrastructure.database import Base


class VendorModel(Base):
    """Database representation of a festival vendor."""

    __tablename__ = "vendor"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(120), nullable=False)
    email = Column(String(120), nullable=False, unique=True, index=True)
    phone = Column(String(30), nullable=False)
    stall_name = Column(String(120), nullable=False)
    stall_type = Column(String(30), nullable=False)
    festival_id = Column(
        Integer, ForeignKey("festival.id", ondelete="SET NULL"), nullable=True, index=True
    )
    registration_status = Column(String(20), nullable=False, default="Pending")
    payment_status = Column(String(20), nullable=True)
    payment_attachment = Column(String(255), nullable=True)
    created_at = Column(DateTime, nullable=False, server_default=func.now())


__all__ = ["VendorModel"]

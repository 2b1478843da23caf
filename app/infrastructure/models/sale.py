"""SQLAlchemy model for the sale table."""

from sqlalchemy import Column, DateTime, Float, ForeignKey, Integer, String

from app.infrastructure.database import Base


class SaleModel(Base):
    """Database representation of a vendor sale."""

    __tablename__ = "sale"

    id = Column(Integer, primary_key=True, index=True)
    vendor_id = Column(
        Integer, ForeignKey("vendor.id", ondelete="CASCADE"), nullable=False, index=True
    )
    customer_id = Column(String(64), nullable=False)
    customer_name = Column(String(120), nullable=False)
    product_name = Column(String(120), nullable=False)
    quantity = Column(Integer, nullable=False)
    price = Column(Float, nullable=False)
    total_price = Column(Float, nullable=False)
    sale_date = Column(DateTime, nullable=False, index=True)


__all__ = ["SaleModel"]

"""Domain entity representing a sale recorded by a vendor."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Sale:
    """A product sold at a vendor's stall."""

    id: int | None
    vendor_id: int
    customer_id: str
    customer_name: str
    product_name: str
    quantity: int
    price: float
    total_price: float | None = None
    sale_date: datetime | None = None

    def __post_init__(self) -> None:
        if self.total_price is None:
            self.total_price = round(self.quantity * self.price, 2)


__all__ = ["Sale"]

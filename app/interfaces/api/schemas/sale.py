"""Schemas for sale endpoints."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class SaleCreate(BaseModel):
    vendor_id: int
    customer_id: str = Field(..., min_length=1, max_length=64)
    customer_name: str = Field(..., min_length=1, max_length=120)
    product_name: str = Field(..., min_length=1, max_length=120)
    quantity: int = Field(..., ge=1)
    price: float = Field(..., ge=0)
    sale_date: datetime | None = None


class SaleRead(BaseModel):
    id: int
    vendor_id: int
    customer_id: str
    customer_name: str
    product_name: str
    quantity: int
    price: float
    total_price: float
    sale_date: datetime | None

    model_config = ConfigDict(from_attributes=True)


__all__ = ["SaleCreate", "SaleRead"]

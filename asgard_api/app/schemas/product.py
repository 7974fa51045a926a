"""Pydantic models for product payloads.  Prices are integer cents."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field

from . import INT64_MAX
from ..repositories.base import NewProduct, UpdateProduct


class ProductCreate(BaseModel):
    sku: str = Field(..., min_length=1, examples=["SKU-001"])
    name: str = Field(..., examples=["Widget"])
    price_cents: int = Field(..., ge=0, le=INT64_MAX, description="Price in cents; never negative")

    def to_input(self) -> NewProduct:
        return NewProduct(sku=self.sku, name=self.name, price_cents=self.price_cents)


class ProductUpdate(BaseModel):
    """All fields are optional; only provided values will be updated."""

    sku: Optional[str] = Field(None, min_length=1)
    name: Optional[str] = None
    price_cents: Optional[int] = Field(None, ge=0, le=INT64_MAX)

    def to_input(self) -> UpdateProduct:
        return UpdateProduct(sku=self.sku, name=self.name, price_cents=self.price_cents)


class ProductRead(BaseModel):
    id: UUID
    sku: str
    name: str
    price_cents: int
    created_at: datetime
    updated_at: datetime

    model_config = {
        "from_attributes": True,
    }

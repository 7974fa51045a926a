"""
Pydantic models for order payloads.

``status`` is free‑form text (e.g. ``"created"``, ``"paid"``); no
transitions are validated.  ``user_id`` cannot be changed after
creation.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field

from . import INT64_MAX, INT64_MIN
from ..repositories.base import NewOrder, UpdateOrder


class OrderCreate(BaseModel):
    user_id: UUID
    status: str = Field(..., examples=["created"])
    total_cents: int = Field(..., ge=INT64_MIN, le=INT64_MAX, examples=[1000])

    def to_input(self) -> NewOrder:
        return NewOrder(user_id=self.user_id, status=self.status, total_cents=self.total_cents)


class OrderUpdate(BaseModel):
    status: Optional[str] = None
    total_cents: Optional[int] = Field(None, ge=INT64_MIN, le=INT64_MAX)

    def to_input(self) -> UpdateOrder:
        return UpdateOrder(status=self.status, total_cents=self.total_cents)


class OrderRead(BaseModel):
    """Schema for reading an order."""

    id: UUID
    user_id: UUID
    status: str
    total_cents: int
    created_at: datetime
    updated_at: datetime

    model_config = {
        "from_attributes": True,
    }

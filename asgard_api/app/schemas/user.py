"""
Pydantic models for user payloads.

``UserUpdate`` fields are all optional.  An omitted field and an
explicit ``null`` are treated the same way: the stored value is kept.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field

from ..repositories.base import NewUser, UpdateUser


class UserCreate(BaseModel):
    email: str = Field(..., min_length=1, examples=["user@example.com"])
    name: str = Field(..., examples=["Alice"])

    def to_input(self) -> NewUser:
        return NewUser(email=self.email, name=self.name)


class UserUpdate(BaseModel):
    email: Optional[str] = Field(None, min_length=1)
    name: Optional[str] = None

    def to_input(self) -> UpdateUser:
        return UpdateUser(email=self.email, name=self.name)


class UserRead(BaseModel):
    """Schema for reading a user from the API."""

    id: UUID
    email: str
    name: str
    created_at: datetime
    updated_at: datetime

    model_config = {
        "from_attributes": True,
    }

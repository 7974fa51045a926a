"""
Plain records for the three resources exposed by the API.

Records are frozen dataclasses.  Mutation happens only through the
repository ``update`` operation, which returns a new record.  All
timestamps are timezone‑aware UTC values.
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class User:
    id: UUID
    email: str
    name: str
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class Product:
    id: UUID
    sku: str
    name: str
    price_cents: int
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class Order:
    """An order placed by a user.

    ``status`` is a free‑form string; no state machine is enforced.
    """

    id: UUID
    user_id: UUID
    status: str
    total_cents: int
    created_at: datetime
    updated_at: datetime

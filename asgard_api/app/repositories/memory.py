"""
In‑memory implementations of the repository ports.

These are second implementers of the same contract as the SQLite
adapters, used to exercise services and routes without a database.
They honour the same rules: server‑assigned ids, newest‑first
listing, partial updates that always advance ``updated_at`` and
``Conflict`` on duplicate unique fields and ``Unexpected`` for integers
a 64‑bit column cannot hold.  Foreign keys are not checked.

A single ``asyncio.Lock`` guards each backing map against concurrent
access from tests.
"""

import asyncio
from dataclasses import asdict, replace
from typing import Any, Dict, Generic, List, Optional, Tuple, Type, TypeVar
from uuid import UUID, uuid4

from ..domain.models import Order, Product, User
from .base import (
    Conflict,
    NotFound,
    OrderRepository,
    ProductRepository,
    Unexpected,
    UserRepository,
    next_updated_at,
    utcnow,
)

RecordT = TypeVar("RecordT")

# Range of an SQLite INTEGER column.
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


def _check_integers(values: Dict[str, Any]) -> None:
    for field, value in values.items():
        if isinstance(value, int) and not _INT64_MIN <= value <= _INT64_MAX:
            raise Unexpected(f"{field} does not fit a 64-bit integer")


class InMemoryRepository(Generic[RecordT]):
    model: Type[Any] = object
    unique_fields: Tuple[str, ...] = ()

    def __init__(self) -> None:
        self._store: Dict[UUID, RecordT] = {}
        self._lock = asyncio.Lock()

    def _check_unique(self, values: Dict[str, Any], exclude: Optional[UUID] = None) -> None:
        for field in self.unique_fields:
            value = values.get(field)
            if value is None:
                continue
            for record_id, record in self._store.items():
                if record_id != exclude and getattr(record, field) == value:
                    raise Conflict()

    async def create(self, data: Any) -> RecordT:
        values = asdict(data)
        _check_integers(values)
        async with self._lock:
            self._check_unique(values)
            now = utcnow()
            record = self.model(id=uuid4(), created_at=now, updated_at=now, **values)
            self._store[record.id] = record
            return record

    async def list(self) -> List[RecordT]:
        async with self._lock:
            # Newest insert first among equal timestamps, then a stable sort.
            records = list(reversed(list(self._store.values())))
        return sorted(records, key=lambda r: r.created_at, reverse=True)

    async def get(self, record_id: UUID) -> RecordT:
        async with self._lock:
            try:
                return self._store[record_id]
            except KeyError:
                raise NotFound() from None

    async def update(self, record_id: UUID, patch: Any) -> RecordT:
        changes = {k: v for k, v in asdict(patch).items() if v is not None}
        _check_integers(changes)
        async with self._lock:
            current = self._store.get(record_id)
            if current is None:
                raise NotFound()
            self._check_unique(changes, exclude=record_id)
            record = replace(current, updated_at=next_updated_at(current.updated_at), **changes)
            self._store[record_id] = record
            return record

    async def delete(self, record_id: UUID) -> None:
        async with self._lock:
            if self._store.pop(record_id, None) is None:
                raise NotFound()


class InMemoryUserRepository(InMemoryRepository[User], UserRepository):
    model = User
    unique_fields = ("email",)


class InMemoryProductRepository(InMemoryRepository[Product], ProductRepository):
    model = Product
    unique_fields = ("sku",)


class InMemoryOrderRepository(InMemoryRepository[Order], OrderRepository):
    model = Order

"""
Repository ports and the shared error taxonomy.

Every resource exposes the same five coroutine operations: ``create``,
``list``, ``get``, ``update`` and ``delete``.  Concrete adapters (the
SQLite adapters in ``sqlite.py`` and the in‑memory fakes in
``memory.py``) subclass the per‑resource ports below, so services and
routes never depend on a concrete storage type.

Failures are reported by raising one of the three ``RepoError``
subclasses.  ``NotFound`` and ``Conflict`` are expected conditions the
caller can act on; ``Unexpected`` wraps any other storage fault and
keeps its original message for operators.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Generic, List, Optional, TypeVar
from uuid import UUID

from ..domain.models import Order, Product, User


class RepoError(Exception):
    """Base class for every error raised by a repository."""

    message = "repository error"

    def __str__(self) -> str:
        return self.message


class NotFound(RepoError):
    message = "not found"


class Conflict(RepoError):
    message = "conflict"


class Unexpected(RepoError):
    """Any storage fault that is neither ``NotFound`` nor ``Conflict``."""

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail
        self.message = detail


# ---------------------------------------------------------------------------
# Inputs.  ``New*`` carry every business field; ``Update*`` carry optional
# fields where ``None`` always means "leave unchanged".
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class NewUser:
    email: str
    name: str


@dataclass(frozen=True)
class UpdateUser:
    email: Optional[str] = None
    name: Optional[str] = None


@dataclass(frozen=True)
class NewProduct:
    sku: str
    name: str
    price_cents: int


@dataclass(frozen=True)
class UpdateProduct:
    sku: Optional[str] = None
    name: Optional[str] = None
    price_cents: Optional[int] = None


@dataclass(frozen=True)
class NewOrder:
    user_id: UUID
    status: str
    total_cents: int


@dataclass(frozen=True)
class UpdateOrder:
    status: Optional[str] = None
    total_cents: Optional[int] = None


RecordT = TypeVar("RecordT")
NewT = TypeVar("NewT")
PatchT = TypeVar("PatchT")


class Repository(ABC, Generic[RecordT, NewT, PatchT]):
    """Capability contract shared by all resources."""

    @abstractmethod
    async def create(self, data: NewT) -> RecordT:
        """Insert a record; raise ``Conflict`` on a uniqueness violation."""

    @abstractmethod
    async def list(self) -> List[RecordT]:
        """Return every record, most recently created first."""

    @abstractmethod
    async def get(self, record_id: UUID) -> RecordT:
        """Return one record or raise ``NotFound``."""

    @abstractmethod
    async def update(self, record_id: UUID, patch: PatchT) -> RecordT:
        """Apply the fields set on ``patch`` and refresh ``updated_at``."""

    @abstractmethod
    async def delete(self, record_id: UUID) -> None:
        """Remove a record or raise ``NotFound`` if nothing was deleted."""


class UserRepository(Repository[User, NewUser, UpdateUser]):
    """Port for user storage.  ``email`` is unique."""


class ProductRepository(Repository[Product, NewProduct, UpdateProduct]):
    """Port for product storage.  ``sku`` is unique."""


class OrderRepository(Repository[Order, NewOrder, UpdateOrder]):
    """Port for order storage."""


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def next_updated_at(previous: datetime) -> datetime:
    """Timestamp for a mutation that is strictly later than ``previous``."""
    now = utcnow()
    if now <= previous:
        return previous + timedelta(microseconds=1)
    return now

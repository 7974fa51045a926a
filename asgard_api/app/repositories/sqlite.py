"""
SQLite adapters for the repository ports.

The three adapters share ``SqliteRepository``, which owns the SQL
shaping, the partial‑update rule and the error translation.  A
subclass only names its table, its business columns and how to build
its domain record.

Blocking ``sqlite3`` calls run in a worker thread through
``asyncio.to_thread`` so the event loop stays free while a statement
is executing.  Every call opens its own connection (see
``core.db.get_cursor``).  An optional ``timeout`` is enforced by that
connection itself, so a call reported as timed out has been rolled
back and left no trace in the store.

All queries use parameterized statements.  Table and column names are
class constants, never user input.
"""

from __future__ import annotations

import asyncio
import logging
import sqlite3
from abc import ABC, abstractmethod
from dataclasses import asdict
from datetime import datetime
from typing import Any, Callable, Dict, Generic, List, Optional, Tuple, TypeVar
from uuid import UUID, uuid4

from ..core.db import get_cursor
from ..domain.models import Order, Product, User
from .base import (
    OrderRepository,
    ProductRepository,
    RepoError,
    Unexpected,
    UserRepository,
    next_updated_at,
    utcnow,
)
from .errors import RowNotFound, map_storage_error

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT")
T = TypeVar("T")

# Raised when the busy timeout or the progress handler set by
# ``core.db.get_connection`` gives up.
_TIMEOUT_MESSAGES = frozenset({"database is locked", "interrupted"})


def _encode_timestamp(value: datetime) -> str:
    # Fixed‑width ISO strings in UTC sort lexicographically in time order.
    return value.isoformat(timespec="microseconds")


def _decode_timestamp(value: str) -> datetime:
    return datetime.fromisoformat(value)


def _encode(value: Any) -> Any:
    if isinstance(value, UUID):
        return str(value)
    if isinstance(value, datetime):
        return _encode_timestamp(value)
    return value


class SqliteRepository(ABC, Generic[RecordT]):
    """Generic CRUD over one table with ``id``/``created_at``/``updated_at``."""

    table: str = ""
    columns: Tuple[str, ...] = ()

    def __init__(self, database_path: Optional[str] = None, timeout: Optional[float] = None) -> None:
        self.database_path = database_path
        self.timeout = timeout

    # -- row conversion -------------------------------------------------

    @abstractmethod
    def _to_record(self, row: sqlite3.Row) -> RecordT:
        """Build the domain record for one row."""

    def _select_columns(self) -> str:
        return ", ".join(("id",) + self.columns + ("created_at", "updated_at"))

    # -- execution ------------------------------------------------------

    async def _run(self, func: Callable[..., T], *args: Any) -> T:
        """Run ``func`` in a worker thread and translate its failures."""
        try:
            return await asyncio.to_thread(func, *args)
        except RepoError:
            raise
        except sqlite3.OperationalError as exc:
            if self.timeout is not None and str(exc) in _TIMEOUT_MESSAGES:
                # Lock wait or progress handler gave up; the transaction was rolled back.
                logger.warning("%s operation exceeded %ss: %s", self.table, self.timeout, exc)
                raise Unexpected("storage operation timed out") from exc
            raise map_storage_error(exc) from exc
        except Exception as exc:
            raise map_storage_error(exc) from exc

    def _fetch(self, cursor: sqlite3.Cursor, record_id: str) -> sqlite3.Row:
        row = cursor.execute(
            f"SELECT {self._select_columns()} FROM {self.table} WHERE id = ?",
            (record_id,),
        ).fetchone()
        if row is None:
            raise RowNotFound(f"{self.table} {record_id}")
        return row

    # -- blocking operations --------------------------------------------

    def _insert(self, values: Dict[str, Any]) -> RecordT:
        record_id = str(uuid4())
        now = _encode_timestamp(utcnow())
        names = ("id",) + self.columns + ("created_at", "updated_at")
        params = (record_id,) + tuple(_encode(values[c]) for c in self.columns) + (now, now)
        placeholders = ", ".join("?" for _ in names)
        with get_cursor(self.database_path, self.timeout) as cursor:
            cursor.execute(
                f"INSERT INTO {self.table} ({', '.join(names)}) VALUES ({placeholders})",
                params,
            )
            return self._to_record(self._fetch(cursor, record_id))

    def _select_all(self) -> List[RecordT]:
        with get_cursor(self.database_path, self.timeout) as cursor:
            # rowid breaks ties between records created within the same microsecond
            rows = cursor.execute(
                f"SELECT {self._select_columns()} FROM {self.table} "
                "ORDER BY created_at DESC, rowid DESC"
            ).fetchall()
            return [self._to_record(row) for row in rows]

    def _select_one(self, record_id: str) -> RecordT:
        with get_cursor(self.database_path, self.timeout) as cursor:
            return self._to_record(self._fetch(cursor, record_id))

    def _patch(self, record_id: str, changes: Dict[str, Any]) -> RecordT:
        # COALESCE keeps the stored value wherever the patch carries None.
        assignments = ", ".join(f"{c} = COALESCE(?, {c})" for c in self.columns)
        params = tuple(_encode(changes.get(c)) for c in self.columns)
        with get_cursor(self.database_path, self.timeout) as cursor:
            current = self._fetch(cursor, record_id)
            updated_at = next_updated_at(_decode_timestamp(current["updated_at"]))
            cursor.execute(
                f"UPDATE {self.table} SET {assignments}, updated_at = ? WHERE id = ?",
                params + (_encode_timestamp(updated_at), record_id),
            )
            if cursor.rowcount == 0:
                raise RowNotFound(f"{self.table} {record_id}")
            return self._to_record(self._fetch(cursor, record_id))

    def _remove(self, record_id: str) -> None:
        with get_cursor(self.database_path, self.timeout) as cursor:
            cursor.execute(f"DELETE FROM {self.table} WHERE id = ?", (record_id,))
            if cursor.rowcount == 0:
                raise RowNotFound(f"{self.table} {record_id}")

    # -- port operations ------------------------------------------------

    async def create(self, data: Any) -> RecordT:
        return await self._run(self._insert, asdict(data))

    async def list(self) -> List[RecordT]:
        return await self._run(self._select_all)

    async def get(self, record_id: UUID) -> RecordT:
        return await self._run(self._select_one, str(record_id))

    async def update(self, record_id: UUID, patch: Any) -> RecordT:
        return await self._run(self._patch, str(record_id), asdict(patch))

    async def delete(self, record_id: UUID) -> None:
        await self._run(self._remove, str(record_id))


class SqliteUserRepository(SqliteRepository[User], UserRepository):
    table = "users"
    columns = ("email", "name")

    def _to_record(self, row: sqlite3.Row) -> User:
        return User(
            id=UUID(row["id"]),
            email=row["email"],
            name=row["name"],
            created_at=_decode_timestamp(row["created_at"]),
            updated_at=_decode_timestamp(row["updated_at"]),
        )


class SqliteProductRepository(SqliteRepository[Product], ProductRepository):
    table = "products"
    columns = ("sku", "name", "price_cents")

    def _to_record(self, row: sqlite3.Row) -> Product:
        return Product(
            id=UUID(row["id"]),
            sku=row["sku"],
            name=row["name"],
            price_cents=row["price_cents"],
            created_at=_decode_timestamp(row["created_at"]),
            updated_at=_decode_timestamp(row["updated_at"]),
        )


class SqliteOrderRepository(SqliteRepository[Order], OrderRepository):
    """Orders reference users; the foreign key is enforced by SQLite.

    A missing ``user_id`` or deleting a user that still owns orders is
    not a uniqueness violation and therefore surfaces as ``Unexpected``.
    """

    table = "orders"
    columns = ("user_id", "status", "total_cents")

    def _to_record(self, row: sqlite3.Row) -> Order:
        return Order(
            id=UUID(row["id"]),
            user_id=UUID(row["user_id"]),
            status=row["status"],
            total_cents=row["total_cents"],
            created_at=_decode_timestamp(row["created_at"]),
            updated_at=_decode_timestamp(row["updated_at"]),
        )

"""
Repository ports, adapters and the bundle handed to the application.

``Repositories`` groups one repository per resource together with the
storage liveness probe.  ``create_app`` accepts any bundle, so the
SQLite adapters and the in‑memory fakes are interchangeable.
"""

from dataclasses import dataclass
from functools import partial
from typing import Callable, Optional

from .base import (
    Conflict,
    NotFound,
    OrderRepository,
    ProductRepository,
    RepoError,
    Unexpected,
    UserRepository,
)


@dataclass
class Repositories:
    users: UserRepository
    products: ProductRepository
    orders: OrderRepository
    # Blocking callable returning True when the store answers a round‑trip.
    ping: Callable[[], bool]
    # Called once on application startup, e.g. to apply migrations.
    bootstrap: Optional[Callable[[], None]] = None


def sqlite_repositories(database_path: Optional[str] = None, timeout: Optional[float] = None) -> Repositories:
    from ..core.db import init_db, ping
    from .sqlite import SqliteOrderRepository, SqliteProductRepository, SqliteUserRepository

    return Repositories(
        users=SqliteUserRepository(database_path, timeout),
        products=SqliteProductRepository(database_path, timeout),
        orders=SqliteOrderRepository(database_path, timeout),
        ping=partial(ping, database_path),
        bootstrap=partial(init_db, database_path),
    )


def memory_repositories() -> Repositories:
    from .memory import InMemoryOrderRepository, InMemoryProductRepository, InMemoryUserRepository

    return Repositories(
        users=InMemoryUserRepository(),
        products=InMemoryProductRepository(),
        orders=InMemoryOrderRepository(),
        ping=lambda: True,
    )


__all__ = [
    "Conflict",
    "NotFound",
    "OrderRepository",
    "ProductRepository",
    "RepoError",
    "Repositories",
    "Unexpected",
    "UserRepository",
    "memory_repositories",
    "sqlite_repositories",
]

"""
Service layer abstraction.

Each service wraps one repository port and exposes the same five
operations.  Routes depend on the service, never on a concrete
repository, so a SQLite adapter and an in‑memory fake can be swapped
without touching the API handlers.
"""

from .order_service import OrderService
from .product_service import ProductService
from .user_service import UserService

__all__ = ["UserService", "ProductService", "OrderService"]

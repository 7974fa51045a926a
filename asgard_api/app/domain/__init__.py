"""
Domain records for users, products and orders.

These are plain immutable records shared by every layer.  They carry
no persistence or HTTP concerns; see ``schemas`` for the API payloads.
"""

from .models import Order, Product, User

__all__ = ["User", "Product", "Order"]

"""
Top‑level router for version 1 of the API.

This router aggregates the per‑resource routers under a unified
prefix.  When a new resource is introduced, include its router here.
"""

from fastapi import APIRouter

from .endpoints import orders, products, users

router = APIRouter()

router.include_router(users.router, prefix="/users", tags=["users"])
router.include_router(products.router, prefix="/products", tags=["products"])
router.include_router(orders.router, prefix="/orders", tags=["orders"])

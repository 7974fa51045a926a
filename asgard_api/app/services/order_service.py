"""
Business logic for orders.

Orders reference a user by id.  This service deliberately performs no
cross‑resource check that the user exists; the storage layer's
foreign key is the only guard.  Rules such as "an order requires an
existing user" or status transitions would be added here.
"""

import logging
from typing import List
from uuid import UUID

from ..domain.models import Order
from ..repositories.base import NewOrder, OrderRepository, UpdateOrder

logger = logging.getLogger(__name__)


class OrderService:
    """Service for working with orders."""

    def __init__(self, repo: OrderRepository) -> None:
        self.repo = repo

    async def create(self, data: NewOrder) -> Order:
        order = await self.repo.create(data)
        logger.info("Created order %s for user %s", order.id, order.user_id)
        return order

    async def list(self) -> List[Order]:
        return await self.repo.list()

    async def get(self, order_id: UUID) -> Order:
        return await self.repo.get(order_id)

    async def update(self, order_id: UUID, data: UpdateOrder) -> Order:
        order = await self.repo.update(order_id, data)
        logger.info("Updated order %s (status=%s)", order_id, order.status)
        return order

    async def delete(self, order_id: UUID) -> None:
        await self.repo.delete(order_id)
        logger.info("Deleted order %s", order_id)

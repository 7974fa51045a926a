"""Business logic for the product catalogue."""

import logging
from typing import List
from uuid import UUID

from ..domain.models import Product
from ..repositories.base import NewProduct, ProductRepository, UpdateProduct

logger = logging.getLogger(__name__)


class ProductService:
    def __init__(self, repo: ProductRepository) -> None:
        self.repo = repo

    async def create(self, data: NewProduct) -> Product:
        product = await self.repo.create(data)
        logger.info("Created product %s (sku=%s)", product.id, product.sku)
        return product

    async def list(self) -> List[Product]:
        return await self.repo.list()

    async def get(self, product_id: UUID) -> Product:
        return await self.repo.get(product_id)

    async def update(self, product_id: UUID, data: UpdateProduct) -> Product:
        product = await self.repo.update(product_id, data)
        logger.info("Updated product %s", product_id)
        return product

    async def delete(self, product_id: UUID) -> None:
        await self.repo.delete(product_id)
        logger.info("Deleted product %s", product_id)

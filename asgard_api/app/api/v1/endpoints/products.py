"""Product endpoints for API v1."""

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, status

from asgard_api.app.api.deps import get_product_service
from asgard_api.app.schemas.product import ProductCreate, ProductRead, ProductUpdate
from asgard_api.app.services.product_service import ProductService

router = APIRouter()


@router.post("/", response_model=ProductRead, status_code=status.HTTP_201_CREATED)
async def create_product(
    body: ProductCreate,
    service: ProductService = Depends(get_product_service),
) -> ProductRead:
    """Create a product.  Returns 409 if the SKU already exists."""
    product = await service.create(body.to_input())
    return ProductRead.model_validate(product)


@router.get("/", response_model=List[ProductRead])
async def list_products(service: ProductService = Depends(get_product_service)) -> List[ProductRead]:
    return [ProductRead.model_validate(product) for product in await service.list()]


@router.get("/{product_id}", response_model=ProductRead)
async def get_product(product_id: UUID, service: ProductService = Depends(get_product_service)) -> ProductRead:
    return ProductRead.model_validate(await service.get(product_id))


@router.put("/{product_id}", response_model=ProductRead)
async def update_product(
    product_id: UUID,
    body: ProductUpdate,
    service: ProductService = Depends(get_product_service),
) -> ProductRead:
    product = await service.update(product_id, body.to_input())
    return ProductRead.model_validate(product)


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_product(product_id: UUID, service: ProductService = Depends(get_product_service)) -> None:
    await service.delete(product_id)
    return None

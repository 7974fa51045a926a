"""
Order endpoints for API v1.

Creating an order for an unknown ``user_id`` is rejected by the
storage layer's foreign key and reported as a server error; no
application‑level existence check is made.
"""

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, status

from asgard_api.app.api.deps import get_order_service
from asgard_api.app.schemas.order import OrderCreate, OrderRead, OrderUpdate
from asgard_api.app.services.order_service import OrderService

router = APIRouter()


@router.post("/", response_model=OrderRead, status_code=status.HTTP_201_CREATED)
async def create_order(body: OrderCreate, service: OrderService = Depends(get_order_service)) -> OrderRead:
    order = await service.create(body.to_input())
    return OrderRead.model_validate(order)


@router.get("/", response_model=List[OrderRead])
async def list_orders(service: OrderService = Depends(get_order_service)) -> List[OrderRead]:
    """Return all orders, most recently created first."""
    return [OrderRead.model_validate(order) for order in await service.list()]


@router.get("/{order_id}", response_model=OrderRead)
async def get_order(order_id: UUID, service: OrderService = Depends(get_order_service)) -> OrderRead:
    return OrderRead.model_validate(await service.get(order_id))


@router.put("/{order_id}", response_model=OrderRead)
async def update_order(
    order_id: UUID,
    body: OrderUpdate,
    service: OrderService = Depends(get_order_service),
) -> OrderRead:
    """Update an order's status and/or total.  Omitted fields are kept."""
    order = await service.update(order_id, body.to_input())
    return OrderRead.model_validate(order)


@router.delete("/{order_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_order(order_id: UUID, service: OrderService = Depends(get_order_service)) -> None:
    await service.delete(order_id)
    return None

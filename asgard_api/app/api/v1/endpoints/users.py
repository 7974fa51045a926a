"""
User endpoints for API v1.

Plain CRUD over users.  Repository errors propagate to the handler
registered in ``api.errors`` (404 for unknown ids, 409 for a duplicate
e‑mail).
"""

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, status

from asgard_api.app.api.deps import get_user_service
from asgard_api.app.schemas.user import UserCreate, UserRead, UserUpdate
from asgard_api.app.services.user_service import UserService

router = APIRouter()


@router.post("/", response_model=UserRead, status_code=status.HTTP_201_CREATED)
async def create_user(body: UserCreate, service: UserService = Depends(get_user_service)) -> UserRead:
    """Register a new user.  Returns 409 if the e‑mail is already taken."""
    user = await service.create(body.to_input())
    return UserRead.model_validate(user)


@router.get("/", response_model=List[UserRead])
async def list_users(service: UserService = Depends(get_user_service)) -> List[UserRead]:
    """Return all users, most recently created first."""
    return [UserRead.model_validate(user) for user in await service.list()]


@router.get("/{user_id}", response_model=UserRead)
async def get_user(user_id: UUID, service: UserService = Depends(get_user_service)) -> UserRead:
    return UserRead.model_validate(await service.get(user_id))


@router.put("/{user_id}", response_model=UserRead)
async def update_user(
    user_id: UUID,
    body: UserUpdate,
    service: UserService = Depends(get_user_service),
) -> UserRead:
    """Update a user's e‑mail and/or name.

    Omitted or ``null`` fields keep their stored value.  ``updated_at``
    is refreshed even when the body is empty.
    """
    user = await service.update(user_id, body.to_input())
    return UserRead.model_validate(user)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(user_id: UUID, service: UserService = Depends(get_user_service)) -> None:
    """Delete a user.

    A user that still owns orders cannot be deleted; the storage
    layer's foreign key rejects it and the request fails with 500.
    """
    await service.delete(user_id)
    return None

"""
Business logic for users.

``UserService`` is a thin call surface over a ``UserRepository``.  It
adds no rules of its own; uniqueness of e‑mail addresses is enforced
by the storage layer and reported as ``Conflict``.
"""

import logging
from typing import List
from uuid import UUID

from ..domain.models import User
from ..repositories.base import NewUser, UpdateUser, UserRepository

logger = logging.getLogger(__name__)


class UserService:
    """Service for working with users."""

    def __init__(self, repo: UserRepository) -> None:
        self.repo = repo

    async def create(self, data: NewUser) -> User:
        user = await self.repo.create(data)
        logger.info("Created user %s", user.id)
        return user

    async def list(self) -> List[User]:
        return await self.repo.list()

    async def get(self, user_id: UUID) -> User:
        return await self.repo.get(user_id)

    async def update(self, user_id: UUID, data: UpdateUser) -> User:
        user = await self.repo.update(user_id, data)
        logger.info("Updated user %s", user_id)
        return user

    async def delete(self, user_id: UUID) -> None:
        await self.repo.delete(user_id)
        logger.info("Deleted user %s", user_id)

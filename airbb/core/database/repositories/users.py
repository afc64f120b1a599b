"""
User repository.
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from airbb.core.models.domain.enums import UserType

from ..entities.users import User
from .base import QueryOptions, Repository


class UserRepository(Repository[User]):
    """Repository for user data access operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, User)

    async def owners(self) -> list[User]:
        """Users who may own residences, by name."""
        return await self.get_all(QueryOptions(filters=[User.user_type == UserType.owner.value], order_by=[User.name]))

    async def user_exists(self, user_id: int) -> bool:
        return await self.exists(User.user_id == user_id)

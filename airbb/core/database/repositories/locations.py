"""
Location repository.
"""

from __future__ import annotations

from typing import Optional

from sqlalchemy import func
from sqlalchemy.ext.asyncio import AsyncSession

from ..entities.locations import Location
from .base import QueryOptions, Repository


class LocationRepository(Repository[Location]):
    """Repository for location data access operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Location)

    async def all_by_name(self) -> list[Location]:
        """All locations, alphabetically."""
        return await self.get_all(QueryOptions(order_by=[Location.name]))

    async def get_by_name(self, name: str) -> Optional[Location]:
        """Find a location by name, ignoring case."""
        return await self.first(QueryOptions(filters=[func.lower(Location.name) == name.strip().lower()]))

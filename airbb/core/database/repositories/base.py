"""
Base repository interfaces and utilities.

This module provides the foundational repository patterns used across all
repository implementations: the abstract CRUD interface, ``QueryOptions`` for
describing a query declaratively, and the generic ``Repository`` that works
for any SQLModel entity.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from sqlalchemy import inspect, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload
from sqlalchemy.sql import Select
from sqlmodel import SQLModel

# Generic type for SQLModel entities
EntityType = TypeVar("EntityType", bound=SQLModel)


@dataclass
class QueryOptions:
    """Declarative description of a repository query.

    Attributes:
        filters: SQL boolean expressions, combined with AND
        includes: Relationship attributes to eager-load
        order_by: Columns or expressions to sort by
        skip: Number of rows to skip
        take: Maximum number of rows to return
    """

    filters: List[Any] = field(default_factory=list)
    includes: List[Any] = field(default_factory=list)
    order_by: List[Any] = field(default_factory=list)
    skip: Optional[int] = None
    take: Optional[int] = None


class AsyncBaseRepository(ABC, Generic[EntityType]):
    """Base async repository interface with common CRUD operations using SQLModel."""

    def __init__(self, session: AsyncSession, model: Type[EntityType]) -> None:
        """Initialize repository with async database session and SQLModel entity class.

        Args:
            session: Async SQLAlchemy session for database operations
            model: SQLModel entity class for this repository
        """
        self.session = session
        self.model = model

    @abstractmethod
    async def create(self, entity: EntityType) -> EntityType:
        """Create a new entity record.

        Args:
            entity: SQLModel instance to persist

        Returns:
            Persisted entity with generated fields populated
        """

    @abstractmethod
    async def get_by_id(self, entity_id: int) -> Optional[EntityType]:
        """Get entity by its primary identifier.

        Args:
            entity_id: Primary key value

        Returns:
            Entity instance or None if not found
        """

    @abstractmethod
    async def update(self, entity: EntityType) -> EntityType:
        """Update an existing entity record.

        Args:
            entity: SQLModel instance with updated fields

        Returns:
            Updated entity instance
        """

    @abstractmethod
    async def delete(self, entity_id: int) -> bool:
        """Delete entity by its primary identifier.

        Args:
            entity_id: Primary key value

        Returns:
            True if deleted, False if not found
        """

    @abstractmethod
    async def list(
        self, limit: Optional[int] = None, offset: Optional[int] = None, filters: Optional[Dict[str, Any]] = None
    ) -> List[EntityType]:
        """List entities with optional pagination and filtering.

        Args:
            limit: Maximum number of records to return
            offset: Number of records to skip
            filters: Dictionary of field filters

        Returns:
            List of entity instances
        """


class QueryBuilder:
    """Utility class for building SQLModel-based database queries."""

    @staticmethod
    def apply_filters(stmt, model: Type[EntityType], filters: Dict[str, Any]):
        """Apply equality filters to a select statement.

        Args:
            stmt: SQLAlchemy select statement
            model: SQLModel entity class
            filters: Dictionary of field filters; ``None`` values and unknown fields are skipped

        Returns:
            Modified select statement with filters applied
        """
        for key, value in filters.items():
            if value is not None and hasattr(model, key):
                stmt = stmt.where(getattr(model, key) == value)
        return stmt

    @staticmethod
    def apply_pagination(stmt, limit: Optional[int], offset: Optional[int]):
        """Apply pagination to a select statement.

        Args:
            stmt: SQLAlchemy select statement
            limit: Maximum number of records
            offset: Number of records to skip

        Returns:
            Modified select statement with pagination applied
        """
        if limit is not None:
            stmt = stmt.limit(limit)
        if offset is not None:
            stmt = stmt.offset(offset)
        return stmt

    @staticmethod
    def apply_options(stmt, options: QueryOptions):
        """Apply includes, filters, ordering and paging from ``QueryOptions``.

        Eager-loaded relationships overwrite whatever the session already
        holds for the returned rows, so callers always see current children.
        """
        if options.includes:
            stmt = stmt.options(*[selectinload(include) for include in options.includes])
            stmt = stmt.execution_options(populate_existing=True)
        for condition in options.filters:
            stmt = stmt.where(condition)
        if options.order_by:
            stmt = stmt.order_by(*options.order_by)
        return QueryBuilder.apply_pagination(stmt, options.take, options.skip)


class Repository(AsyncBaseRepository[EntityType]):
    """Generic repository usable for any SQLModel entity.

    Entity-specific repositories subclass it to add domain queries.
    """

    def query(self) -> Select:
        """Return a bare ``SELECT`` over the entity for custom queries."""
        return select(self.model)

    @property
    def _primary_key(self):
        return inspect(self.model).primary_key[0]

    async def get_all(self, options: Optional[QueryOptions] = None) -> List[EntityType]:
        """Return every entity matching ``options`` (all entities when omitted)."""
        stmt = self.query()
        if options is not None:
            stmt = QueryBuilder.apply_options(stmt, options)
        else:
            stmt = stmt.order_by(self._primary_key)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def first(self, options: QueryOptions) -> Optional[EntityType]:
        """Return the first entity matching ``options``, or None."""
        stmt = QueryBuilder.apply_options(self.query(), options).limit(1)
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def get_by_id(self, entity_id: int) -> Optional[EntityType]:
        return await self.session.get(self.model, entity_id)

    async def create(self, entity: EntityType) -> EntityType:
        self.session.add(entity)
        await self.session.commit()
        await self.session.refresh(entity)
        return entity

    async def update(self, entity: EntityType) -> EntityType:
        self.session.add(entity)
        await self.session.commit()
        await self.session.refresh(entity)
        return entity

    async def delete(self, entity_id: int) -> bool:
        entity = await self.get_by_id(entity_id)
        if entity is None:
            return False
        await self.delete_entity(entity)
        return True

    async def delete_entity(self, entity: EntityType) -> None:
        """Delete an already loaded entity."""
        await self.session.delete(entity)
        await self.session.commit()

    async def exists(self, *conditions: Any) -> bool:
        """Return True when at least one row satisfies all ``conditions``."""
        stmt = self.query()
        for condition in conditions:
            stmt = stmt.where(condition)
        result = await self.session.execute(select(stmt.exists()))
        return bool(result.scalar())

    async def list(
        self, limit: Optional[int] = None, offset: Optional[int] = None, filters: Optional[Dict[str, Any]] = None
    ) -> List[EntityType]:
        stmt = self.query().order_by(self._primary_key)
        if filters:
            stmt = QueryBuilder.apply_filters(stmt, self.model, filters)
        stmt = QueryBuilder.apply_pagination(stmt, limit, offset)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

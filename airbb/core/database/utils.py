"""
Database utility functions for engine and session management.

Functions:
- normalize_database_url: Turns configured connection strings into async SQLAlchemy URLs
- create_engine: Creates async SQLAlchemy engine with URL normalization
- create_sessionmaker: Creates async session factory with safe defaults
- create_all: Creates all tables from ORM metadata (for tests/dev)
"""

from __future__ import annotations

import re

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from .base import Base

_DATA_SOURCE = re.compile(r"^\s*data\s+source\s*=\s*(?P<path>[^;]+?)\s*;?\s*$", re.IGNORECASE)


def normalize_database_url(db_url: str) -> str:
    """Normalize a configured connection string to an async SQLAlchemy URL.

    - ``postgresql://`` and driver variants become ``postgresql+asyncpg://``.
    - ``sqlite://`` without a driver becomes ``sqlite+aiosqlite://``.
    - ADO-style ``Data Source=AirBB.db`` and bare file paths become
      ``sqlite+aiosqlite:///AirBB.db``.

    Args:
        db_url: Connection URL, ``Data Source=...`` string or SQLite file path

    Returns:
        URL usable by ``create_async_engine``
    """
    match = _DATA_SOURCE.match(db_url)
    if match:
        return f"sqlite+aiosqlite:///{match.group('path')}"
    if "://" not in db_url:
        return f"sqlite+aiosqlite:///{db_url.strip()}"
    url = re.sub(r"^postgres(?:ql)?(?:\+[a-z0-9_]+)?://", "postgresql+asyncpg://", db_url, count=1)
    return re.sub(r"^sqlite://", "sqlite+aiosqlite://", url, count=1)


def create_engine(db_url: str) -> AsyncEngine:
    """Create an async SQLAlchemy engine.

    Args:
        db_url: Database connection URL (normalized first)

    Returns:
        Configured AsyncEngine instance
    """
    url = normalize_database_url(db_url)
    if url.startswith("sqlite"):
        return create_async_engine(url)
    return create_async_engine(url, pool_pre_ping=True)


def create_sessionmaker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create an ``async_sessionmaker`` with safe defaults for this project.

    Args:
        engine: Async SQLAlchemy engine

    Returns:
        Configured async session factory
    """
    return async_sessionmaker(engine, expire_on_commit=False)


async def create_all(engine: AsyncEngine) -> None:
    """Create all tables for the current ORM metadata.

    This is mainly intended for tests and local development.
    Production should use Alembic migrations instead.

    Args:
        engine: Async SQLAlchemy engine
    """
    from . import entities  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

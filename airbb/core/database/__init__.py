"""
Database layer for AirBB.

Structure:
- entities/: SQLModel table models (locations, users, residences, reservations)
- repositories/: Generic async repository and entity-specific queries
- session.py: Global engine and session factory management
- utils.py: Engine, session factory and table creation helpers
"""

from .base import Base
from .session import (
    async_session_maker,
    engine,
    get_session,
    init_db,
)
from .utils import (
    create_all,
    create_engine,
    create_sessionmaker,
    normalize_database_url,
)

__all__ = [
    "Base",
    "async_session_maker",
    "create_all",
    "create_engine",
    "create_sessionmaker",
    "engine",
    "get_session",
    "init_db",
    "normalize_database_url",
]

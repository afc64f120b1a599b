"""
Router Dependencies.

Annotated FastAPI dependencies shared by the routers: the database session,
the repository bundle built on it, the session state and the booking service.
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from airbb.core.database import get_session
from airbb.core.database.repositories.bundle import RepositoryBundle, build_repositories
from airbb.server.core.config import settings

from .booking import BookingService
from .session_state import SessionManager, get_session_manager

DbSessionDep = Annotated[AsyncSession, Depends(get_session)]


def get_repositories(session: DbSessionDep) -> RepositoryBundle:
    return build_repositories(session=session)


ReposDep = Annotated[RepositoryBundle, Depends(get_repositories)]
SessionStateDep = Annotated[SessionManager, Depends(get_session_manager)]


def get_booking_service(repos: ReposDep, state: SessionStateDep) -> BookingService:
    return BookingService(repos, state, default_user_id=settings.booking.default_user_id)


BookingServiceDep = Annotated[BookingService, Depends(get_booking_service)]

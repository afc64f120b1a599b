"""
Repository bundle for dependency injection.

This module provides a convenience bundle of all repository instances
sharing one session, for services and routers.
"""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from .locations import LocationRepository
from .reservations import ReservationRepository
from .residences import ResidenceRepository
from .users import UserRepository


@dataclass(frozen=True)
class RepositoryBundle:
    """Convenience bundle of all SQL repositories for dependency injection."""

    locations: LocationRepository
    users: UserRepository
    residences: ResidenceRepository
    reservations: ReservationRepository


def build_repositories(*, session: AsyncSession) -> RepositoryBundle:
    """Build a RepositoryBundle from an existing session.

    Args:
        session: Existing async session

    Returns:
        Bundle containing all repository instances
    """
    return RepositoryBundle(
        locations=LocationRepository(session),
        users=UserRepository(session),
        residences=ResidenceRepository(session),
        reservations=ReservationRepository(session),
    )

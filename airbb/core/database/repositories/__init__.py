"""
Database repository layer using SQLModel.

All repositories extend the generic ``Repository`` from ``base``, which offers
the CRUD interface, ``QueryOptions``-driven queries and existence checks.

Modules:
- base: Repository interface, QueryOptions and QueryBuilder utilities
- locations: Location lookups
- users: User lookups, including residence owners
- residences: Residence details and the availability search
- reservations: Reservation lookups and overlap checks
- bundle: RepositoryBundle for dependency injection
"""

from .base import QueryBuilder, QueryOptions, Repository
from .bundle import RepositoryBundle, build_repositories
from .locations import LocationRepository
from .reservations import ReservationRepository
from .residences import ResidenceRepository
from .users import UserRepository

__all__ = [
    "LocationRepository",
    "QueryBuilder",
    "QueryOptions",
    "Repository",
    "RepositoryBundle",
    "ReservationRepository",
    "ResidenceRepository",
    "UserRepository",
    "build_repositories",
]

"""
I/O models for API requests and responses.

These models define the contract between API endpoints and clients and are
kept separate from database entities.

Modules:
- locations, users, residences, reservations: Entity read/create/update schemas
- views: Page-level view models for the guest-facing endpoints
"""

from .locations import LocationCreate, LocationRead, LocationUpdate
from .reservations import (
    CancelReservationRequest,
    ConfirmationConflict,
    ConfirmationResult,
    ReservationRead,
    ReservationWithResidence,
    ReserveRequest,
)
from .residences import (
    ResidenceCreate,
    ResidenceFormOptions,
    ResidenceRead,
    ResidenceUpdate,
    ResidenceWithDetails,
    ResidenceWithLocation,
)
from .users import UserCreate, UserRead, UserUpdate
from .views import (
    HomeView,
    MessageResult,
    MutationResult,
    ReservationCount,
    ReservationListView,
    ResidenceDetailView,
)

__all__ = [
    "CancelReservationRequest",
    "ConfirmationConflict",
    "ConfirmationResult",
    "HomeView",
    "LocationCreate",
    "LocationRead",
    "LocationUpdate",
    "MessageResult",
    "MutationResult",
    "ReservationCount",
    "ReservationListView",
    "ReservationRead",
    "ReservationWithResidence",
    "ReserveRequest",
    "ResidenceCreate",
    "ResidenceDetailView",
    "ResidenceFormOptions",
    "ResidenceRead",
    "ResidenceUpdate",
    "ResidenceWithDetails",
    "ResidenceWithLocation",
    "UserCreate",
    "UserRead",
    "UserUpdate",
]

"""Domain models and rules for bookings.

These types are shared between the repositories, the session state and the
API layer. They are plain pydantic models so they can be stored in the
session cookie and returned from endpoints unchanged.
"""

from .booking import (
    FilterCriteria,
    StagedReservation,
    date_ranges_overlap,
    default_stay,
)
from .enums import UserType

__all__ = [
    "FilterCriteria",
    "StagedReservation",
    "UserType",
    "date_ranges_overlap",
    "default_stay",
]

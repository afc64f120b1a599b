"""
Database entity models.

Each module holds one table:

- locations: Areas residences are listed under
- users: Owners, clients and administrators
- residences: Bookable properties
- reservations: Booked stays
"""

from .locations import Location
from .reservations import Reservation
from .residences import Residence
from .users import User

__all__ = [
    "Location",
    "Reservation",
    "Residence",
    "User",
]

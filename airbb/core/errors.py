"""
Booking domain errors.

Raised by repositories and services; the server maps each one to an HTTP
status in ``airbb.server.exception_handlers``.
"""

from __future__ import annotations

from datetime import date


class AirBBError(Exception):
    """Base class for errors raised by the booking domain."""

    status_code: int = 400

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class EntityNotFoundError(AirBBError):
    """An entity referenced by id does not exist."""

    status_code = 404

    def __init__(self, entity: str, entity_id: int) -> None:
        super().__init__(f"{entity} {entity_id} not found")
        self.entity = entity
        self.entity_id = entity_id


class ResidenceNotFoundError(EntityNotFoundError):
    def __init__(self, residence_id: int) -> None:
        super().__init__("Residence", residence_id)


class ReservationConflictError(AirBBError):
    """The residence is already booked for part of the requested stay."""

    status_code = 409

    def __init__(self, residence_id: int, start_date: date, end_date: date) -> None:
        super().__init__("Sorry, this residence is not available for the selected dates.")
        self.residence_id = residence_id
        self.start_date = start_date
        self.end_date = end_date


class InvalidStayError(AirBBError):
    """The stay's check-out is not after its check-in."""

    status_code = 422

    def __init__(self, start_date: date, end_date: date) -> None:
        super().__init__(f"End date {end_date.isoformat()} must be after start date {start_date.isoformat()}.")
        self.start_date = start_date
        self.end_date = end_date


class InvalidReferenceError(AirBBError):
    """A foreign key on submitted data points at a missing row."""

    status_code = 422

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field


class InvalidOwnerError(InvalidReferenceError):
    def __init__(self) -> None:
        super().__init__("owner_id", "Owner (User) does not exist. Please select a valid owner.")


class InvalidLocationError(InvalidReferenceError):
    def __init__(self) -> None:
        super().__init__("location_id", "Location does not exist. Please select a valid location.")

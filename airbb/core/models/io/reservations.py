"""
Reservation I/O models for API requests and responses.
"""

from __future__ import annotations

from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .residences import ResidenceWithLocation


class ReservationRead(BaseModel):
    """Schema for reading a persisted or staged reservation."""

    model_config = ConfigDict(from_attributes=True)

    reservation_id: Optional[int] = None
    residence_id: int
    user_id: int
    reservation_start_date: date
    reservation_end_date: date


class ReservationWithResidence(ReservationRead):
    """Reservation together with the residence it books."""

    residence: Optional[ResidenceWithLocation] = None


class ReserveRequest(BaseModel):
    """Request to stage a stay at a residence."""

    residence_id: int = Field(gt=0)
    start_date: date
    end_date: date

    @model_validator(mode="after")
    def _end_after_start(self) -> "ReserveRequest":
        if self.end_date <= self.start_date:
            raise ValueError("End date must be after start date.")
        return self


class CancelReservationRequest(BaseModel):
    """Request to drop a staged reservation.

    ``reservation_id`` is matched first when positive; otherwise the first
    staged reservation of ``residence_id`` is dropped.
    """

    reservation_id: int = 0
    residence_id: int = 0


class ConfirmationConflict(BaseModel):
    """A staged reservation that could not be persisted."""

    reservation: ReservationRead
    reason: str


class ConfirmationResult(BaseModel):
    """Outcome of persisting the staged reservations."""

    confirmed: list[ReservationRead] = Field(default_factory=list)
    conflicts: list[ConfirmationConflict] = Field(default_factory=list)
    message: Optional[str] = None

"""
Reservation entity models.

A reservation books a residence for the nights in ``[start, end)``.
"""

from datetime import date
from typing import TYPE_CHECKING, Optional

from sqlmodel import Field, Relationship

from airbb.core.models.domain.booking import date_ranges_overlap

from ..base import Base

if TYPE_CHECKING:
    from .residences import Residence
    from .users import User


class ReservationBase(Base):
    """Base fields for a reservation."""

    residence_id: int = Field(foreign_key="residences.residence_id", index=True, ondelete="CASCADE")
    user_id: int = Field(foreign_key="users.user_id", index=True, ondelete="CASCADE")
    reservation_start_date: date = Field(description="Check-in date")
    reservation_end_date: date = Field(description="Check-out date")


class Reservation(ReservationBase, table=True):
    """Persistent reservation.

    Table: reservations
    """

    __tablename__ = "reservations"
    __table_args__ = ({"extend_existing": True},)

    reservation_id: Optional[int] = Field(default=None, primary_key=True)

    residence: Optional["Residence"] = Relationship(back_populates="reservations")
    user: Optional["User"] = Relationship(back_populates="reservations")

    def overlaps(self, start: date, end: date) -> bool:
        return date_ranges_overlap(self.reservation_start_date, self.reservation_end_date, start, end)

    def __repr__(self) -> str:
        return (
            f"Reservation(id={self.reservation_id}, residence_id={self.residence_id}, "
            f"{self.reservation_start_date}..{self.reservation_end_date})"
        )

"""Booking rules shared by the repositories, services and API.

Stays are half-open date ranges ``[start, end)``: the check-out day of one
stay may be the check-in day of the next.
"""

from __future__ import annotations

from datetime import date, timedelta
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


def date_ranges_overlap(a_start: date, a_end: date, b_start: date, b_end: date) -> bool:
    """Return True when the stays ``[a_start, a_end)`` and ``[b_start, b_end)`` share a night."""
    return a_start < b_end and a_end > b_start


class FilterCriteria(BaseModel):
    """The guest's residence search, kept in the session between requests.

    Each criterion is ignored unless set: ``location_id`` and ``guest_number``
    must also be positive, and the stay dates only apply as a pair.
    """

    model_config = ConfigDict(extra="ignore")

    location_id: Optional[int] = Field(default=None, description="Location to search in")
    guest_number: Optional[int] = Field(default=None, description="Minimum number of guests")
    check_in_date: Optional[date] = Field(default=None, description="Requested check-in date")
    check_out_date: Optional[date] = Field(default=None, description="Requested check-out date")

    @property
    def has_location(self) -> bool:
        return self.location_id is not None and self.location_id > 0

    @property
    def has_guest_number(self) -> bool:
        return self.guest_number is not None and self.guest_number > 0

    @property
    def has_stay(self) -> bool:
        return self.check_in_date is not None and self.check_out_date is not None


class StagedReservation(BaseModel):
    """A reservation held in the guest's session until it is confirmed.

    ``reservation_id`` stays ``None`` until the reservation is persisted.
    """

    reservation_id: Optional[int] = None
    residence_id: int
    user_id: int
    reservation_start_date: date
    reservation_end_date: date

    def overlaps(self, start: date, end: date) -> bool:
        return date_ranges_overlap(self.reservation_start_date, self.reservation_end_date, start, end)

    def matches(self, other: "StagedReservation") -> bool:
        """Same booking, compared by id when both are persisted, else by residence and stay."""
        if self.reservation_id and other.reservation_id:
            return self.reservation_id == other.reservation_id
        return (
            self.residence_id == other.residence_id
            and self.reservation_start_date == other.reservation_start_date
            and self.reservation_end_date == other.reservation_end_date
        )


def default_stay(criteria: FilterCriteria, today: Optional[date] = None) -> tuple[date, date]:
    """Stay pre-filled on a residence page: the searched dates, else tonight only.

    Each date falls back independently, as the search form may set only one.
    """
    today = today or date.today()
    start = criteria.check_in_date or today
    end = criteria.check_out_date or today + timedelta(days=1)
    return start, end

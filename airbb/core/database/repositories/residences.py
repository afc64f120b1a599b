"""
Residence repository.

Holds the availability search: residences are narrowed by location, party
size and, when both stay dates are known, by the absence of any persisted
reservation that overlaps the stay.
"""

from __future__ import annotations

from datetime import date
from typing import Optional

from sqlalchemy import and_
from sqlalchemy.ext.asyncio import AsyncSession

from airbb.core.models.domain.booking import FilterCriteria

from ..entities.reservations import Reservation
from ..entities.residences import Residence
from .base import QueryOptions, Repository


def overlapping_reservation(check_in: date, check_out: date):
    """SQL condition: a reservation shares at least one night with ``[check_in, check_out)``."""
    return and_(
        Reservation.reservation_start_date < check_out,
        Reservation.reservation_end_date > check_in,
    )


class ResidenceRepository(Repository[Residence]):
    """Repository for residence data access operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Residence)

    @staticmethod
    def search_options(criteria: Optional[FilterCriteria]) -> QueryOptions:
        """Build the query options for a guest's search.

        Args:
            criteria: Session filter; ``None`` returns every residence

        Returns:
            QueryOptions with location and reservations eager-loaded
        """
        options = QueryOptions(
            includes=[Residence.location, Residence.reservations],
            order_by=[Residence.residence_id],
        )
        if criteria is None:
            return options

        if criteria.has_location:
            options.filters.append(Residence.location_id == criteria.location_id)

        if criteria.has_guest_number:
            options.filters.append(Residence.guest_number >= criteria.guest_number)

        if criteria.has_stay:
            options.filters.append(
                ~Residence.reservations.any(overlapping_reservation(criteria.check_in_date, criteria.check_out_date))
            )

        return options

    async def search(self, criteria: Optional[FilterCriteria]) -> list[Residence]:
        """Residences matching the guest's search."""
        return await self.get_all(self.search_options(criteria))

    async def get_with_details(self, residence_id: int) -> Optional[Residence]:
        """A residence with its location, owner and reservations loaded."""
        return await self.first(
            QueryOptions(
                filters=[Residence.residence_id == residence_id],
                includes=[Residence.location, Residence.owner, Residence.reservations],
            )
        )

    async def list_with_details(self) -> list[Residence]:
        """Every residence with its location and owner loaded."""
        return await self.get_all(
            QueryOptions(
                includes=[Residence.location, Residence.owner],
                order_by=[Residence.residence_id],
            )
        )

    async def residence_exists(self, residence_id: int) -> bool:
        return await self.exists(Residence.residence_id == residence_id)

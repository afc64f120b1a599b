"""
Reservation repository.
"""

from __future__ import annotations

from datetime import date
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from ..entities.reservations import Reservation
from .base import QueryOptions, Repository
from .residences import overlapping_reservation


class ReservationRepository(Repository[Reservation]):
    """Repository for reservation data access operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Reservation)

    async def for_residence(self, residence_id: int) -> list[Reservation]:
        """Reservations of one residence, earliest stay first."""
        return await self.get_all(
            QueryOptions(
                filters=[Reservation.residence_id == residence_id],
                order_by=[Reservation.reservation_start_date],
            )
        )

    async def has_overlap(
        self,
        residence_id: int,
        start: date,
        end: date,
        exclude_id: Optional[int] = None,
    ) -> bool:
        """True when a persisted reservation of the residence shares a night with ``[start, end)``.

        Args:
            residence_id: Residence to check
            start: Check-in date
            end: Check-out date
            exclude_id: Reservation to ignore, e.g. the one being moved
        """
        conditions = [Reservation.residence_id == residence_id, overlapping_reservation(start, end)]
        if exclude_id is not None:
            conditions.append(Reservation.reservation_id != exclude_id)
        return await self.exists(*conditions)

"""
Booking Service.

Implements the guest-facing workflow on top of the repositories and the
session state:

- searching residences with the filter stored in the session,
- showing a residence with a reservation draft,
- staging a reservation after checking the stay is free,
- listing, cancelling and counting staged reservations,
- confirming staged reservations into the database.

Availability is checked against persisted reservations and against the
reservations already staged in the same session.
"""

from __future__ import annotations

from datetime import date
from typing import Optional

from airbb.core.database.entities.reservations import Reservation
from airbb.core.database.entities.residences import Residence
from airbb.core.database.repositories.base import QueryOptions
from airbb.core.database.repositories.bundle import RepositoryBundle
from airbb.core.errors import InvalidStayError, ReservationConflictError, ResidenceNotFoundError
from airbb.core.logging_config import get_logger
from airbb.core.models.domain.booking import FilterCriteria, StagedReservation, default_stay
from airbb.core.models.io.locations import LocationRead
from airbb.core.models.io.reservations import (
    ConfirmationConflict,
    ConfirmationResult,
    ReservationRead,
    ReservationWithResidence,
)
from airbb.core.models.io.residences import ResidenceWithLocation
from airbb.core.models.io.views import HomeView, ReservationListView, ResidenceDetailView
from airbb.core.monitoring import log_booking_event

from .session_state import SessionManager

logger = get_logger(__name__)

RESERVATION_COMPLETED_MESSAGE = "Reservation completed successfully!"
RESERVATION_CANCELLED_MESSAGE = "Reservation cancelled successfully!"


class BookingService:
    """Guest booking workflow for one request."""

    def __init__(self, repos: RepositoryBundle, state: SessionManager, default_user_id: int = 1) -> None:
        self.repos = repos
        self.state = state
        self.default_user_id = default_user_id

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------

    async def home(self) -> HomeView:
        """Residences matching the session search, all locations and any pending message."""
        criteria = self.state.get_filter_criteria()
        locations = await self.repos.locations.all_by_name()
        residences = await self.repos.residences.search(criteria)
        logger.debug(
            f"Home search - location_id: {criteria.location_id}, guest_number: {criteria.guest_number}, "
            f"check_in: {criteria.check_in_date}, check_out: {criteria.check_out_date} -> {len(residences)} residences"
        )
        return HomeView(
            filter_criteria=criteria,
            residences=[ResidenceWithLocation.model_validate(r) for r in residences],
            locations=[LocationRead.model_validate(loc) for loc in locations],
            message=self.state.pop_flash(),
        )

    def apply_filter(self, criteria: Optional[FilterCriteria]) -> FilterCriteria:
        """Store the guest's search; a missing search resets it."""
        criteria = criteria or FilterCriteria()
        logger.debug(f"Filter received: {criteria.model_dump()}")
        self.state.set_filter_criteria(criteria)
        return criteria

    async def residence_detail(self, residence_id: int, today: Optional[date] = None) -> ResidenceDetailView:
        """A residence with a reservation draft for the searched stay.

        Raises:
            ResidenceNotFoundError: when the residence does not exist
        """
        residence = await self.repos.residences.first(
            QueryOptions(filters=[Residence.residence_id == residence_id], includes=[Residence.location])
        )
        if residence is None:
            raise ResidenceNotFoundError(residence_id)

        criteria = self.state.get_filter_criteria()
        start, end = default_stay(criteria, today)
        draft = ReservationRead(
            residence_id=residence_id,
            user_id=self.default_user_id,
            reservation_start_date=start,
            reservation_end_date=end,
        )
        return ResidenceDetailView(
            residence=ResidenceWithLocation.model_validate(residence),
            filter=criteria,
            reservation=draft,
            message=self.state.pop_flash(),
        )

    # ------------------------------------------------------------------
    # Staged reservations
    # ------------------------------------------------------------------

    async def is_available(self, residence_id: int, start: date, end: date) -> bool:
        """True when neither a persisted nor a staged reservation shares a night with the stay."""
        if await self.repos.reservations.has_overlap(residence_id, start, end):
            return False
        return not any(
            staged.residence_id == residence_id and staged.overlaps(start, end)
            for staged in self.state.get_reservations()
        )

    async def reserve(self, residence_id: int, start: date, end: date) -> StagedReservation:
        """Stage a reservation in the session for the default user.

        Raises:
            InvalidStayError: when ``end`` is not after ``start``
            ResidenceNotFoundError: when the residence does not exist
            ReservationConflictError: when the stay is not free
        """
        if end <= start:
            raise InvalidStayError(start, end)

        if not await self.repos.residences.residence_exists(residence_id):
            raise ResidenceNotFoundError(residence_id)

        if not await self.is_available(residence_id, start, end):
            conflict = ReservationConflictError(residence_id, start, end)
            self.state.flash(conflict.message)
            log_booking_event("rejected", residence_id, start=start.isoformat(), end=end.isoformat())
            raise conflict

        staged = StagedReservation(
            residence_id=residence_id,
            user_id=self.default_user_id,
            reservation_start_date=start,
            reservation_end_date=end,
        )
        self.state.add_reservation(staged)
        self.state.flash(RESERVATION_COMPLETED_MESSAGE)
        log_booking_event("staged", residence_id, start=start.isoformat(), end=end.isoformat())
        return staged

    async def reservation_list(self) -> ReservationListView:
        """Staged reservations, each with its residence and location."""
        staged = self.state.get_reservations()
        residence_ids = sorted({r.residence_id for r in staged})
        residences: dict[int, Residence] = {}
        if residence_ids:
            rows = await self.repos.residences.get_all(
                QueryOptions(filters=[Residence.residence_id.in_(residence_ids)], includes=[Residence.location])
            )
            residences = {r.residence_id: r for r in rows}

        items = []
        for reservation in staged:
            residence = residences.get(reservation.residence_id)
            items.append(
                ReservationWithResidence(
                    **reservation.model_dump(),
                    residence=ResidenceWithLocation.model_validate(residence) if residence else None,
                )
            )
        return ReservationListView(
            reservations=items,
            filter=self.state.get_filter_criteria(),
            message=self.state.pop_flash(),
        )

    def cancel(self, reservation_id: int = 0, residence_id: int = 0) -> Optional[StagedReservation]:
        """Drop a staged reservation.

        Matches by ``reservation_id`` when positive, falling back to the first
        staged reservation of ``residence_id``.

        Returns:
            The dropped reservation, or None when nothing matched
        """
        staged = self.state.get_reservations()
        target: Optional[StagedReservation] = None
        if reservation_id > 0:
            target = next((r for r in staged if r.reservation_id == reservation_id), None)
        if target is None and residence_id > 0:
            target = next((r for r in staged if r.residence_id == residence_id), None)

        if target is None:
            logger.debug(f"No staged reservation for reservation_id={reservation_id}, residence_id={residence_id}")
            return None

        self.state.remove_reservation(target)
        self.state.flash(RESERVATION_CANCELLED_MESSAGE)
        log_booking_event("cancelled", target.residence_id)
        return target

    def count(self) -> int:
        return self.state.reservation_count()

    async def confirm(self) -> ConfirmationResult:
        """Persist every staged reservation whose stay is still free.

        Reservations that can no longer be booked stay in the session and are
        reported as conflicts.
        """
        result = ConfirmationResult()
        remaining: list[StagedReservation] = []

        for staged in self.state.get_reservations():
            reason = await self._confirmation_blocker(staged)
            if reason is not None:
                remaining.append(staged)
                result.conflicts.append(
                    ConfirmationConflict(reservation=ReservationRead(**staged.model_dump()), reason=reason)
                )
                continue

            reservation = await self.repos.reservations.create(
                Reservation(
                    residence_id=staged.residence_id,
                    user_id=staged.user_id,
                    reservation_start_date=staged.reservation_start_date,
                    reservation_end_date=staged.reservation_end_date,
                )
            )
            result.confirmed.append(ReservationRead.model_validate(reservation))
            log_booking_event("confirmed", staged.residence_id, reservation_id=reservation.reservation_id)

        self.state.replace_reservations(remaining)
        result.message = f"{len(result.confirmed)} reservation(s) confirmed, {len(result.conflicts)} could not be booked."
        return result

    async def _confirmation_blocker(self, staged: StagedReservation) -> Optional[str]:
        if not await self.repos.residences.residence_exists(staged.residence_id):
            return ResidenceNotFoundError(staged.residence_id).message
        if not await self.repos.users.user_exists(staged.user_id):
            return f"User {staged.user_id} not found"
        if await self.repos.reservations.has_overlap(
            staged.residence_id, staged.reservation_start_date, staged.reservation_end_date
        ):
            return ReservationConflictError(
                staged.residence_id, staged.reservation_start_date, staged.reservation_end_date
            ).message
        return None

"""
Session State.

Wraps the signed-cookie session that Starlette's ``SessionMiddleware``
attaches to each request. The session carries the guest's residence search,
the reservations staged but not yet confirmed, and a one-shot flash message
for the next page read.

Everything is stored as JSON-compatible dicts so it survives the cookie
round trip.
"""

from __future__ import annotations

from typing import Any, MutableMapping, Optional

from fastapi import Request
from pydantic import ValidationError

from airbb.core.logging_config import get_logger
from airbb.core.models.domain.booking import FilterCriteria, StagedReservation

logger = get_logger(__name__)

FILTER_KEY = "filter_criteria"
RESERVATIONS_KEY = "reservations"
FLASH_KEY = "flash_message"


class SessionManager:
    """Typed access to the per-guest session."""

    def __init__(self, session: MutableMapping[str, Any]) -> None:
        self._session = session

    # ------------------------------------------------------------------
    # Filter criteria
    # ------------------------------------------------------------------

    def get_filter_criteria(self) -> FilterCriteria:
        """The stored search, or an empty one when none (or a corrupt one) is stored."""
        raw = self._session.get(FILTER_KEY)
        if not raw:
            return FilterCriteria()
        try:
            return FilterCriteria.model_validate(raw)
        except ValidationError:
            logger.warning("Discarding unreadable filter criteria from session")
            self._session.pop(FILTER_KEY, None)
            return FilterCriteria()

    def set_filter_criteria(self, criteria: Optional[FilterCriteria]) -> None:
        criteria = criteria or FilterCriteria()
        self._session[FILTER_KEY] = criteria.model_dump(mode="json")

    # ------------------------------------------------------------------
    # Staged reservations
    # ------------------------------------------------------------------

    def get_reservations(self) -> list[StagedReservation]:
        reservations: list[StagedReservation] = []
        for raw in self._session.get(RESERVATIONS_KEY) or []:
            try:
                reservations.append(StagedReservation.model_validate(raw))
            except ValidationError:
                logger.warning(f"Dropping unreadable staged reservation from session: {raw!r}")
        return reservations

    def _store_reservations(self, reservations: list[StagedReservation]) -> None:
        self._session[RESERVATIONS_KEY] = [r.model_dump(mode="json") for r in reservations]

    def add_reservation(self, reservation: StagedReservation) -> None:
        reservations = self.get_reservations()
        reservations.append(reservation)
        self._store_reservations(reservations)

    def remove_reservation(self, reservation: StagedReservation) -> bool:
        """Remove the first staged reservation matching ``reservation``.

        Returns:
            True when one was removed
        """
        reservations = self.get_reservations()
        for index, staged in enumerate(reservations):
            if staged.matches(reservation):
                del reservations[index]
                self._store_reservations(reservations)
                return True
        return False

    def replace_reservations(self, reservations: list[StagedReservation]) -> None:
        self._store_reservations(reservations)

    def clear_reservations(self) -> None:
        self._session.pop(RESERVATIONS_KEY, None)

    def reservation_count(self) -> int:
        return len(self.get_reservations())

    # ------------------------------------------------------------------
    # Flash message
    # ------------------------------------------------------------------

    def flash(self, message: str) -> None:
        self._session[FLASH_KEY] = message

    def pop_flash(self) -> Optional[str]:
        return self._session.pop(FLASH_KEY, None)


def get_session_manager(request: Request) -> SessionManager:
    """FastAPI dependency returning the session manager for the current request."""
    return SessionManager(request.session)

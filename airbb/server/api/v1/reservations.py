"""
Reservation Endpoints.

Staging, listing, cancelling, counting and confirming the reservations a
guest holds in their session.
"""

from fastapi import APIRouter, status

from airbb.core.logging_config import get_logger
from airbb.core.models.io.reservations import (
    CancelReservationRequest,
    ConfirmationResult,
    ReservationRead,
    ReserveRequest,
)
from airbb.core.models.io.views import ReservationCount, ReservationListView
from airbb.server.services.deps import BookingServiceDep

logger = get_logger(__name__)

router = APIRouter()


@router.post(
    "",
    response_model=ReservationRead,
    status_code=status.HTTP_201_CREATED,
    summary="Reserve Residence",
    description="Stage a reservation in the session when the residence is free for the stay.",
    response_description="The staged reservation.",
    responses={
        201: {"description": "Reservation staged"},
        404: {"description": "Residence not found"},
        409: {"description": "Residence not available for the selected dates"},
        422: {"description": "End date not after start date"},
    },
)
async def reserve(request: ReserveRequest, booking: BookingServiceDep) -> ReservationRead:
    """
    Reserve a residence.

    The stay must not overlap any confirmed reservation of the residence nor a
    reservation already staged in this session. Stays are half-open, so a
    check-out day may be another stay's check-in day.
    """
    staged = await booking.reserve(request.residence_id, request.start_date, request.end_date)
    return ReservationRead(**staged.model_dump())


@router.get(
    "",
    response_model=ReservationListView,
    summary="List Staged Reservations",
    description="List the reservations staged in the session with their residences.",
)
async def list_reservations(booking: BookingServiceDep) -> ReservationListView:
    return await booking.reservation_list()


@router.post(
    "/cancel",
    response_model=ReservationListView,
    summary="Cancel Staged Reservation",
    description="Drop a staged reservation by id, or the first one for a residence.",
    response_description="The remaining staged reservations.",
)
async def cancel_reservation(request: CancelReservationRequest, booking: BookingServiceDep) -> ReservationListView:
    """
    Cancel a staged reservation.

    - **reservation_id**: matched first when positive.
    - **residence_id**: otherwise the first staged reservation of this residence is dropped.

    Nothing happens when neither matches.
    """
    booking.cancel(request.reservation_id, request.residence_id)
    return await booking.reservation_list()


@router.get(
    "/count",
    response_model=ReservationCount,
    summary="Count Staged Reservations",
)
async def reservation_count(booking: BookingServiceDep) -> ReservationCount:
    return ReservationCount(count=booking.count())


@router.post(
    "/confirm",
    response_model=ConfirmationResult,
    summary="Confirm Staged Reservations",
    description="Persist the staged reservations whose stays are still free.",
    response_description="Confirmed reservations and the ones that could not be booked.",
)
async def confirm_reservations(booking: BookingServiceDep) -> ConfirmationResult:
    """
    Confirm staged reservations.

    Each staged reservation is re-checked against the database. Reservations
    that are no longer free stay in the session and are listed as conflicts.
    """
    result = await booking.confirm()
    logger.info(f"Confirmed {len(result.confirmed)} reservations, {len(result.conflicts)} conflicts")
    return result

"""
Home Endpoints.

Guest-facing residence browsing: the filtered residence list, updating the
search kept in the session, and a residence's detail page.
"""

from typing import Optional

from fastapi import APIRouter, Body

from airbb.core.logging_config import get_logger
from airbb.core.models.domain.booking import FilterCriteria
from airbb.core.models.io.views import HomeView, ResidenceDetailView
from airbb.server.services.deps import BookingServiceDep

logger = get_logger(__name__)

router = APIRouter()


@router.get(
    "/home",
    response_model=HomeView,
    summary="List Residences",
    description="List residences matching the search stored in the session, with all locations.",
    response_description="Home view with the search, matching residences, locations and any pending message.",
)
async def index(booking: BookingServiceDep) -> HomeView:
    """
    Residence list.

    Filters residences with the session search:

    - **location_id**: only when set and positive.
    - **guest_number**: residences hosting at least this many guests, only when positive.
    - **check_in_date / check_out_date**: residences with no reservation overlapping the stay,
      only when both are set.
    """
    return await booking.home()


@router.post(
    "/home/filter",
    response_model=HomeView,
    summary="Update Search",
    description="Store the residence search in the session and return the filtered list.",
    response_description="Home view for the new search.",
)
async def apply_filter(
    booking: BookingServiceDep,
    criteria: Optional[FilterCriteria] = Body(default=None),
) -> HomeView:
    """
    Update the residence search.

    A missing body clears the search.
    """
    booking.apply_filter(criteria)
    return await booking.home()


@router.get(
    "/residences/{residence_id}",
    response_model=ResidenceDetailView,
    summary="Residence Details",
    description="Retrieve a residence with a reservation draft for the searched stay.",
    response_description="Residence, current search and reservation draft.",
    responses={
        200: {"description": "Residence found"},
        404: {"description": "Residence not found"},
    },
)
async def details(residence_id: int, booking: BookingServiceDep) -> ResidenceDetailView:
    """
    Residence details.

    The reservation draft uses the searched stay dates, falling back to today
    for check-in and tomorrow for check-out.
    """
    return await booking.residence_detail(residence_id)

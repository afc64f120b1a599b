"""
View models returned by the guest-facing pages.

Each one bundles what a page shows, including the one-shot ``message`` left
by the previous action.
"""

from __future__ import annotations

from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, Field

from airbb.core.models.domain.booking import FilterCriteria

from .locations import LocationRead
from .reservations import ReservationRead, ReservationWithResidence
from .residences import ResidenceWithLocation

T = TypeVar("T")


class HomeView(BaseModel):
    """Residence list filtered by the session search."""

    filter_criteria: FilterCriteria = Field(default_factory=FilterCriteria)
    residences: list[ResidenceWithLocation] = Field(default_factory=list)
    locations: list[LocationRead] = Field(default_factory=list)
    message: Optional[str] = None


class ResidenceDetailView(BaseModel):
    """One residence with a reservation draft for the searched stay."""

    residence: ResidenceWithLocation
    filter: FilterCriteria = Field(default_factory=FilterCriteria)
    reservation: ReservationRead
    message: Optional[str] = None


class ReservationListView(BaseModel):
    """Reservations staged in the session."""

    reservations: list[ReservationWithResidence] = Field(default_factory=list)
    filter: FilterCriteria = Field(default_factory=FilterCriteria)
    message: Optional[str] = None


class ReservationCount(BaseModel):
    count: int


class MutationResult(BaseModel, Generic[T]):
    """An admin change together with its confirmation message."""

    item: T
    message: str


class MessageResult(BaseModel):
    """Confirmation of an admin change that returns no entity."""

    message: str

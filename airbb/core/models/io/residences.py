"""
Residence I/O models for API requests and responses.
"""

from __future__ import annotations

from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .locations import LocationRead
from .users import UserRead

MIN_BUILT_YEAR = 1800


class ResidenceRead(BaseModel):
    """Schema for reading a residence."""

    model_config = ConfigDict(from_attributes=True)

    residence_id: int
    name: str
    residence_picture: Optional[str] = None
    location_id: int
    owner_id: int
    guest_number: int
    bedroom_number: int
    bathroom_number: int
    built_year: int
    price_per_night: float


class ResidenceWithLocation(ResidenceRead):
    """Residence together with the location it is listed under."""

    location: Optional[LocationRead] = None


class ResidenceWithDetails(ResidenceWithLocation):
    """Residence together with its location and owner."""

    owner: Optional[UserRead] = None


class ResidenceCreate(BaseModel):
    """Schema for creating a residence."""

    name: str = Field(min_length=1, max_length=100)
    residence_picture: Optional[str] = Field(default=None, max_length=255)
    location_id: int = Field(gt=0)
    owner_id: int = Field(gt=0)
    guest_number: int = Field(ge=1, le=50)
    bedroom_number: int = Field(ge=0, le=50)
    bathroom_number: int = Field(ge=0, le=50)
    built_year: int
    price_per_night: float = Field(gt=0)

    @field_validator("built_year")
    @classmethod
    def _built_year_range(cls, value: int) -> int:
        current_year = date.today().year
        if not MIN_BUILT_YEAR <= value <= current_year:
            raise ValueError(f"Built year must be between {MIN_BUILT_YEAR} and {current_year}.")
        return value


class ResidenceUpdate(ResidenceCreate):
    """Schema for replacing a residence; ``residence_id`` must match the URL when given."""

    residence_id: Optional[int] = None


class ResidenceFormOptions(BaseModel):
    """Choices offered by the residence create and edit forms."""

    locations: list[LocationRead] = Field(default_factory=list)
    owners: list[UserRead] = Field(default_factory=list)

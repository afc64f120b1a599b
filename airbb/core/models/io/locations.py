"""
Location I/O models for API requests and responses.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class LocationRead(BaseModel):
    """Schema for reading a location."""

    model_config = ConfigDict(from_attributes=True)

    location_id: int
    name: str


class LocationCreate(BaseModel):
    """Schema for creating a location."""

    name: str = Field(min_length=1, max_length=100, description="Location name")

    @field_validator("name")
    @classmethod
    def _strip_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Please enter a location name.")
        return value


class LocationUpdate(LocationCreate):
    """Schema for replacing a location; ``location_id`` must match the URL when given."""

    location_id: Optional[int] = None

"""
Location entity models.

A location is a city or area that residences are listed under.
"""

from typing import TYPE_CHECKING, List, Optional

from sqlmodel import Field, Relationship

from ..base import Base

if TYPE_CHECKING:
    from .residences import Residence


class LocationBase(Base):
    """Base fields for a location."""

    name: str = Field(max_length=100, index=True, unique=True, description="Location name")


class Location(LocationBase, table=True):
    """Persistent location.

    Table: locations
    """

    __tablename__ = "locations"
    __table_args__ = ({"extend_existing": True},)

    location_id: Optional[int] = Field(default=None, primary_key=True)

    residences: List["Residence"] = Relationship(
        back_populates="location",
        sa_relationship_kwargs={"cascade": "all, delete-orphan"},
    )

    def __repr__(self) -> str:
        return f"Location(id={self.location_id}, name={self.name})"

"""
Residence entity models.

A residence is a bookable property owned by a user and listed under a location.
"""

from typing import TYPE_CHECKING, List, Optional

from sqlmodel import Field, Relationship

from ..base import Base

if TYPE_CHECKING:
    from .locations import Location
    from .reservations import Reservation
    from .users import User


class ResidenceBase(Base):
    """Base fields for a residence."""

    name: str = Field(max_length=100, description="Residence name")
    residence_picture: Optional[str] = Field(default=None, max_length=255, description="Picture file name")
    location_id: int = Field(foreign_key="locations.location_id", index=True, ondelete="CASCADE")
    owner_id: int = Field(foreign_key="users.user_id", index=True, ondelete="CASCADE")
    guest_number: int = Field(ge=1, le=50, description="Maximum number of guests")
    bedroom_number: int = Field(ge=0, le=50)
    bathroom_number: int = Field(ge=0, le=50)
    built_year: int = Field(description="Year the residence was built")
    price_per_night: float = Field(gt=0, description="Nightly price")


class Residence(ResidenceBase, table=True):
    """Persistent residence.

    Table: residences
    """

    __tablename__ = "residences"
    __table_args__ = ({"extend_existing": True},)

    residence_id: Optional[int] = Field(default=None, primary_key=True)

    location: Optional["Location"] = Relationship(back_populates="residences")
    owner: Optional["User"] = Relationship(back_populates="residences")
    reservations: List["Reservation"] = Relationship(
        back_populates="residence",
        sa_relationship_kwargs={"cascade": "all, delete-orphan"},
    )

    def __repr__(self) -> str:
        return f"Residence(id={self.residence_id}, name={self.name}, location_id={self.location_id})"

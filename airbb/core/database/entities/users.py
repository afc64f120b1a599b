"""
User entity models.

Users are either residence owners, clients who book stays, or administrators.
"""

from datetime import date
from typing import TYPE_CHECKING, List, Optional

import sqlalchemy as sa
from sqlmodel import Field, Relationship

from airbb.core.models.domain.enums import UserType

from ..base import Base

if TYPE_CHECKING:
    from .reservations import Reservation
    from .residences import Residence


class UserBase(Base):
    """Base fields for a user."""

    name: str = Field(max_length=100, description="Full name")
    phone_number: Optional[str] = Field(default=None, max_length=20, description="Contact phone number")
    email: Optional[str] = Field(default=None, max_length=254, description="Contact email address")
    ssn: Optional[str] = Field(default=None, max_length=11, description="Social security number (NNN-NN-NNNN)")
    user_type: UserType = Field(
        default=UserType.client,
        sa_type=sa.String(16),
        description="Owner, Client or Admin",
    )
    dob: Optional[date] = Field(default=None, description="Date of birth")


class User(UserBase, table=True):
    """Persistent user.

    Table: users
    """

    __tablename__ = "users"
    __table_args__ = ({"extend_existing": True},)

    user_id: Optional[int] = Field(default=None, primary_key=True)

    residences: List["Residence"] = Relationship(
        back_populates="owner",
        sa_relationship_kwargs={"cascade": "all, delete-orphan"},
    )
    reservations: List["Reservation"] = Relationship(
        back_populates="user",
        sa_relationship_kwargs={"cascade": "all, delete-orphan"},
    )

    def __repr__(self) -> str:
        return f"User(id={self.user_id}, name={self.name}, type={self.user_type})"

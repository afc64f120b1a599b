"""
User I/O models for API requests and responses.

A user must be reachable: at least one of phone number and email is required.
"""

from __future__ import annotations

from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from airbb.core.models.domain.enums import UserType

CONTACT_REQUIRED_MESSAGE = "Either Phone Number or Email must be provided as a means of contact."


class UserRead(BaseModel):
    """Schema for reading a user."""

    model_config = ConfigDict(from_attributes=True)

    user_id: int
    name: str
    phone_number: Optional[str] = None
    email: Optional[str] = None
    ssn: Optional[str] = None
    user_type: UserType
    dob: Optional[date] = None


class UserCreate(BaseModel):
    """Schema for creating a user."""

    name: str = Field(min_length=1, max_length=100, description="Full name")
    phone_number: Optional[str] = Field(
        default=None,
        max_length=20,
        pattern=r"^[0-9()+\-.\s]{7,20}$",
        description="Contact phone number",
    )
    email: Optional[str] = Field(
        default=None,
        max_length=254,
        pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$",
        description="Contact email address",
    )
    ssn: Optional[str] = Field(default=None, pattern=r"^\d{3}-\d{2}-\d{4}$", description="NNN-NN-NNNN")
    user_type: UserType = Field(default=UserType.client)
    dob: Optional[date] = Field(default=None, description="Date of birth")

    @field_validator("phone_number", "email", "ssn", mode="before")
    @classmethod
    def _blank_to_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("dob")
    @classmethod
    def _dob_in_past(cls, value: Optional[date]) -> Optional[date]:
        if value is not None and value >= date.today():
            raise ValueError("Date of birth must be in the past.")
        return value

    @model_validator(mode="after")
    def _require_contact(self) -> "UserCreate":
        if not self.phone_number and not self.email:
            raise ValueError(CONTACT_REQUIRED_MESSAGE)
        return self


class UserUpdate(UserCreate):
    """Schema for replacing a user; ``user_id`` must match the URL when given."""

    user_id: Optional[int] = None

"""Domain enums for booking models."""

from __future__ import annotations

from enum import Enum


class UserType(str, Enum):
    """Role a user plays on the platform."""

    owner = "Owner"  # Lists residences.
    client = "Client"  # Books stays.
    admin = "Admin"  # Manages the catalogue.

"""Shared fixtures: an in-memory database per test and a small seeded catalogue."""

from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import date
from typing import AsyncGenerator

# Settings are read when the airbb modules are first imported
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("AIRBB_SESSION_SECRET", "test-session-secret")
os.environ.setdefault("APPLY_MIGRATIONS", "false")

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from sqlmodel.pool import StaticPool

from airbb.core.database.entities import Location, Reservation, Residence, User
from airbb.core.database.repositories import RepositoryBundle, build_repositories
from airbb.core.database.utils import create_all, create_sessionmaker
from airbb.core.models.domain.enums import UserType

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

BOOKED_START = date(2030, 6, 10)
BOOKED_END = date(2030, 6, 15)


@dataclass
class SeedData:
    """Ids of the rows created by the ``seeded`` fixture."""

    chicago_id: int
    new_york_id: int
    client_id: int
    owner_id: int
    loft_id: int
    house_id: int
    studio_id: int
    booked_reservation_id: int


@pytest_asyncio.fixture
async def test_engine() -> AsyncGenerator[AsyncEngine, None]:
    """A fresh in-memory database with every table created."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    await create_all(engine)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture(name="session")
async def session_fixture(test_engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """Create a new session for each test."""
    async with create_sessionmaker(test_engine)() as session:
        yield session


@pytest.fixture
def repos(session: AsyncSession) -> RepositoryBundle:
    return build_repositories(session=session)


@pytest_asyncio.fixture
async def seeded(session: AsyncSession) -> SeedData:
    """Two locations, a client, an owner, three residences and one booked stay.

    - Lakeview Loft (Chicago, 4 guests) is booked from 2030-06-10 to 2030-06-15.
    - Wicker Park House (Chicago, 8 guests) and Midtown Studio (New York, 2 guests) are free.
    """
    chicago = Location(name="Chicago")
    new_york = Location(name="New York")
    client = User(
        name="Guest Client",
        email="guest@airbb.example",
        user_type=UserType.client,
        dob=date(1990, 1, 1),
    )
    owner = User(
        name="Olivia Owner",
        phone_number="312-555-0101",
        ssn="123-45-6789",
        user_type=UserType.owner,
    )
    session.add_all([chicago, new_york, client, owner])
    await session.commit()

    def residence(name: str, location: Location, guests: int, price: float) -> Residence:
        return Residence(
            name=name,
            residence_picture=f"{name.lower().replace(' ', '_')}.jpg",
            location_id=location.location_id,
            owner_id=owner.user_id,
            guest_number=guests,
            bedroom_number=2,
            bathroom_number=1,
            built_year=2001,
            price_per_night=price,
        )

    loft = residence("Lakeview Loft", chicago, 4, 150.0)
    house = residence("Wicker Park House", chicago, 8, 320.0)
    studio = residence("Midtown Studio", new_york, 2, 210.0)
    session.add_all([loft, house, studio])
    await session.commit()

    booked = Reservation(
        residence_id=loft.residence_id,
        user_id=client.user_id,
        reservation_start_date=BOOKED_START,
        reservation_end_date=BOOKED_END,
    )
    session.add(booked)
    await session.commit()

    return SeedData(
        chicago_id=chicago.location_id,
        new_york_id=new_york.location_id,
        client_id=client.user_id,
        owner_id=owner.user_id,
        loft_id=loft.residence_id,
        house_id=house.residence_id,
        studio_id=studio.residence_id,
        booked_reservation_id=booked.reservation_id,
    )

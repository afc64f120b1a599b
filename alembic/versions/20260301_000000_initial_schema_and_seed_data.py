"""Initial schema and seed data for AirBB

Revision ID: 20260301_000000
Revises: None
Create Date: 2026-03-01 00:00:00.000000

Creates the locations, users, residences and reservations tables and seeds
a few locations, users and residences. User 1 is the client that staged
reservations are booked for by default.

Revision format: YYYYMMDD_HHMMSS_description

"""

from datetime import date
from typing import Sequence, Union

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "20260301_000000"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


SEED_LOCATIONS = [
    {"location_id": 1, "name": "Chicago"},
    {"location_id": 2, "name": "New York"},
    {"location_id": 3, "name": "Boston"},
    {"location_id": 4, "name": "Miami"},
]

SEED_USERS = [
    {
        "user_id": 1,
        "name": "Guest Client",
        "phone_number": "312-555-0100",
        "email": "guest@airbb.example",
        "ssn": None,
        "user_type": "Client",
        "dob": date(1990, 1, 1),
    },
    {
        "user_id": 2,
        "name": "Olivia Owner",
        "phone_number": "312-555-0101",
        "email": "olivia@airbb.example",
        "ssn": "123-45-6789",
        "user_type": "Owner",
        "dob": date(1975, 6, 15),
    },
    {
        "user_id": 3,
        "name": "Oscar Owner",
        "phone_number": None,
        "email": "oscar@airbb.example",
        "ssn": "987-65-4321",
        "user_type": "Owner",
        "dob": date(1982, 11, 3),
    },
    {
        "user_id": 4,
        "name": "Ada Admin",
        "phone_number": "312-555-0103",
        "email": "admin@airbb.example",
        "ssn": None,
        "user_type": "Admin",
        "dob": None,
    },
]

SEED_RESIDENCES = [
    ("Lakeview Loft", "lakeview.jpg", 1, 2, 4, 2, 1, 2005, 150.0),
    ("Wicker Park House", "wicker.jpg", 1, 3, 8, 4, 3, 1920, 320.0),
    ("Midtown Studio", "midtown.jpg", 2, 2, 2, 1, 1, 2012, 210.0),
    ("Brooklyn Brownstone", "brownstone.jpg", 2, 3, 6, 3, 2, 1899, 275.0),
    ("Back Bay Flat", "backbay.jpg", 3, 2, 3, 1, 1, 1965, 180.0),
    ("South Beach Condo", "southbeach.jpg", 4, 3, 5, 2, 2, 2018, 240.0),
]

SERIAL_KEYS = (
    ("locations", "location_id"),
    ("users", "user_id"),
    ("residences", "residence_id"),
)


def upgrade() -> None:
    """Create all tables and seed initial data."""

    locations = op.create_table(
        "locations",
        sa.Column("location_id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(100), nullable=False),
        sa.PrimaryKeyConstraint("location_id"),
    )
    op.create_index("ix_locations_name", "locations", ["name"], unique=True)

    users = op.create_table(
        "users",
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("phone_number", sa.String(20), nullable=True),
        sa.Column("email", sa.String(254), nullable=True),
        sa.Column("ssn", sa.String(11), nullable=True),
        sa.Column("user_type", sa.String(16), nullable=False),
        sa.Column("dob", sa.Date(), nullable=True),
        sa.PrimaryKeyConstraint("user_id"),
    )

    residences = op.create_table(
        "residences",
        sa.Column("residence_id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("residence_picture", sa.String(255), nullable=True),
        sa.Column("location_id", sa.Integer(), nullable=False),
        sa.Column("owner_id", sa.Integer(), nullable=False),
        sa.Column("guest_number", sa.Integer(), nullable=False),
        sa.Column("bedroom_number", sa.Integer(), nullable=False),
        sa.Column("bathroom_number", sa.Integer(), nullable=False),
        sa.Column("built_year", sa.Integer(), nullable=False),
        sa.Column("price_per_night", sa.Float(), nullable=False),
        sa.PrimaryKeyConstraint("residence_id"),
        sa.ForeignKeyConstraint(["location_id"], ["locations.location_id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["owner_id"], ["users.user_id"], ondelete="CASCADE"),
    )
    op.create_index("ix_residences_location_id", "residences", ["location_id"])
    op.create_index("ix_residences_owner_id", "residences", ["owner_id"])

    op.create_table(
        "reservations",
        sa.Column("reservation_id", sa.Integer(), nullable=False),
        sa.Column("residence_id", sa.Integer(), nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("reservation_start_date", sa.Date(), nullable=False),
        sa.Column("reservation_end_date", sa.Date(), nullable=False),
        sa.PrimaryKeyConstraint("reservation_id"),
        sa.ForeignKeyConstraint(["residence_id"], ["residences.residence_id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["user_id"], ["users.user_id"], ondelete="CASCADE"),
    )
    op.create_index("ix_reservations_residence_id", "reservations", ["residence_id"])
    op.create_index("ix_reservations_user_id", "reservations", ["user_id"])

    op.bulk_insert(locations, SEED_LOCATIONS)
    op.bulk_insert(users, SEED_USERS)
    residence_columns = (
        "name",
        "residence_picture",
        "location_id",
        "owner_id",
        "guest_number",
        "bedroom_number",
        "bathroom_number",
        "built_year",
        "price_per_night",
    )
    op.bulk_insert(
        residences,
        [
            {"residence_id": index, **dict(zip(residence_columns, row))}
            for index, row in enumerate(SEED_RESIDENCES, start=1)
        ],
    )

    if op.get_context().dialect.name == "postgresql":
        # Explicit ids do not advance the SERIAL sequences.
        for table, key in SERIAL_KEYS:
            op.execute(
                f"SELECT setval(pg_get_serial_sequence('{table}', '{key}'), "
                f"(SELECT MAX({key}) FROM {table}))"
            )


def downgrade() -> None:
    """Drop all tables created in upgrade."""
    op.drop_table("reservations")
    op.drop_table("residences")
    op.drop_table("users")
    op.drop_table("locations")

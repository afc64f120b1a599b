"""AirBB.

A property-booking service: guests browse residences, narrow them down by
location, party size and stay dates, stage reservations in their session and
confirm them. An administration area manages locations, users and residences.

Core subpackages
----------------

- ``airbb.core``:

  - Centralized logging and optional Logfire monitoring.
  - The database layer: SQLModel entities, a generic async repository and
    entity-specific repositories.
  - Booking domain rules (filter criteria, stay overlap, staged reservations).

- ``airbb.server``:

  - The FastAPI application, its configuration, session state, routers and
    exception handlers.

Typical workflow
----------------

1. ``POST /api/v1/home/filter`` stores the guest's search in the session.
2. ``GET /api/v1/home`` lists the residences available for that search.
3. ``POST /api/v1/reservations`` stages a stay once it is known to be free.
4. ``POST /api/v1/reservations/confirm`` persists the staged stays.
"""

__version__ = "1.0.0"

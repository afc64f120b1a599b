"""
Admin Location Endpoints.

CRUD operations for the locations residences are listed under.
"""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, status
from sqlalchemy.orm.exc import StaleDataError

from airbb.core.database.entities.locations import Location
from airbb.core.logging_config import get_logger
from airbb.core.models.io.locations import LocationCreate, LocationRead, LocationUpdate
from airbb.core.models.io.views import MessageResult, MutationResult
from airbb.server.services.deps import ReposDep

logger = get_logger(__name__)

router = APIRouter()


def _not_found(location_id: int) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Location {location_id} not found")


async def _ensure_unique_name(repos: ReposDep, name: str, location_id: int | None = None) -> None:
    existing = await repos.locations.get_by_name(name)
    if existing is not None and existing.location_id != location_id:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=f"Location '{name}' already exists")


@router.get(
    "",
    response_model=list[LocationRead],
    summary="List Locations",
)
async def list_locations(repos: ReposDep) -> list[LocationRead]:
    locations = await repos.locations.get_all()
    return [LocationRead.model_validate(location) for location in locations]


@router.get(
    "/{location_id}",
    response_model=LocationRead,
    summary="Get Location",
    responses={404: {"description": "Location not found"}},
)
async def get_location(location_id: int, repos: ReposDep) -> LocationRead:
    location = await repos.locations.get_by_id(location_id)
    if location is None:
        raise _not_found(location_id)
    return LocationRead.model_validate(location)


@router.post(
    "",
    response_model=MutationResult[LocationRead],
    status_code=status.HTTP_201_CREATED,
    summary="Create Location",
    responses={
        201: {"description": "Location created"},
        409: {"description": "A location with this name exists"},
        422: {"description": "Validation failed"},
    },
)
async def create_location(payload: LocationCreate, repos: ReposDep) -> MutationResult[LocationRead]:
    await _ensure_unique_name(repos, payload.name)
    location = await repos.locations.create(Location.model_validate(payload))
    logger.info(f"Created location {location.location_id} ({location.name})")
    return MutationResult[LocationRead](
        item=LocationRead.model_validate(location), message="Location created successfully!"
    )


@router.put(
    "/{location_id}",
    response_model=MutationResult[LocationRead],
    summary="Update Location",
    responses={
        404: {"description": "Location not found or id mismatch"},
        409: {"description": "A location with this name exists"},
    },
)
async def update_location(
    location_id: int, payload: LocationUpdate, repos: ReposDep
) -> MutationResult[LocationRead]:
    """
    Replace a location's fields.

    The body's ``location_id`` must equal the one in the URL. A body without it
    counts as a mismatch.
    """
    if payload.location_id != location_id:
        raise _not_found(location_id)

    location = await repos.locations.get_by_id(location_id)
    if location is None:
        raise _not_found(location_id)
    await _ensure_unique_name(repos, payload.name, location_id)

    location.name = payload.name
    try:
        location = await repos.locations.update(location)
    except StaleDataError:
        await repos.locations.session.rollback()
        if not await repos.locations.exists(Location.location_id == location_id):
            raise _not_found(location_id)
        raise

    return MutationResult[LocationRead](
        item=LocationRead.model_validate(location), message="Location updated successfully!"
    )


@router.delete(
    "/{location_id}",
    response_model=MessageResult,
    summary="Delete Location",
    description="Delete a location together with its residences and their reservations.",
    responses={404: {"description": "Location not found"}},
)
async def delete_location(location_id: int, repos: ReposDep) -> MessageResult:
    if not await repos.locations.delete(location_id):
        raise _not_found(location_id)
    logger.info(f"Deleted location {location_id}")
    return MessageResult(message="Location deleted successfully!")

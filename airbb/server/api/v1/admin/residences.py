"""
Admin Residence Endpoints.

CRUD operations for residences. A residence must reference an existing
location and an existing user as its owner.
"""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, status
from sqlalchemy.orm.exc import StaleDataError

from airbb.core.database.entities.locations import Location
from airbb.core.database.entities.residences import Residence
from airbb.core.errors import InvalidLocationError, InvalidOwnerError
from airbb.core.logging_config import get_logger
from airbb.core.models.io.locations import LocationRead
from airbb.core.models.io.residences import (
    ResidenceCreate,
    ResidenceFormOptions,
    ResidenceUpdate,
    ResidenceWithDetails,
)
from airbb.core.models.io.users import UserRead
from airbb.core.models.io.views import MessageResult, MutationResult
from airbb.server.services.deps import ReposDep

logger = get_logger(__name__)

router = APIRouter()

_RESIDENCE_FIELDS = tuple(ResidenceCreate.model_fields)


def _not_found(residence_id: int) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Residence {residence_id} not found")


async def _check_references(repos: ReposDep, payload: ResidenceCreate) -> None:
    if not await repos.users.user_exists(payload.owner_id):
        raise InvalidOwnerError()
    if not await repos.locations.exists(Location.location_id == payload.location_id):
        raise InvalidLocationError()


async def _detailed(repos: ReposDep, residence_id: int) -> ResidenceWithDetails:
    residence = await repos.residences.get_with_details(residence_id)
    if residence is None:
        raise _not_found(residence_id)
    return ResidenceWithDetails.model_validate(residence)


@router.get(
    "",
    response_model=list[ResidenceWithDetails],
    summary="List Residences",
    description="List every residence with its location and owner.",
)
async def list_residences(repos: ReposDep) -> list[ResidenceWithDetails]:
    residences = await repos.residences.list_with_details()
    return [ResidenceWithDetails.model_validate(residence) for residence in residences]


@router.get(
    "/form-options",
    response_model=ResidenceFormOptions,
    summary="Residence Form Options",
    description="Locations and owner users to choose from when creating or editing a residence.",
)
async def form_options(repos: ReposDep) -> ResidenceFormOptions:
    locations = await repos.locations.all_by_name()
    owners = await repos.users.owners()
    return ResidenceFormOptions(
        locations=[LocationRead.model_validate(location) for location in locations],
        owners=[UserRead.model_validate(owner) for owner in owners],
    )


@router.get(
    "/{residence_id}",
    response_model=ResidenceWithDetails,
    summary="Get Residence",
    responses={404: {"description": "Residence not found"}},
)
async def get_residence(residence_id: int, repos: ReposDep) -> ResidenceWithDetails:
    return await _detailed(repos, residence_id)


@router.post(
    "",
    response_model=MutationResult[ResidenceWithDetails],
    status_code=status.HTTP_201_CREATED,
    summary="Create Residence",
    responses={
        201: {"description": "Residence created"},
        422: {"description": "Validation failed or owner/location does not exist"},
    },
)
async def create_residence(payload: ResidenceCreate, repos: ReposDep) -> MutationResult[ResidenceWithDetails]:
    await _check_references(repos, payload)
    residence = await repos.residences.create(Residence.model_validate(payload))
    logger.info(f"Created residence {residence.residence_id} ({residence.name})")
    return MutationResult[ResidenceWithDetails](
        item=await _detailed(repos, residence.residence_id), message="Residence created successfully!"
    )


@router.put(
    "/{residence_id}",
    response_model=MutationResult[ResidenceWithDetails],
    summary="Update Residence",
    responses={
        404: {"description": "Residence not found or id mismatch"},
        422: {"description": "Validation failed or owner/location does not exist"},
    },
)
async def update_residence(
    residence_id: int, payload: ResidenceUpdate, repos: ReposDep
) -> MutationResult[ResidenceWithDetails]:
    """
    Replace a residence's fields.

    The body's ``residence_id`` must equal the one in the URL. A body without it
    counts as a mismatch.
    """
    if payload.residence_id != residence_id:
        raise _not_found(residence_id)

    residence = await repos.residences.get_by_id(residence_id)
    if residence is None:
        raise _not_found(residence_id)
    await _check_references(repos, payload)

    for field in _RESIDENCE_FIELDS:
        setattr(residence, field, getattr(payload, field))
    try:
        await repos.residences.update(residence)
    except StaleDataError:
        await repos.residences.session.rollback()
        if not await repos.residences.residence_exists(residence_id):
            raise _not_found(residence_id)
        raise

    return MutationResult[ResidenceWithDetails](
        item=await _detailed(repos, residence_id), message="Residence updated successfully!"
    )


@router.delete(
    "/{residence_id}",
    response_model=MessageResult,
    summary="Delete Residence",
    description="Delete a residence together with its reservations.",
    responses={404: {"description": "Residence not found"}},
)
async def delete_residence(residence_id: int, repos: ReposDep) -> MessageResult:
    if not await repos.residences.delete(residence_id):
        raise _not_found(residence_id)
    logger.info(f"Deleted residence {residence_id}")
    return MessageResult(message="Residence deleted successfully!")

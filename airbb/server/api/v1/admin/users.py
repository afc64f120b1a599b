"""
Admin User Endpoints.

CRUD operations for users. A user needs a phone number or an email address;
requests without either are rejected with 422.
"""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, status
from sqlalchemy.orm.exc import StaleDataError

from airbb.core.database.entities.users import User
from airbb.core.logging_config import get_logger
from airbb.core.models.io.users import UserCreate, UserRead, UserUpdate
from airbb.core.models.io.views import MessageResult, MutationResult
from airbb.server.services.deps import ReposDep

logger = get_logger(__name__)

router = APIRouter()

_USER_FIELDS = ("name", "phone_number", "email", "ssn", "user_type", "dob")


def _not_found(user_id: int) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"User {user_id} not found")


@router.get(
    "",
    response_model=list[UserRead],
    summary="List Users",
)
async def list_users(repos: ReposDep) -> list[UserRead]:
    users = await repos.users.get_all()
    return [UserRead.model_validate(user) for user in users]


@router.get(
    "/{user_id}",
    response_model=UserRead,
    summary="Get User",
    responses={404: {"description": "User not found"}},
)
async def get_user(user_id: int, repos: ReposDep) -> UserRead:
    user = await repos.users.get_by_id(user_id)
    if user is None:
        raise _not_found(user_id)
    return UserRead.model_validate(user)


@router.post(
    "",
    response_model=MutationResult[UserRead],
    status_code=status.HTTP_201_CREATED,
    summary="Create User",
    responses={
        201: {"description": "User created"},
        422: {"description": "Validation failed, e.g. no phone number or email"},
    },
)
async def create_user(payload: UserCreate, repos: ReposDep) -> MutationResult[UserRead]:
    user = await repos.users.create(User.model_validate(payload))
    logger.info(f"Created user {user.user_id} ({user.user_type})")
    return MutationResult[UserRead](item=UserRead.model_validate(user), message="User created successfully!")


@router.put(
    "/{user_id}",
    response_model=MutationResult[UserRead],
    summary="Update User",
    responses={404: {"description": "User not found or id mismatch"}},
)
async def update_user(user_id: int, payload: UserUpdate, repos: ReposDep) -> MutationResult[UserRead]:
    """
    Replace a user's fields.

    The body's ``user_id`` must equal the one in the URL. A body without it
    counts as a mismatch.
    """
    if payload.user_id != user_id:
        raise _not_found(user_id)

    user = await repos.users.get_by_id(user_id)
    if user is None:
        raise _not_found(user_id)

    for field in _USER_FIELDS:
        setattr(user, field, getattr(payload, field))
    try:
        user = await repos.users.update(user)
    except StaleDataError:
        await repos.users.session.rollback()
        if not await repos.users.user_exists(user_id):
            raise _not_found(user_id)
        raise

    return MutationResult[UserRead](item=UserRead.model_validate(user), message="User updated successfully!")


@router.delete(
    "/{user_id}",
    response_model=MessageResult,
    summary="Delete User",
    description="Delete a user together with the residences they own and their reservations.",
    responses={404: {"description": "User not found"}},
)
async def delete_user(user_id: int, repos: ReposDep) -> MessageResult:
    if not await repos.users.delete(user_id):
        raise _not_found(user_id)
    logger.info(f"Deleted user {user_id}")
    return MessageResult(message="User deleted successfully!")

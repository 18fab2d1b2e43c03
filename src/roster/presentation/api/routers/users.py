"""User endpoints."""

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Query, status

from roster.application.commands import (
    CreateUserCommand,
    DeleteUserCommand,
    UpdateUserCommand,
)
from roster.application.queries import GetUserQuery, ListUsersQuery
from roster.presentation.api.dependencies import PasswordServiceDep, UnitOfWorkDep
from roster.presentation.api.schemas.common import UserDetailResponse, UserResponse
from roster.presentation.api.schemas.users import (
    CreateUserRequest,
    UpdateUserRequest,
    UserDeletionResponse,
    UserDetailEnvelope,
    UserEnvelopeResponse,
    UserListResponse,
)


router = APIRouter()


@router.get("", summary="List users")
async def list_users(
    uow: UnitOfWorkDep,
    is_active: Optional[bool] = Query(default=None),
) -> UserListResponse:
    """List users, newest first, optionally filtered by active flag."""
    users = await ListUsersQuery(uow).execute(is_active=is_active)
    return UserListResponse(
        count=len(users),
        data=[UserResponse.model_validate(user) for user in users],
    )


@router.get(
    "/{user_id}",
    summary="Get a user",
    responses={404: {"description": "User not found"}},
)
async def get_user(user_id: UUID, uow: UnitOfWorkDep) -> UserDetailEnvelope:
    user = await GetUserQuery(uow).execute(user_id)
    return UserDetailEnvelope(data=UserDetailResponse.model_validate(user))


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Create a user with profile and roles",
    responses={
        201: {"description": "User created successfully"},
        400: {"description": "Unknown additional roles or invalid data"},
        404: {"description": "Primary role not found"},
        409: {"description": "Email already registered"},
    },
)
async def create_user(
    request: CreateUserRequest,
    uow: UnitOfWorkDep,
    password_service: PasswordServiceDep,
) -> UserEnvelopeResponse:
    """Create a user, its profile and its role associations atomically."""
    result = await CreateUserCommand(uow, password_service).execute(
        name=request.name,
        email=request.email,
        password=request.password,
        primary_role_id=request.primary_role_id,
        role_ids=request.role_ids,
        profile=request.profile.to_input() if request.profile else None,
    )
    return UserEnvelopeResponse(
        message=result.message,
        data=UserDetailResponse.model_validate(result.user),
    )


@router.patch(
    "/{user_id}",
    summary="Partially update a user",
    responses={
        400: {"description": "Unknown additional roles or invalid data"},
        404: {"description": "User or primary role not found"},
        409: {"description": "Email already registered"},
    },
)
async def update_user(
    user_id: UUID,
    request: UpdateUserRequest,
    uow: UnitOfWorkDep,
    password_service: PasswordServiceDep,
) -> UserEnvelopeResponse:
    """Apply only the fields present in the body."""
    result = await UpdateUserCommand(uow, password_service).execute(
        user_id,
        request.to_changes(),
    )
    return UserEnvelopeResponse(
        message=result.message,
        data=UserDetailResponse.model_validate(result.user),
    )


@router.delete(
    "/{user_id}",
    summary="Delete a user with profile and role assignments",
    responses={404: {"description": "User not found"}},
)
async def delete_user(user_id: UUID, uow: UnitOfWorkDep) -> UserDeletionResponse:
    result = await DeleteUserCommand(uow).execute(user_id)
    return UserDeletionResponse(
        message=result.message,
        user_id=result.user_id,
        removed_assignments=result.removed_assignments,
        profile_removed=result.profile_removed,
    )

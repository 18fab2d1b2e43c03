"""Endpoints for operations spanning several entities in one transaction."""

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Body, status

from roster.application.commands import (
    AssignUsersToRoleCommand,
    CreateUserWithRoleCommand,
    DeleteRoleWithReassignmentCommand,
    TransferUsersBetweenRolesCommand,
)
from roster.presentation.api.dependencies import PasswordServiceDep, UnitOfWorkDep
from roster.presentation.api.schemas.common import (
    RoleSummaryResponse,
    UserDetailResponse,
)
from roster.presentation.api.schemas.roles import RoleDeletionResponse
from roster.presentation.api.schemas.transactions import (
    AssignUsersToRoleRequest,
    AssignUsersToRoleResponse,
    CreateUserWithRoleRequest,
    DeleteRoleWithReassignmentRequest,
    TransferUsersRequest,
    TransferUsersResponse,
    UserWithRoleData,
    UserWithRoleResponse,
)


router = APIRouter()


@router.post(
    "/assign-users-to-role",
    summary="Assign a role to many users",
    responses={
        400: {"description": "Some users were not found"},
        404: {"description": "Role not found"},
    },
)
async def assign_users_to_role(
    request: AssignUsersToRoleRequest,
    uow: UnitOfWorkDep,
) -> AssignUsersToRoleResponse:
    result = await AssignUsersToRoleCommand(uow).execute(
        role_id=request.role_id,
        user_ids=request.user_ids,
    )
    return AssignUsersToRoleResponse(
        message=result.message,
        role=RoleSummaryResponse.model_validate(result.role),
        assigned_count=result.assigned_count,
        newly_assigned_count=result.newly_assigned_count,
    )


@router.post(
    "/transfer-users-between-roles",
    summary="Move every holder of one role to another",
    responses={
        400: {"description": "No users to transfer, or same role"},
        404: {"description": "Source or target role not found"},
    },
)
async def transfer_users_between_roles(
    request: TransferUsersRequest,
    uow: UnitOfWorkDep,
) -> TransferUsersResponse:
    result = await TransferUsersBetweenRolesCommand(uow).execute(
        source_role_id=request.source_role_id,
        target_role_id=request.target_role_id,
    )
    return TransferUsersResponse(
        message=result.message,
        source_role=RoleSummaryResponse.model_validate(result.source_role),
        target_role=RoleSummaryResponse.model_validate(result.target_role),
        transferred_count=result.transferred_count,
    )


@router.post(
    "/roles/{role_id}/delete-with-reassignment",
    summary="Delete a role, moving its holders to a replacement",
    responses={404: {"description": "Role or replacement role not found"}},
)
async def delete_role_with_reassignment(
    role_id: UUID,
    uow: UnitOfWorkDep,
    request: Optional[DeleteRoleWithReassignmentRequest] = Body(default=None),
) -> RoleDeletionResponse:
    replacement_role_id = request.replacement_role_id if request else None
    result = await DeleteRoleWithReassignmentCommand(uow).execute(
        role_id=role_id,
        replacement_role_id=replacement_role_id,
    )
    return RoleDeletionResponse(
        message=result.message,
        role_id=result.role_id,
        affected_users=result.affected_users,
        replacement_role_id=result.replacement_role_id,
        primary_references_cleared=result.primary_references_cleared,
    )


@router.post(
    "/create-user-with-role",
    status_code=status.HTTP_201_CREATED,
    summary="Create a user together with a new role",
    responses={409: {"description": "Email or role name already exists"}},
)
async def create_user_with_role(
    request: CreateUserWithRoleRequest,
    uow: UnitOfWorkDep,
    password_service: PasswordServiceDep,
) -> UserWithRoleResponse:
    profile = request.user.profile
    result = await CreateUserWithRoleCommand(uow, password_service).execute(
        name=request.user.name,
        email=request.user.email,
        password=request.user.password,
        role_name=request.role.name,
        role_description=request.role.description,
        profile=profile.to_input() if profile else None,
    )
    return UserWithRoleResponse(
        message=result.message,
        data=UserWithRoleData(
            user=UserDetailResponse.model_validate(result.user),
            role=RoleSummaryResponse.model_validate(result.role),
        ),
    )

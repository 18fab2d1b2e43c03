"""Role endpoints."""

from uuid import UUID

from fastapi import APIRouter, status

from roster.application.commands import (
    CreateRoleCommand,
    DeleteRoleCommand,
    UpdateRoleCommand,
)
from roster.application.queries import GetRoleQuery, ListRoleUsersQuery, ListRolesQuery
from roster.presentation.api.dependencies import UnitOfWorkDep
from roster.presentation.api.schemas.roles import (
    CreateRoleRequest,
    RoleDeletionResponse,
    RoleDetailEnvelope,
    RoleEnvelopeResponse,
    RoleListResponse,
    RoleResponse,
    RoleUsersEnvelope,
    RoleUsersResponse,
    UpdateRoleRequest,
)


router = APIRouter()


@router.get("", summary="List roles")
async def list_roles(uow: UnitOfWorkDep) -> RoleListResponse:
    roles = await ListRolesQuery(uow).execute()
    return RoleListResponse(
        count=len(roles),
        data=[RoleResponse.model_validate(role) for role in roles],
    )


@router.get(
    "/{role_id}",
    summary="Get a role",
    responses={404: {"description": "Role not found"}},
)
async def get_role(role_id: UUID, uow: UnitOfWorkDep) -> RoleDetailEnvelope:
    role = await GetRoleQuery(uow).execute(role_id)
    return RoleDetailEnvelope(data=RoleResponse.model_validate(role))


@router.get(
    "/{role_id}/users",
    summary="List users attached to a role",
    responses={404: {"description": "Role not found"}},
)
async def list_role_users(role_id: UUID, uow: UnitOfWorkDep) -> RoleUsersEnvelope:
    users = await ListRoleUsersQuery(uow).execute(role_id)
    return RoleUsersEnvelope(data=RoleUsersResponse.model_validate(users))


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Create a role",
    responses={409: {"description": "Role name already exists"}},
)
async def create_role(
    request: CreateRoleRequest,
    uow: UnitOfWorkDep,
) -> RoleEnvelopeResponse:
    result = await CreateRoleCommand(uow).execute(
        name=request.name,
        description=request.description,
    )
    return RoleEnvelopeResponse(
        message=result.message,
        data=RoleResponse.model_validate(result.role),
    )


@router.patch(
    "/{role_id}",
    summary="Partially update a role",
    responses={
        404: {"description": "Role not found"},
        409: {"description": "Role name already exists"},
    },
)
async def update_role(
    role_id: UUID,
    request: UpdateRoleRequest,
    uow: UnitOfWorkDep,
) -> RoleEnvelopeResponse:
    result = await UpdateRoleCommand(uow).execute(role_id, request.to_changes())
    return RoleEnvelopeResponse(
        message=result.message,
        data=RoleResponse.model_validate(result.role),
    )


@router.delete(
    "/{role_id}",
    summary="Delete a role nobody holds as primary role",
    responses={
        404: {"description": "Role not found"},
        409: {"description": "Role is still a primary role"},
    },
)
async def delete_role(role_id: UUID, uow: UnitOfWorkDep) -> RoleDeletionResponse:
    result = await DeleteRoleCommand(uow).execute(role_id)
    return RoleDeletionResponse(
        message=result.message,
        role_id=result.role_id,
        affected_users=result.affected_users,
    )

"""Request and response schemas for the multi-entity transaction endpoints."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, EmailStr, Field

from roster.presentation.api.schemas.common import (
    EnvelopeResponse,
    RoleSummaryResponse,
    UserDetailResponse,
)
from roster.presentation.api.schemas.roles import CreateRoleRequest
from roster.presentation.api.schemas.users import ProfilePayload


class AssignUsersToRoleRequest(BaseModel):
    role_id: UUID
    user_ids: list[UUID] = Field(..., min_length=1)


class AssignUsersToRoleResponse(EnvelopeResponse):
    role: RoleSummaryResponse
    assigned_count: int
    newly_assigned_count: int


class TransferUsersRequest(BaseModel):
    source_role_id: UUID
    target_role_id: UUID


class TransferUsersResponse(EnvelopeResponse):
    source_role: RoleSummaryResponse
    target_role: RoleSummaryResponse
    transferred_count: int


class DeleteRoleWithReassignmentRequest(BaseModel):
    replacement_role_id: Optional[UUID] = None


class NewUserPayload(BaseModel):
    name: str = Field(..., min_length=2, max_length=100)
    email: EmailStr
    password: str = Field(..., min_length=6, max_length=128)
    profile: Optional[ProfilePayload] = None


class CreateUserWithRoleRequest(BaseModel):
    user: NewUserPayload
    role: CreateRoleRequest


class UserWithRoleData(BaseModel):
    user: UserDetailResponse
    role: RoleSummaryResponse


class UserWithRoleResponse(EnvelopeResponse):
    data: UserWithRoleData

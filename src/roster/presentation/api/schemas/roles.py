"""Request and response schemas for role endpoints."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from roster.application.commands import UNSET, RoleChanges
from roster.presentation.api.schemas.common import (
    EnvelopeResponse,
    RoleSummaryResponse,
    UserSummaryResponse,
)


class CreateRoleRequest(BaseModel):
    name: str = Field(..., min_length=2, max_length=50)
    description: Optional[str] = Field(default=None, max_length=500)


class UpdateRoleRequest(BaseModel):
    """Partial role update; explicit null clears the description."""

    name: Optional[str] = Field(default=None, min_length=2, max_length=50)
    description: Optional[str] = Field(default=None, max_length=500)
    is_active: Optional[bool] = None

    def to_changes(self) -> RoleChanges:
        fields = self.model_fields_set
        return RoleChanges(
            name=self.name if "name" in fields else UNSET,
            description=self.description if "description" in fields else UNSET,
            is_active=self.is_active if "is_active" in fields else UNSET,
        )


class RoleResponse(BaseModel):
    id: UUID
    name: str
    description: Optional[str] = None
    is_active: bool
    created_at: datetime
    updated_at: datetime
    primary_user_count: int = 0
    assigned_user_count: int = 0

    model_config = ConfigDict(from_attributes=True)


class RoleEnvelopeResponse(EnvelopeResponse):
    data: RoleResponse


class RoleDetailEnvelope(BaseModel):
    success: bool = True
    data: RoleResponse


class RoleListResponse(BaseModel):
    success: bool = True
    count: int
    data: list[RoleResponse]


class RoleUsersResponse(BaseModel):
    """Users holding a role as primary role and through assignment."""

    role: RoleSummaryResponse
    primary_users: list[UserSummaryResponse]
    assigned_users: list[UserSummaryResponse]

    model_config = ConfigDict(from_attributes=True)


class RoleUsersEnvelope(BaseModel):
    success: bool = True
    data: RoleUsersResponse


class RoleDeletionResponse(EnvelopeResponse):
    role_id: UUID
    affected_users: int
    replacement_role_id: Optional[UUID] = None
    primary_references_cleared: int = 0

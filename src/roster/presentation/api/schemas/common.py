"""Shared response building blocks."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class RoleSummaryResponse(BaseModel):
    """Compact role reference."""

    id: UUID
    name: str
    description: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class UserSummaryResponse(BaseModel):
    """Compact user reference."""

    id: UUID
    name: str
    email: str
    is_active: bool

    model_config = ConfigDict(from_attributes=True)


class ProfileResponse(BaseModel):
    id: UUID
    bio: Optional[str] = None
    avatar_url: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class UserResponse(BaseModel):
    """User list entry."""

    id: UUID
    name: str
    email: str
    is_active: bool
    primary_role: Optional[RoleSummaryResponse] = None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class UserDetailResponse(UserResponse):
    """User with associated roles and profile."""

    roles: list[RoleSummaryResponse] = Field(default_factory=list)
    profile: Optional[ProfileResponse] = None


class EnvelopeResponse(BaseModel):
    """Base of every successful response body."""

    success: bool = True
    message: str

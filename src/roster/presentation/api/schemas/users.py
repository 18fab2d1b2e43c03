"""Request and response schemas for user endpoints."""

import re
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, EmailStr, Field, field_validator

from roster.application.commands import UNSET, ProfileInput, UserChanges
from roster.presentation.api.schemas.common import (
    EnvelopeResponse,
    UserDetailResponse,
    UserResponse,
)

URL_PATTERN = re.compile(r"^https?://[^\s/$.?#].[^\s]*$", re.IGNORECASE)


class ProfilePayload(BaseModel):
    """Profile fields. Omitted fields keep their stored value on update."""

    bio: Optional[str] = Field(default=None, max_length=1000)
    avatar_url: Optional[str] = Field(default=None, max_length=500)

    @field_validator("avatar_url")
    @classmethod
    def _validate_avatar_url(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not URL_PATTERN.match(v):
            msg = "avatar_url must be a valid http(s) URL"
            raise ValueError(msg)
        return v

    def to_input(self) -> ProfileInput:
        fields = self.model_fields_set
        return ProfileInput(
            bio=self.bio if "bio" in fields else UNSET,
            avatar_url=self.avatar_url if "avatar_url" in fields else UNSET,
        )


class CreateUserRequest(BaseModel):
    """Request schema for creating a user with profile and roles."""

    name: str = Field(..., min_length=2, max_length=100)
    email: EmailStr
    password: str = Field(..., min_length=6, max_length=128)
    primary_role_id: Optional[UUID] = None
    role_ids: list[UUID] = Field(default_factory=list)
    profile: Optional[ProfilePayload] = None


class UpdateUserRequest(BaseModel):
    """Request schema for a partial user update.

    Only fields present in the JSON body are applied; an explicit null
    clears primary_role_id, role_ids (removes all roles) or profile
    (deletes it).
    """

    name: Optional[str] = Field(default=None, min_length=2, max_length=100)
    email: Optional[EmailStr] = None
    password: Optional[str] = Field(default=None, min_length=6, max_length=128)
    is_active: Optional[bool] = None
    primary_role_id: Optional[UUID] = None
    role_ids: Optional[list[UUID]] = None
    profile: Optional[ProfilePayload] = None

    def to_changes(self) -> UserChanges:
        fields = self.model_fields_set

        def pick(name: str):
            return getattr(self, name) if name in fields else UNSET

        profile = pick("profile")
        return UserChanges(
            name=pick("name"),
            email=pick("email"),
            password=pick("password"),
            is_active=pick("is_active"),
            primary_role_id=pick("primary_role_id"),
            role_ids=pick("role_ids"),
            profile=profile.to_input() if isinstance(profile, ProfilePayload) else profile,
        )


class UserEnvelopeResponse(EnvelopeResponse):
    data: UserDetailResponse


class UserListResponse(BaseModel):
    success: bool = True
    count: int
    data: list[UserResponse]


class UserDetailEnvelope(BaseModel):
    success: bool = True
    data: UserDetailResponse


class UserDeletionResponse(EnvelopeResponse):
    user_id: UUID
    removed_assignments: int
    profile_removed: bool

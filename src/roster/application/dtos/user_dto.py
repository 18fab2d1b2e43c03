"""DTOs for users.

None of these carry the password hash.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional
from uuid import UUID

from roster.application.dtos.role_dto import RoleSummaryDTO
from roster.domain.role import Role
from roster.domain.user import Profile, User


@dataclass(frozen=True)
class ProfileDTO:
    id: UUID
    bio: Optional[str]
    avatar_url: Optional[str]

    @classmethod
    def from_profile(cls, profile: Profile) -> "ProfileDTO":
        return cls(id=profile.id, bio=profile.bio, avatar_url=profile.avatar_url)

    def to_dict(self) -> dict:
        return {
            "id": str(self.id),
            "bio": self.bio,
            "avatar_url": self.avatar_url,
        }


@dataclass(frozen=True)
class UserSummaryDTO:
    """Compact user reference used in role views."""

    id: UUID
    name: str
    email: str
    is_active: bool

    @classmethod
    def from_user(cls, user: User) -> "UserSummaryDTO":
        return cls(
            id=user.id,
            name=user.name,
            email=user.email,
            is_active=user.is_active,
        )


@dataclass(frozen=True)
class UserDTO:
    """User list entry with the primary role expanded."""

    id: UUID
    name: str
    email: str
    is_active: bool
    primary_role: Optional[RoleSummaryDTO]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_user(cls, user: User, primary_role: Role | None) -> "UserDTO":
        return cls(
            id=user.id,
            name=user.name,
            email=user.email,
            is_active=user.is_active,
            primary_role=RoleSummaryDTO.from_role(primary_role)
            if primary_role
            else None,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


@dataclass(frozen=True)
class UserDetailDTO:
    """User with primary role, associated roles and profile expanded."""

    id: UUID
    name: str
    email: str
    is_active: bool
    primary_role: Optional[RoleSummaryDTO]
    created_at: datetime
    updated_at: datetime
    roles: list[RoleSummaryDTO] = field(default_factory=list)
    profile: Optional[ProfileDTO] = None

    @property
    def role_ids(self) -> list[UUID]:
        return [role.id for role in self.roles]

    @classmethod
    def from_entities(
        cls,
        user: User,
        primary_role: Role | None,
        roles: list[Role],
        profile: Profile | None,
    ) -> "UserDetailDTO":
        return cls(
            id=user.id,
            name=user.name,
            email=user.email,
            is_active=user.is_active,
            primary_role=RoleSummaryDTO.from_role(primary_role)
            if primary_role
            else None,
            created_at=user.created_at,
            updated_at=user.updated_at,
            roles=[RoleSummaryDTO.from_role(role) for role in roles],
            profile=ProfileDTO.from_profile(profile) if profile else None,
        )

    def to_dict(self) -> dict:
        return {
            "id": str(self.id),
            "name": self.name,
            "email": self.email,
            "is_active": self.is_active,
            "primary_role": self.primary_role.to_dict() if self.primary_role else None,
            "roles": [role.to_dict() for role in self.roles],
            "profile": self.profile.to_dict() if self.profile else None,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
        }

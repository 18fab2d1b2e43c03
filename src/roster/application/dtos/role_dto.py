"""DTOs for roles."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING, Optional
from uuid import UUID

from roster.domain.role import Role

if TYPE_CHECKING:
    from roster.application.dtos.user_dto import UserSummaryDTO


@dataclass(frozen=True)
class RoleSummaryDTO:
    """Compact role reference embedded in user views and results."""

    id: UUID
    name: str
    description: Optional[str]

    @classmethod
    def from_role(cls, role: Role) -> "RoleSummaryDTO":
        return cls(id=role.id, name=role.name, description=role.description)

    def to_dict(self) -> dict:
        return {
            "id": str(self.id),
            "name": self.name,
            "description": self.description,
        }


@dataclass(frozen=True)
class RoleDTO:
    """Full role view with holder counts."""

    id: UUID
    name: str
    description: Optional[str]
    is_active: bool
    created_at: datetime
    updated_at: datetime
    primary_user_count: int = 0
    assigned_user_count: int = 0

    @classmethod
    def from_role(
        cls,
        role: Role,
        primary_user_count: int = 0,
        assigned_user_count: int = 0,
    ) -> "RoleDTO":
        return cls(
            id=role.id,
            name=role.name,
            description=role.description,
            is_active=role.is_active,
            created_at=role.created_at,
            updated_at=role.updated_at,
            primary_user_count=primary_user_count,
            assigned_user_count=assigned_user_count,
        )

    def to_dict(self) -> dict:
        return {
            "id": str(self.id),
            "name": self.name,
            "description": self.description,
            "is_active": self.is_active,
            "primary_user_count": self.primary_user_count,
            "assigned_user_count": self.assigned_user_count,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
        }


@dataclass(frozen=True)
class RoleUsersDTO:
    """Users attached to a role, split by how they reference it."""

    role: RoleSummaryDTO
    primary_users: list["UserSummaryDTO"] = field(default_factory=list)
    assigned_users: list["UserSummaryDTO"] = field(default_factory=list)

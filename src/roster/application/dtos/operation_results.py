"""Result envelopes returned by the consistency commands.

Every result reports ``success`` and a human-readable ``message``; the
remaining fields carry either the affected entity or counts.
"""

from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from roster.application.dtos.role_dto import RoleDTO, RoleSummaryDTO
from roster.application.dtos.user_dto import UserDetailDTO


@dataclass(frozen=True)
class OperationResult:
    message: str

    @property
    def success(self) -> bool:
        return True

    def to_dict(self) -> dict:
        return {"success": self.success, "message": self.message}


@dataclass(frozen=True)
class UserOperationResult(OperationResult):
    user: UserDetailDTO

    def to_dict(self) -> dict:
        return {**super().to_dict(), "data": self.user.to_dict()}


@dataclass(frozen=True)
class UserDeletionResult(OperationResult):
    user_id: UUID
    removed_assignments: int = 0
    profile_removed: bool = False

    def to_dict(self) -> dict:
        return {
            **super().to_dict(),
            "user_id": str(self.user_id),
            "removed_assignments": self.removed_assignments,
            "profile_removed": self.profile_removed,
        }


@dataclass(frozen=True)
class RoleOperationResult(OperationResult):
    role: RoleDTO

    def to_dict(self) -> dict:
        return {**super().to_dict(), "data": self.role.to_dict()}


@dataclass(frozen=True)
class RoleAssignmentResult(OperationResult):
    role: RoleSummaryDTO
    assigned_count: int
    newly_assigned_count: int

    def to_dict(self) -> dict:
        return {
            **super().to_dict(),
            "role": self.role.to_dict(),
            "assigned_count": self.assigned_count,
            "newly_assigned_count": self.newly_assigned_count,
        }


@dataclass(frozen=True)
class RoleTransferResult(OperationResult):
    source_role: RoleSummaryDTO
    target_role: RoleSummaryDTO
    transferred_count: int

    def to_dict(self) -> dict:
        return {
            **super().to_dict(),
            "source_role": self.source_role.to_dict(),
            "target_role": self.target_role.to_dict(),
            "transferred_count": self.transferred_count,
        }


@dataclass(frozen=True)
class RoleDeletionResult(OperationResult):
    role_id: UUID
    affected_users: int
    replacement_role_id: Optional[UUID] = None
    primary_references_cleared: int = 0

    def to_dict(self) -> dict:
        return {
            **super().to_dict(),
            "role_id": str(self.role_id),
            "affected_users": self.affected_users,
            "replacement_role_id": (
                str(self.replacement_role_id) if self.replacement_role_id else None
            ),
            "primary_references_cleared": self.primary_references_cleared,
        }


@dataclass(frozen=True)
class UserWithRoleResult(OperationResult):
    user: UserDetailDTO
    role: RoleSummaryDTO

    def to_dict(self) -> dict:
        return {
            **super().to_dict(),
            "data": {"user": self.user.to_dict(), "role": self.role.to_dict()},
        }

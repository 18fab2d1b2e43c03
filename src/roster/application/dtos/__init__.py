"""Data transfer objects returned by commands and queries."""

from roster.application.dtos.operation_results import (
    OperationResult,
    RoleAssignmentResult,
    RoleDeletionResult,
    RoleOperationResult,
    RoleTransferResult,
    UserDeletionResult,
    UserOperationResult,
    UserWithRoleResult,
)
from roster.application.dtos.role_dto import RoleDTO, RoleSummaryDTO, RoleUsersDTO
from roster.application.dtos.user_dto import (
    ProfileDTO,
    UserDetailDTO,
    UserDTO,
    UserSummaryDTO,
)

__all__ = [
    "OperationResult",
    "ProfileDTO",
    "RoleAssignmentResult",
    "RoleDTO",
    "RoleDeletionResult",
    "RoleOperationResult",
    "RoleSummaryDTO",
    "RoleTransferResult",
    "RoleUsersDTO",
    "UserDTO",
    "UserDeletionResult",
    "UserDetailDTO",
    "UserOperationResult",
    "UserSummaryDTO",
    "UserWithRoleResult",
]

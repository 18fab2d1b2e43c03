"""Role domain: roles and the user-role association."""

from roster.domain.role.aggregates import Role
from roster.domain.role.exceptions import (
    EmptyAssignmentError,
    InvalidReplacementRoleError,
    InvalidRoleDataError,
    NoUsersToTransferError,
    RoleAlreadyAssignedError,
    RoleInUseError,
    RoleNameAlreadyExistsError,
    RoleNotFoundError,
    RolesNotFoundError,
    SameRoleTransferError,
)
from roster.domain.role.repositories import RoleRepository, UserRoleRepository

__all__ = [
    "EmptyAssignmentError",
    "InvalidReplacementRoleError",
    "InvalidRoleDataError",
    "NoUsersToTransferError",
    "Role",
    "RoleAlreadyAssignedError",
    "RoleInUseError",
    "RoleNameAlreadyExistsError",
    "RoleNotFoundError",
    "RoleRepository",
    "RolesNotFoundError",
    "SameRoleTransferError",
    "UserRoleRepository",
]

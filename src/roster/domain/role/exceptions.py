"""Role domain exceptions."""

from collections.abc import Iterable
from uuid import UUID

from roster.domain.shared.exceptions import (
    ConflictError,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)


class InvalidRoleDataError(ValidationError):
    """Raised when a role field breaks an invariant."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(
            message,
            ErrorCode.INVALID_ROLE_DATA,
            {"field": field} if field else None,
        )
        self.field = field


class RoleNotFoundError(EntityNotFoundError):
    """Role not found.

    ``purpose`` names the slot the role was referenced in (for example
    "primary", "source", "target" or "replacement") so callers can tell
    which reference was dangling.
    """

    def __init__(self, role_id: UUID | str, purpose: str | None = None) -> None:
        self.role_id = role_id
        self.purpose = purpose
        label = f"{purpose.capitalize()} role" if purpose else "Role"
        super().__init__(
            f"{label} not found: {role_id}",
            ErrorCode.ROLE_NOT_FOUND,
            {"role_id": str(role_id), "purpose": purpose},
        )


class RolesNotFoundError(ValidationError):
    """One or more roles of a bulk request do not exist."""

    def __init__(self, missing_ids: Iterable[UUID]) -> None:
        self.missing_ids = sorted(missing_ids, key=str)
        super().__init__(
            "Some roles were not found",
            ErrorCode.ROLES_NOT_FOUND,
            {"missing_ids": [str(role_id) for role_id in self.missing_ids]},
        )


class RoleNameAlreadyExistsError(ConflictError):
    """Role name already taken."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(
            f"A role named '{name}' already exists",
            ErrorCode.DUPLICATE_ROLE_NAME,
            {"name": name},
        )


class RoleAlreadyAssignedError(ConflictError):
    """Association row for (user, role) was inserted concurrently."""

    def __init__(self, user_id: UUID, role_id: UUID) -> None:
        self.user_id = user_id
        self.role_id = role_id
        super().__init__(
            "Role assignment already exists",
            ErrorCode.DUPLICATE_ASSIGNMENT,
            {"user_id": str(user_id), "role_id": str(role_id)},
        )


class RoleInUseError(ConflictError):
    """Role is still the primary role of one or more users."""

    def __init__(self, role_id: UUID, user_count: int) -> None:
        self.role_id = role_id
        self.user_count = user_count
        super().__init__(
            f"Cannot delete role: {user_count} user(s) have it as primary role",
            ErrorCode.ROLE_IN_USE,
            {"role_id": str(role_id), "user_count": user_count},
        )


class EmptyAssignmentError(ValidationError):
    """A bulk assignment was requested without any user."""

    def __init__(self) -> None:
        super().__init__(
            "At least one user id is required",
            ErrorCode.EMPTY_ASSIGNMENT,
        )


class NoUsersToTransferError(ValidationError):
    """The source role of a transfer has no holders."""

    def __init__(self, role_id: UUID, role_name: str) -> None:
        self.role_id = role_id
        super().__init__(
            f"No users hold the role '{role_name}'",
            ErrorCode.NO_USERS_TO_TRANSFER,
            {"role_id": str(role_id)},
        )


class SameRoleTransferError(ValidationError):
    """Source and target of a transfer are the same role."""

    def __init__(self, role_id: UUID) -> None:
        self.role_id = role_id
        super().__init__(
            "Source and target role must be different",
            ErrorCode.INVALID_ROLE_TRANSFER,
            {"role_id": str(role_id)},
        )


class InvalidReplacementRoleError(ValidationError):
    """A role cannot be replaced by itself when it is deleted."""

    def __init__(self, role_id: UUID) -> None:
        self.role_id = role_id
        super().__init__(
            "Replacement role must differ from the role being deleted",
            ErrorCode.INVALID_REPLACEMENT_ROLE,
            {"role_id": str(role_id)},
        )

"""User domain exceptions.

Custom exceptions for the user domain, used for validation
and consistency violations.
"""

from collections.abc import Iterable
from uuid import UUID

from roster.domain.shared.exceptions import (
    ConflictError,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)


class InvalidEmailError(ValidationError):
    """Raised when email format is invalid."""

    def __init__(self, message: str) -> None:
        super().__init__(message, ErrorCode.INVALID_FORMAT)


class InvalidUserDataError(ValidationError):
    """Raised when a user field breaks an invariant."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(
            message,
            ErrorCode.INVALID_USER_DATA,
            {"field": field} if field else None,
        )
        self.field = field


class EmailAlreadyExistsError(ConflictError):
    """Email already registered."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(
            f"Email already registered: {email}",
            ErrorCode.DUPLICATE_EMAIL,
            {"email": email},
        )


class UserNotFoundError(EntityNotFoundError):
    """User not found."""

    def __init__(self, user_id: UUID | str) -> None:
        self.user_id = user_id
        super().__init__(
            f"User not found: {user_id}",
            ErrorCode.USER_NOT_FOUND,
            {"user_id": str(user_id)},
        )


class UsersNotFoundError(ValidationError):
    """One or more users of a bulk request do not exist."""

    def __init__(self, missing_ids: Iterable[UUID]) -> None:
        self.missing_ids = sorted(missing_ids, key=str)
        super().__init__(
            "Some users were not found",
            ErrorCode.USERS_NOT_FOUND,
            {"missing_ids": [str(user_id) for user_id in self.missing_ids]},
        )

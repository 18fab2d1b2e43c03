"""Shared domain exceptions and error codes.

Every failure raised by the domain and application layers derives from
DomainException and falls into one of four kinds:

- ``EntityNotFoundError``: a directly addressed entity does not exist
- ``ConflictError``: the operation collides with existing state
- ``ValidationError``: the request references missing entities in bulk or
  breaks an input rule
- ``PersistenceError``: the entity store failed

The presentation layer maps the stable ErrorCode values to HTTP statuses.
"""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Stable error codes for API clients.

    These codes are part of the public API contract. Should not be changed.
    """

    # Validation Errors (400)
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_FORMAT = "INVALID_FORMAT"
    INVALID_USER_DATA = "INVALID_USER_DATA"
    INVALID_ROLE_DATA = "INVALID_ROLE_DATA"
    USERS_NOT_FOUND = "USERS_NOT_FOUND"
    ROLES_NOT_FOUND = "ROLES_NOT_FOUND"
    EMPTY_ASSIGNMENT = "EMPTY_ASSIGNMENT"
    NO_USERS_TO_TRANSFER = "NO_USERS_TO_TRANSFER"
    INVALID_ROLE_TRANSFER = "INVALID_ROLE_TRANSFER"
    INVALID_REPLACEMENT_ROLE = "INVALID_REPLACEMENT_ROLE"
    WEAK_PASSWORD = "WEAK_PASSWORD"

    # Not Found Errors (404)
    ENTITY_NOT_FOUND = "ENTITY_NOT_FOUND"
    USER_NOT_FOUND = "USER_NOT_FOUND"
    ROLE_NOT_FOUND = "ROLE_NOT_FOUND"

    # Conflict Errors (409)
    CONFLICT = "CONFLICT"
    DUPLICATE_EMAIL = "DUPLICATE_EMAIL"
    DUPLICATE_ROLE_NAME = "DUPLICATE_ROLE_NAME"
    DUPLICATE_ASSIGNMENT = "DUPLICATE_ASSIGNMENT"
    ROLE_IN_USE = "ROLE_IN_USE"

    # Storage Errors (500)
    PERSISTENCE_FAILURE = "PERSISTENCE_FAILURE"

    # General Errors
    INTERNAL_ERROR = "INTERNAL_ERROR"


class DomainException(Exception):  # NOQA: N818
    """Root of every domain and application failure.

    Attributes
    ----------
    message
        Text shown to API clients.
    code
        ErrorCode sent alongside the message. Defaults to the class's
        ``default_code``.
    details
        Extra context for the log. Never sent to clients.
    """

    default_code: ErrorCode = ErrorCode.INTERNAL_ERROR
    default_message: str | None = None

    def __init__(
        self,
        message: str | None = None,
        code: ErrorCode | None = None,
        details: dict[str, Any] | None = None,
    ):
        message = message or self.default_message or self.default_code.value
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.details = dict(details) if details else {}

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        name = type(self).__name__
        return f"<{name} {self.code.value}: {self.message!r} {self.details!r}>"


class ValidationError(DomainException):
    """Input breaks a rule or names entities that do not exist."""

    default_code = ErrorCode.VALIDATION_ERROR


class EntityNotFoundError(DomainException):
    default_code = ErrorCode.ENTITY_NOT_FOUND


class ConflictError(DomainException):
    """The change collides with existing state."""

    default_code = ErrorCode.CONFLICT


class PersistenceError(DomainException):
    default_code = ErrorCode.PERSISTENCE_FAILURE
    default_message = "The operation could not be stored"

"""Shared domain building blocks."""

from roster.domain.shared.exceptions import (
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    PersistenceError,
    ValidationError,
)
from roster.domain.shared.time import utc_now

__all__ = [
    "ConflictError",
    "DomainException",
    "EntityNotFoundError",
    "ErrorCode",
    "PersistenceError",
    "ValidationError",
    "utc_now",
]

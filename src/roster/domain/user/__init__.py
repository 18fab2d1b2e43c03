"""User domain: identity, credentials hash, primary role and profile."""

from roster.domain.user.aggregates import User
from roster.domain.user.entities import Profile
from roster.domain.user.exceptions import (
    EmailAlreadyExistsError,
    InvalidEmailError,
    InvalidUserDataError,
    UserNotFoundError,
    UsersNotFoundError,
)
from roster.domain.user.repositories import ProfileRepository, UserRepository
from roster.domain.user.value_objects import Email

__all__ = [
    "Email",
    "EmailAlreadyExistsError",
    "InvalidEmailError",
    "InvalidUserDataError",
    "Profile",
    "ProfileRepository",
    "User",
    "UserNotFoundError",
    "UserRepository",
    "UsersNotFoundError",
]

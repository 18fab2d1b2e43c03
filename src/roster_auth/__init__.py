"""Roster Auth - credential hashing capability.

Independent of the roster domain. Provides the bcrypt-backed
PasswordHashingService that the application layer consumes through its
PasswordHasher port.

Usage:
    from roster_auth import PasswordHashingService

    service = PasswordHashingService(rounds=12, min_length=6)
    digest = service.hash("secret-password")
"""

from roster_auth.exceptions import AuthError, WeakPasswordError
from roster_auth.services import PasswordHashingService

__all__ = [
    "AuthError",
    "PasswordHashingService",
    "WeakPasswordError",
]

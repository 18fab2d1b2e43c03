"""PasswordHasher - what the application needs from the credential capability.

Implemented by roster_auth.PasswordHashingService.
"""

from typing import Protocol


class PasswordHasher(Protocol):
    """Turns plaintext passwords into opaque digests and checks them."""

    def hash(self, password: str) -> str:
        """Return a digest for the plaintext password."""
        ...

    def verify(self, password: str, password_hash: str) -> bool:
        """Check a plaintext password against a digest."""
        ...

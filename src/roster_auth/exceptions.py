"""Credential exceptions.

Raised by the roster_auth package; the HTTP layer maps them to 400.
"""


class AuthError(Exception):
    """Base exception for all credential errors."""

    def __init__(self, message: str = "Credential error"):
        self.message = message
        super().__init__(self.message)


class WeakPasswordError(AuthError):
    """Raised when a password doesn't meet strength requirements."""

    def __init__(self, message: str = "Password does not meet requirements"):
        super().__init__(message)

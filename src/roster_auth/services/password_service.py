"""bcrypt hashing for user passwords.

Roster stores only the digest; the plaintext never leaves the command
that received it.
"""

import bcrypt

from roster_auth.exceptions import WeakPasswordError

# bcrypt ignores input past 72 bytes
BCRYPT_MAX_BYTES = 72


class PasswordHashingService:
    """Hash, check and length-validate passwords.

    Examples
    --------
    >>> passwords = PasswordHashingService(rounds=4)
    >>> digest = passwords.hash("hunter22")
    >>> passwords.verify("hunter22", digest)
    True
    """

    DEFAULT_MIN_LENGTH = 6
    MAX_LENGTH = 128

    def __init__(self, rounds: int = 12, min_length: int = DEFAULT_MIN_LENGTH):
        """
        Parameters
        ----------
        rounds
            bcrypt cost factor; each step doubles the hashing time.
        min_length
            Shortest plaintext ``validate_strength`` accepts.
        """
        self._rounds = rounds
        self._min_length = min_length

    @property
    def rounds(self) -> int:
        return self._rounds

    def hash(self, password: str) -> str:
        """Validate ``password`` and return its bcrypt digest.

        Raises
        ------
        WeakPasswordError
            When the length check fails.
        """
        self.validate_strength(password)
        digest = bcrypt.hashpw(_to_bytes(password), bcrypt.gensalt(rounds=self._rounds))
        return digest.decode("ascii")

    def verify(self, password: str, password_hash: str) -> bool:
        """True when ``password`` matches; a corrupt digest counts as no match."""
        try:
            return bcrypt.checkpw(_to_bytes(password), password_hash.encode("ascii"))
        except (ValueError, TypeError, UnicodeEncodeError):
            return False

    def validate_strength(self, password: str) -> None:
        length = len(password) if password else 0
        if length == 0:
            raise WeakPasswordError("Password cannot be empty")
        if length < self._min_length:
            raise WeakPasswordError(
                f"Password must be at least {self._min_length} characters"
            )
        if length > self.MAX_LENGTH:
            raise WeakPasswordError(
                f"Password cannot exceed {self.MAX_LENGTH} characters"
            )


def _to_bytes(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]

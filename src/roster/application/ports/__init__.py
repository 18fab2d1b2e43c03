"""Application layer ports (aka interfaces)."""

from roster.application.ports.credentials import PasswordHasher
from roster.application.ports.unit_of_work import UnitOfWork

__all__ = ["PasswordHasher", "UnitOfWork"]

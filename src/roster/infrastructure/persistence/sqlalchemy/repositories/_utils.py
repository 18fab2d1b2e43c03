"""Helpers shared by the SQLAlchemy repositories."""

from sqlalchemy.exc import IntegrityError


def is_unique_violation(error: IntegrityError) -> bool:
    """Tell unique-constraint failures apart from foreign-key failures.

    SQLite reports "UNIQUE constraint failed", PostgreSQL (asyncpg) reports
    UniqueViolationError / "duplicate key value violates unique constraint".
    """
    message = str(error.orig if error.orig is not None else error).lower()
    return "unique" in message or "duplicate key" in message

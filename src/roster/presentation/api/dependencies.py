"""FastAPI dependency injection for the Roster API.

Provides dependencies for:
- The shared database engine and session factory
- A fresh unit of work per request
- The password hashing service
"""

import logging
from functools import lru_cache
from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from roster.infrastructure.persistence.sqlalchemy import (
    SQLAlchemyUnitOfWork,
    build_engine,
    build_session_maker,
)
from roster_auth import PasswordHashingService
from roster_config.settings import get_settings

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Database Engine & Session (Singleton)
# -----------------------------------------------------------------------------


@lru_cache(maxsize=1)
def get_engine() -> AsyncEngine:
    """
    Get the shared async database engine (singleton).

    The engine manages the connection pool and is reused across all requests.

    Returns
    -------
    AsyncEngine instance
    """
    settings = get_settings()
    return build_engine(settings.database_url, echo=settings.db_echo)


@lru_cache(maxsize=1)
def get_session_maker() -> async_sessionmaker[AsyncSession]:
    """Get the shared async session maker (singleton)."""
    return build_session_maker(get_engine())


def get_unit_of_work() -> SQLAlchemyUnitOfWork:
    """Unit of work dependency; each request gets its own."""
    return SQLAlchemyUnitOfWork(get_session_maker())


UnitOfWorkDep = Annotated[SQLAlchemyUnitOfWork, Depends(get_unit_of_work)]


# -----------------------------------------------------------------------------
# Credential Services
# -----------------------------------------------------------------------------


@lru_cache(maxsize=1)
def get_password_service() -> PasswordHashingService:
    """Get password hashing service configured from settings."""
    settings = get_settings()
    return PasswordHashingService(
        rounds=settings.bcrypt_rounds,
        min_length=settings.password_min_length,
    )


PasswordServiceDep = Annotated[PasswordHashingService, Depends(get_password_service)]

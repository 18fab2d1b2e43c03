"""SQLAlchemy unit of work.

One AsyncSession (and therefore one database transaction) per ``async
with`` block. The repositories exposed on the unit of work all share that
session, so every read, check and write of an operation sees the same
transaction and is committed or rolled back together.
"""

import logging
from types import TracebackType

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from roster.domain.shared.exceptions import ConflictError, PersistenceError
from roster.infrastructure.persistence.sqlalchemy.repositories import (
    ProfileRepositorySQLAlchemy,
    RoleRepositorySQLAlchemy,
    UserRepositorySQLAlchemy,
    UserRoleRepositorySQLAlchemy,
)

logger = logging.getLogger(__name__)


class SQLAlchemyUnitOfWork:
    """Transactional boundary backed by an async session factory.

    Leaving the block normally commits. Leaving it with an exception rolls
    back; storage exceptions are translated on the way out:

    - ``IntegrityError`` becomes ``ConflictError``
    - any other ``SQLAlchemyError`` becomes ``PersistenceError``

    Domain exceptions propagate unchanged.
    """

    def __init__(self, session_maker: async_sessionmaker[AsyncSession]):
        self._session_maker = session_maker
        self._session: AsyncSession | None = None

    @property
    def session(self) -> AsyncSession:
        if self._session is None:
            msg = "Unit of work is not active"
            raise RuntimeError(msg)
        return self._session

    async def __aenter__(self) -> "SQLAlchemyUnitOfWork":
        if self._session is not None:
            msg = "Unit of work is already active"
            raise RuntimeError(msg)

        session = self._session_maker()
        self._session = session
        self.users = UserRepositorySQLAlchemy(session)
        self.roles = RoleRepositorySQLAlchemy(session)
        self.profiles = ProfileRepositorySQLAlchemy(session)
        self.user_roles = UserRoleRepositorySQLAlchemy(session)
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        session = self.session
        try:
            if exc is None:
                await self._commit(session)
            else:
                await self._rollback(session)
                self._translate(exc)
        finally:
            await session.close()
            self._session = None
        return False

    async def _commit(self, session: AsyncSession) -> None:
        try:
            await session.commit()
        except SQLAlchemyError as e:
            await self._rollback(session)
            self._translate(e)

    async def _rollback(self, session: AsyncSession) -> None:
        try:
            await session.rollback()
        except SQLAlchemyError:
            logger.exception("Rollback failed")

    def _translate(self, exc: BaseException) -> None:
        if isinstance(exc, IntegrityError):
            logger.warning("Constraint violation, transaction rolled back: %s", exc.orig)
            raise ConflictError(
                "The operation conflicts with existing data",
                details={"error": str(exc.orig)},
            ) from exc
        if isinstance(exc, SQLAlchemyError):
            logger.error("Storage failure, transaction rolled back", exc_info=exc)
            raise PersistenceError(details={"error": type(exc).__name__}) from exc

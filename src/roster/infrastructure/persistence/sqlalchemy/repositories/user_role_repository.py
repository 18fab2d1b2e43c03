"""SQLAlchemy implementation of UserRoleRepository."""

import logging
from collections.abc import Sequence
from uuid import UUID, uuid4

from sqlalchemy import delete, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from roster.domain.role import RoleAlreadyAssignedError, UserRoleRepository
from roster.infrastructure.persistence.sqlalchemy.models import UserRoleModel
from roster.infrastructure.persistence.sqlalchemy.repositories._utils import (
    is_unique_violation,
)

logger = logging.getLogger(__name__)


class UserRoleRepositorySQLAlchemy(UserRoleRepository):
    """SQLAlchemy implementation of the UserRoleRepository interface."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def exists(self, user_id: UUID, role_id: UUID) -> bool:
        stmt = select(UserRoleModel.id).where(
            UserRoleModel.user_id == user_id,
            UserRoleModel.role_id == role_id,
        )
        result = await self._session.execute(stmt)
        return result.first() is not None

    async def add(self, user_id: UUID, role_id: UUID) -> bool:
        if await self.exists(user_id, role_id):
            return False

        self._session.add(UserRoleModel(id=uuid4(), user_id=user_id, role_id=role_id))
        try:
            await self._session.flush()
        except IntegrityError as e:
            # Another transaction inserted the same pair after our check
            if is_unique_violation(e):
                raise RoleAlreadyAssignedError(user_id, role_id) from e
            raise

        logger.debug("Assigned role %s to user %s", role_id, user_id)
        return True

    async def remove(self, user_id: UUID, role_id: UUID) -> bool:
        stmt = delete(UserRoleModel).where(
            UserRoleModel.user_id == user_id,
            UserRoleModel.role_id == role_id,
        )
        result = await self._session.execute(stmt)
        return bool(result.rowcount)

    async def role_ids_for_user(self, user_id: UUID) -> list[UUID]:
        stmt = select(UserRoleModel.role_id).where(UserRoleModel.user_id == user_id)
        result = await self._session.execute(stmt)
        return list(result.scalars().all())

    async def replace_for_user(self, user_id: UUID, role_ids: Sequence[UUID]) -> None:
        target = list(dict.fromkeys(role_ids))
        current = set(await self.role_ids_for_user(user_id))

        stale = current.difference(target)
        if stale:
            stmt = delete(UserRoleModel).where(
                UserRoleModel.user_id == user_id,
                UserRoleModel.role_id.in_(list(stale)),
            )
            await self._session.execute(stmt)

        for role_id in target:
            if role_id not in current:
                await self.add(user_id, role_id)

    async def remove_all_for_user(self, user_id: UUID) -> int:
        stmt = delete(UserRoleModel).where(UserRoleModel.user_id == user_id)
        result = await self._session.execute(stmt)
        return result.rowcount or 0

    async def remove_all_for_role(self, role_id: UUID) -> int:
        stmt = delete(UserRoleModel).where(UserRoleModel.role_id == role_id)
        result = await self._session.execute(stmt)
        return result.rowcount or 0

    async def count_for_role(self, role_id: UUID) -> int:
        stmt = (
            select(func.count())
            .select_from(UserRoleModel)
            .where(UserRoleModel.role_id == role_id)
        )
        result = await self._session.execute(stmt)
        return result.scalar_one()

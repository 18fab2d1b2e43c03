"""SQLAlchemy implementation of RoleRepository."""

import logging
from collections.abc import Sequence
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from roster.domain.role import Role, RoleNameAlreadyExistsError, RoleRepository
from roster.infrastructure.persistence.sqlalchemy.models import (
    RoleModel,
    UserRoleModel,
)
from roster.infrastructure.persistence.sqlalchemy.repositories._utils import (
    is_unique_violation,
)

logger = logging.getLogger(__name__)


class RoleRepositorySQLAlchemy(RoleRepository):
    """SQLAlchemy implementation of the RoleRepository interface."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, role_id: UUID) -> Role | None:
        model = await self._find_model_by_id(role_id)

        if model is None:
            return None

        return self._map_to_domain(model)

    async def find_by_ids(self, role_ids: Sequence[UUID]) -> list[Role]:
        if not role_ids:
            return []

        stmt = select(RoleModel).where(RoleModel.id.in_(list(role_ids)))
        result = await self._session.execute(stmt)
        return [self._map_to_domain(model) for model in result.scalars().all()]

    async def find_by_name(self, name: str) -> Role | None:
        stmt = select(RoleModel).where(RoleModel.name == name.strip())
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._map_to_domain(model)

    async def save(self, role: Role) -> None:
        existing = await self._find_model_by_id(role.id)

        try:
            if existing:
                self._update_model(existing, role)
                logger.debug("Updated role: %s", role.id)
            else:
                self._session.add(self._map_to_model(role))
                logger.debug("Inserted role: %s (%s)", role.id, role.name)

            await self._session.flush()
        except IntegrityError as e:
            if is_unique_violation(e):
                raise RoleNameAlreadyExistsError(role.name) from e
            raise

    async def delete(self, role_id: UUID) -> None:
        model = await self._find_model_by_id(role_id)

        if model:
            await self._session.delete(model)
            await self._session.flush()
            logger.debug("Deleted role row: %s", role_id)

    async def list_all(self) -> list[Role]:
        stmt = select(RoleModel).order_by(RoleModel.created_at.desc())
        result = await self._session.execute(stmt)
        return [self._map_to_domain(model) for model in result.scalars().all()]

    async def list_for_user(self, user_id: UUID) -> list[Role]:
        stmt = (
            select(RoleModel)
            .join(UserRoleModel, UserRoleModel.role_id == RoleModel.id)
            .where(UserRoleModel.user_id == user_id)
            .order_by(RoleModel.name)
        )
        result = await self._session.execute(stmt)
        return [self._map_to_domain(model) for model in result.scalars().all()]

    async def _find_model_by_id(self, role_id: UUID) -> RoleModel | None:
        stmt = select(RoleModel).where(RoleModel.id == role_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _map_to_domain(self, model: RoleModel) -> Role:
        return Role.reconstitute(
            id=model.id,
            name=model.name,
            description=model.description,
            is_active=model.is_active,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _map_to_model(self, role: Role) -> RoleModel:
        return RoleModel(
            id=role.id,
            name=role.name,
            description=role.description,
            is_active=role.is_active,
            created_at=role.created_at,
            updated_at=role.updated_at,
        )

    def _update_model(self, model: RoleModel, role: Role) -> None:
        model.name = role.name
        model.description = role.description
        model.is_active = role.is_active
        model.updated_at = role.updated_at

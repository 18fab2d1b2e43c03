"""SQLAlchemy implementation of UserRepository."""

import logging
from collections.abc import Sequence
from typing import Union
from uuid import UUID

from sqlalchemy import func, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from roster.domain.shared.time import utc_now
from roster.domain.user import (
    Email,
    EmailAlreadyExistsError,
    User,
    UserRepository,
)
from roster.infrastructure.persistence.sqlalchemy.models import (
    UserModel,
    UserRoleModel,
)
from roster.infrastructure.persistence.sqlalchemy.repositories._utils import (
    is_unique_violation,
)

logger = logging.getLogger(__name__)


class UserRepositorySQLAlchemy(UserRepository):
    """SQLAlchemy implementation of the UserRepository interface."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, user_id: UUID) -> User | None:
        model = await self._find_model_by_id(user_id)

        if model is None:
            return None

        return self._map_to_domain(model)

    async def find_by_ids(self, user_ids: Sequence[UUID]) -> list[User]:
        if not user_ids:
            return []

        stmt = select(UserModel).where(UserModel.id.in_(list(user_ids)))
        result = await self._session.execute(stmt)
        return [self._map_to_domain(model) for model in result.scalars().all()]

    async def find_by_email(self, email: Union[str, Email]) -> User | None:
        email_value = email.value if isinstance(email, Email) else Email(email).value

        stmt = select(UserModel).where(UserModel.email == email_value)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._map_to_domain(model)

    async def save(self, user: User) -> None:
        existing = await self._find_model_by_id(user.id)

        try:
            if existing:
                self._update_model(existing, user)
                logger.debug("Updated user: %s", user.id)
            else:
                model = self._map_to_model(user)
                self._session.add(model)
                logger.debug("Inserted user: %s (email: %s)", user.id, user.email)

            await self._session.flush()
        except IntegrityError as e:
            if is_unique_violation(e):
                raise EmailAlreadyExistsError(user.email) from e
            raise

    async def delete(self, user_id: UUID) -> None:
        model = await self._find_model_by_id(user_id)

        if model:
            await self._session.delete(model)
            await self._session.flush()
            logger.debug("Deleted user row: %s", user_id)

    async def list_all(self, is_active: bool | None = None) -> list[User]:
        stmt = select(UserModel)
        if is_active is not None:
            stmt = stmt.where(UserModel.is_active == is_active)
        stmt = stmt.order_by(UserModel.created_at.desc())

        result = await self._session.execute(stmt)
        return [self._map_to_domain(model) for model in result.scalars().all()]

    async def list_by_role(self, role_id: UUID) -> list[User]:
        stmt = (
            select(UserModel)
            .join(UserRoleModel, UserRoleModel.user_id == UserModel.id)
            .where(UserRoleModel.role_id == role_id)
            .order_by(UserModel.name)
        )
        result = await self._session.execute(stmt)
        return [self._map_to_domain(model) for model in result.scalars().all()]

    async def list_by_primary_role(self, role_id: UUID) -> list[User]:
        stmt = (
            select(UserModel)
            .where(UserModel.primary_role_id == role_id)
            .order_by(UserModel.name)
        )
        result = await self._session.execute(stmt)
        return [self._map_to_domain(model) for model in result.scalars().all()]

    async def count_by_primary_role(self, role_id: UUID) -> int:
        stmt = (
            select(func.count())
            .select_from(UserModel)
            .where(UserModel.primary_role_id == role_id)
        )
        result = await self._session.execute(stmt)
        return result.scalar_one()

    async def clear_primary_role(self, role_id: UUID) -> int:
        stmt = (
            update(UserModel)
            .where(UserModel.primary_role_id == role_id)
            .values(primary_role_id=None, updated_at=utc_now())
            .execution_options(synchronize_session="fetch")
        )
        result = await self._session.execute(stmt)
        return result.rowcount or 0

    async def count(self) -> int:
        stmt = select(func.count()).select_from(UserModel)
        result = await self._session.execute(stmt)
        return result.scalar_one()

    async def _find_model_by_id(self, user_id: UUID) -> UserModel | None:
        stmt = select(UserModel).where(UserModel.id == user_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _map_to_domain(self, model: UserModel) -> User:
        return User.reconstitute(
            id=model.id,
            name=model.name,
            email=model.email,
            password_hash=model.password_hash,
            primary_role_id=model.primary_role_id,
            is_active=model.is_active,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _map_to_model(self, user: User) -> UserModel:
        return UserModel(
            id=user.id,
            name=user.name,
            email=user.email,
            password_hash=user.password_hash,
            primary_role_id=user.primary_role_id,
            is_active=user.is_active,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )

    def _update_model(self, model: UserModel, user: User) -> None:
        model.name = user.name
        model.email = user.email
        model.password_hash = user.password_hash
        model.primary_role_id = user.primary_role_id
        model.is_active = user.is_active
        model.updated_at = user.updated_at

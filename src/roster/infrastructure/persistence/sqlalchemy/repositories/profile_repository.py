"""SQLAlchemy implementation of ProfileRepository."""

import logging
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from roster.domain.user import Profile, ProfileRepository
from roster.infrastructure.persistence.sqlalchemy.models import ProfileModel

logger = logging.getLogger(__name__)


class ProfileRepositorySQLAlchemy(ProfileRepository):
    """SQLAlchemy implementation of the ProfileRepository interface."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_user_id(self, user_id: UUID) -> Profile | None:
        model = await self._find_model_by_user_id(user_id)

        if model is None:
            return None

        return self._map_to_domain(model)

    async def save(self, profile: Profile) -> None:
        existing = await self._find_model_by_user_id(profile.user_id)

        if existing:
            existing.bio = profile.bio
            existing.avatar_url = profile.avatar_url
            existing.updated_at = profile.updated_at
        else:
            self._session.add(self._map_to_model(profile))

        await self._session.flush()

    async def delete_by_user_id(self, user_id: UUID) -> bool:
        stmt = delete(ProfileModel).where(ProfileModel.user_id == user_id)
        result = await self._session.execute(stmt)
        deleted = bool(result.rowcount)
        if deleted:
            logger.debug("Deleted profile of user: %s", user_id)
        return deleted

    async def _find_model_by_user_id(self, user_id: UUID) -> ProfileModel | None:
        stmt = select(ProfileModel).where(ProfileModel.user_id == user_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _map_to_domain(self, model: ProfileModel) -> Profile:
        return Profile.reconstitute(
            id=model.id,
            user_id=model.user_id,
            bio=model.bio,
            avatar_url=model.avatar_url,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _map_to_model(self, profile: Profile) -> ProfileModel:
        return ProfileModel(
            id=profile.id,
            user_id=profile.user_id,
            bio=profile.bio,
            avatar_url=profile.avatar_url,
            created_at=profile.created_at,
            updated_at=profile.updated_at,
        )

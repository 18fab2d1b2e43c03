"""Profile repository interface."""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from roster.domain.user.entities.profile import Profile


class ProfileRepository(ABC):
    """Repository interface for Profile entities."""

    @abstractmethod
    async def find_by_user_id(self, user_id: UUID) -> Optional[Profile]:
        """Find the profile belonging to a user."""

    @abstractmethod
    async def save(self, profile: Profile) -> None:
        """Save or update a profile."""

    @abstractmethod
    async def delete_by_user_id(self, user_id: UUID) -> bool:
        """Delete the profile of a user, returning whether one existed."""

"""User-role association repository interface.

Association rows are only ever added or removed, never edited.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from uuid import UUID


class UserRoleRepository(ABC):
    """Repository interface for the user-role association."""

    @abstractmethod
    async def exists(self, user_id: UUID, role_id: UUID) -> bool:
        """Check whether the user holds the role."""

    @abstractmethod
    async def add(self, user_id: UUID, role_id: UUID) -> bool:
        """Add the association if missing. Returns True when a row was added."""

    @abstractmethod
    async def remove(self, user_id: UUID, role_id: UUID) -> bool:
        """Remove the association. Returns True when a row was removed."""

    @abstractmethod
    async def role_ids_for_user(self, user_id: UUID) -> list[UUID]:
        """List role IDs associated with a user."""

    @abstractmethod
    async def replace_for_user(self, user_id: UUID, role_ids: Sequence[UUID]) -> None:
        """Make the user's association set exactly ``role_ids``."""

    @abstractmethod
    async def remove_all_for_user(self, user_id: UUID) -> int:
        """Remove every association of a user."""

    @abstractmethod
    async def remove_all_for_role(self, role_id: UUID) -> int:
        """Remove every association of a role."""

    @abstractmethod
    async def count_for_role(self, role_id: UUID) -> int:
        """Count users associated with a role."""

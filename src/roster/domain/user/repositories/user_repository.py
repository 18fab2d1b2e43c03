"""User repository interface."""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Optional, Union
from uuid import UUID

from roster.domain.user.aggregates.user import User
from roster.domain.user.value_objects.email import Email


class UserRepository(ABC):
    """Repository interface for User aggregates."""

    @abstractmethod
    async def find_by_id(self, user_id: UUID) -> Optional[User]:
        """Find a user by their ID."""

    @abstractmethod
    async def find_by_ids(self, user_ids: Sequence[UUID]) -> list[User]:
        """Find every existing user among the given IDs."""

    @abstractmethod
    async def find_by_email(self, email: Union[str, Email]) -> Optional[User]:
        """Find a user by their email address."""

    @abstractmethod
    async def save(self, user: User) -> None:
        """Save or update a user."""

    @abstractmethod
    async def delete(self, user_id: UUID) -> None:
        """Delete a user row by ID."""

    @abstractmethod
    async def list_all(self, is_active: bool | None = None) -> list[User]:
        """List users, newest first, optionally filtered by active flag."""

    @abstractmethod
    async def list_by_role(self, role_id: UUID) -> list[User]:
        """List users holding the role through the association."""

    @abstractmethod
    async def list_by_primary_role(self, role_id: UUID) -> list[User]:
        """List users whose primary role is the given role."""

    @abstractmethod
    async def count_by_primary_role(self, role_id: UUID) -> int:
        """Count users whose primary role is the given role."""

    @abstractmethod
    async def clear_primary_role(self, role_id: UUID) -> int:
        """Unset the primary role of every user pointing at ``role_id``."""

    @abstractmethod
    async def count(self) -> int:
        """Count total users."""

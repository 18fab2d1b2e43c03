"""Role repository interface."""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Optional
from uuid import UUID

from roster.domain.role.aggregates.role import Role


class RoleRepository(ABC):
    """Repository interface for Role aggregates."""

    @abstractmethod
    async def find_by_id(self, role_id: UUID) -> Optional[Role]:
        """Find a role by its ID."""

    @abstractmethod
    async def find_by_ids(self, role_ids: Sequence[UUID]) -> list[Role]:
        """Find every existing role among the given IDs."""

    @abstractmethod
    async def find_by_name(self, name: str) -> Optional[Role]:
        """Find a role by its unique name."""

    @abstractmethod
    async def save(self, role: Role) -> None:
        """Save or update a role."""

    @abstractmethod
    async def delete(self, role_id: UUID) -> None:
        """Delete a role row by ID."""

    @abstractmethod
    async def list_all(self) -> list[Role]:
        """List all roles, newest first."""

    @abstractmethod
    async def list_for_user(self, user_id: UUID) -> list[Role]:
        """List the roles associated with a user, ordered by name."""

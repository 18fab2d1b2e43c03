"""Unit of work protocol for the application layer."""

from __future__ import annotations

from types import TracebackType
from typing import Protocol

from roster.domain.role import RoleRepository, UserRoleRepository
from roster.domain.user import ProfileRepository, UserRepository


class UnitOfWork(Protocol):
    """One atomic unit of work against the entity store.

    Entering the context opens a fresh transaction and binds the
    repositories to it. Leaving the context normally commits; leaving it
    through an exception rolls back every change and re-raises, with
    storage failures translated into domain exceptions.
    """

    users: UserRepository
    roles: RoleRepository
    profiles: ProfileRepository
    user_roles: UserRoleRepository

    async def __aenter__(self) -> UnitOfWork: ...

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool | None: ...

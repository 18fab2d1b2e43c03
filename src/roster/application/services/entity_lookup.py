"""Existence checks and read assembly shared by commands and queries.

All helpers operate on an already-entered unit of work so that the checks
and the writes that depend on them share one transaction.
"""

from collections.abc import Iterable, Sequence
from uuid import UUID

from roster.application.dtos import UserDetailDTO
from roster.application.ports import UnitOfWork
from roster.domain.role import Role, RoleNotFoundError, RolesNotFoundError
from roster.domain.user import User, UserNotFoundError, UsersNotFoundError


def unique_ids(ids: Iterable[UUID]) -> list[UUID]:
    """Drop duplicate ids, keeping first-seen order."""
    return list(dict.fromkeys(ids))


async def require_user(uow: UnitOfWork, user_id: UUID) -> User:
    user = await uow.users.find_by_id(user_id)
    if user is None:
        raise UserNotFoundError(user_id)
    return user


async def require_role(
    uow: UnitOfWork,
    role_id: UUID,
    purpose: str | None = None,
) -> Role:
    role = await uow.roles.find_by_id(role_id)
    if role is None:
        raise RoleNotFoundError(role_id, purpose)
    return role


async def require_roles(uow: UnitOfWork, role_ids: Sequence[UUID]) -> list[Role]:
    """Load every role or fail with the full list of missing ids."""
    roles = await uow.roles.find_by_ids(role_ids)
    missing = set(role_ids).difference(role.id for role in roles)
    if missing:
        raise RolesNotFoundError(missing)
    return roles


async def require_users(uow: UnitOfWork, user_ids: Sequence[UUID]) -> list[User]:
    """Load every user or fail with the full list of missing ids."""
    users = await uow.users.find_by_ids(user_ids)
    missing = set(user_ids).difference(user.id for user in users)
    if missing:
        raise UsersNotFoundError(missing)
    return users


async def load_user_details(uow: UnitOfWork, user: User) -> UserDetailDTO:
    primary_role = None
    if user.primary_role_id is not None:
        primary_role = await uow.roles.find_by_id(user.primary_role_id)

    roles = await uow.roles.list_for_user(user.id)
    profile = await uow.profiles.find_by_user_id(user.id)
    return UserDetailDTO.from_entities(user, primary_role, roles, profile)

"""Factories and store inspection helpers for tests.

Entities are written through the real repositories inside their own unit
of work, so every test starts from committed data.
"""

from collections.abc import Iterable
from typing import Any
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from roster.domain.role import Role
from roster.domain.user import Profile, User
from roster.infrastructure.persistence.sqlalchemy import SQLAlchemyUnitOfWork
from roster.infrastructure.persistence.sqlalchemy.models import (
    ProfileModel,
    RoleModel,
    UserModel,
    UserRoleModel,
)

TEST_PASSWORD = "secure_password_123"
TEST_PASSWORD_HASH = "$2b$04$notarealhashbutlongenoughtolooklikeone000000000000000"

ALL_MODELS = (UserModel, RoleModel, ProfileModel, UserRoleModel)


async def make_role(
    session_maker: async_sessionmaker[AsyncSession],
    name: str,
    description: str | None = None,
) -> Role:
    role = Role.create(name=name, description=description)
    async with SQLAlchemyUnitOfWork(session_maker) as uow:
        await uow.roles.save(role)
    return role


async def make_user(  # NOQA: PLR0913
    session_maker: async_sessionmaker[AsyncSession],
    name: str = "Test User",
    email: str = "test@example.com",
    primary_role_id: UUID | None = None,
    role_ids: Iterable[UUID] = (),
    bio: str | None = None,
    avatar_url: str | None = None,
    with_profile: bool = False,
) -> User:
    user = User.create(
        name=name,
        email=email,
        password_hash=TEST_PASSWORD_HASH,
        primary_role_id=primary_role_id,
    )
    async with SQLAlchemyUnitOfWork(session_maker) as uow:
        await uow.users.save(user)
        if with_profile or bio is not None or avatar_url is not None:
            await uow.profiles.save(
                Profile.create(user_id=user.id, bio=bio, avatar_url=avatar_url),
            )
        for role_id in role_ids:
            await uow.user_roles.add(user.id, role_id)
    return user


async def role_ids_of(
    session_maker: async_sessionmaker[AsyncSession],
    user_id: UUID,
) -> set[UUID]:
    async with session_maker() as session:
        result = await session.execute(
            select(UserRoleModel.role_id).where(UserRoleModel.user_id == user_id),
        )
        return set(result.scalars().all())


async def count_rows(
    session_maker: async_sessionmaker[AsyncSession],
    model: type,
) -> int:
    async with session_maker() as session:
        result = await session.execute(select(model))
        return len(result.scalars().all())


async def snapshot_store(
    session_maker: async_sessionmaker[AsyncSession],
) -> dict[str, list[tuple[Any, ...]]]:
    """Every row of every table, for before/after comparisons."""
    snapshot: dict[str, list[tuple[Any, ...]]] = {}
    async with session_maker() as session:
        for model in ALL_MODELS:
            table = model.__table__
            result = await session.execute(select(*table.columns))
            snapshot[table.name] = sorted(
                (tuple(row) for row in result.all()),
                key=repr,
            )
    return snapshot

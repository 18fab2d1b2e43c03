"""Tests for the read-only queries."""

from uuid import UUID

import pytest

from roster.application.queries import (
    GetRoleQuery,
    GetUserQuery,
    ListRolesQuery,
    ListRoleUsersQuery,
    ListUsersQuery,
)
from roster.domain.role import RoleNotFoundError
from roster.domain.user import UserNotFoundError
from tests.shared.fixtures.factories import make_role, make_user

MISSING_ID = UUID("99999999-9999-9999-9999-999999999999")


class TestUserQueries:
    @pytest.mark.asyncio
    async def test_get_user_expands_relations(self, unit_of_work, session_maker):
        role = await make_role(session_maker, "Editor")
        user = await make_user(
            session_maker,
            primary_role_id=role.id,
            role_ids=[role.id],
            bio="Hello",
        )

        detail = await GetUserQuery(unit_of_work).execute(user.id)

        assert detail.primary_role.name == "Editor"
        assert [r.name for r in detail.roles] == ["Editor"]
        assert detail.profile.bio == "Hello"

    @pytest.mark.asyncio
    async def test_get_missing_user(self, unit_of_work):
        with pytest.raises(UserNotFoundError):
            await GetUserQuery(unit_of_work).execute(MISSING_ID)

    @pytest.mark.asyncio
    async def test_list_users_filters_by_active(self, unit_of_work, session_maker):
        role = await make_role(session_maker, "Editor")
        await make_user(session_maker, email="a@x.com", primary_role_id=role.id)
        inactive = await make_user(session_maker, email="b@x.com")
        async with unit_of_work as uow:
            stored = await uow.users.find_by_id(inactive.id)
            stored.deactivate()
            await uow.users.save(stored)

        everyone = await ListUsersQuery(unit_of_work).execute()
        active = await ListUsersQuery(unit_of_work).execute(is_active=True)

        assert len(everyone) == 2
        assert [u.email for u in active] == ["a@x.com"]
        assert active[0].primary_role.id == role.id


class TestRoleQueries:
    @pytest.mark.asyncio
    async def test_get_role_counts_holders(self, unit_of_work, session_maker):
        role = await make_role(session_maker, "Editor")
        await make_user(
            session_maker,
            email="a@x.com",
            primary_role_id=role.id,
            role_ids=[role.id],
        )
        await make_user(session_maker, email="b@x.com", role_ids=[role.id])

        dto = await GetRoleQuery(unit_of_work).execute(role.id)

        assert dto.primary_user_count == 1
        assert dto.assigned_user_count == 2

    @pytest.mark.asyncio
    async def test_get_missing_role(self, unit_of_work):
        with pytest.raises(RoleNotFoundError):
            await GetRoleQuery(unit_of_work).execute(MISSING_ID)

    @pytest.mark.asyncio
    async def test_list_roles(self, unit_of_work, session_maker):
        await make_role(session_maker, "Editor")
        await make_role(session_maker, "Reviewer")

        roles = await ListRolesQuery(unit_of_work).execute()

        assert {r.name for r in roles} == {"Editor", "Reviewer"}

    @pytest.mark.asyncio
    async def test_list_role_users_splits_primary_and_assigned(
        self,
        unit_of_work,
        session_maker,
    ):
        role = await make_role(session_maker, "Editor")
        primary = await make_user(
            session_maker,
            name="Primary",
            email="p@x.com",
            primary_role_id=role.id,
        )
        assigned = await make_user(
            session_maker,
            name="Assigned",
            email="a@x.com",
            role_ids=[role.id],
        )

        dto = await ListRoleUsersQuery(unit_of_work).execute(role.id)

        assert [u.id for u in dto.primary_users] == [primary.id]
        assert [u.id for u in dto.assigned_users] == [assigned.id]

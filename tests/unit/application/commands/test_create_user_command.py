"""Tests for CreateUserCommand against a real SQLite store."""

from uuid import UUID

import pytest

from roster.application.commands import CreateUserCommand, ProfileInput
from roster.domain.role import RoleNotFoundError, RolesNotFoundError
from roster.domain.shared.exceptions import ErrorCode
from roster.domain.user import EmailAlreadyExistsError
from roster.infrastructure.persistence.sqlalchemy.models import (
    ProfileModel,
    UserModel,
    UserRoleModel,
)
from roster_auth import WeakPasswordError
from tests.shared.fixtures.factories import (
    TEST_PASSWORD,
    count_rows,
    make_role,
    make_user,
    role_ids_of,
    snapshot_store,
)

MISSING_ROLE_ID = UUID("99999999-9999-9999-9999-999999999999")


class TestCreateUserCommand:
    @pytest.mark.asyncio
    async def test_creates_user_with_profile_and_roles(
        self,
        unit_of_work,
        session_maker,
        password_service,
    ):
        admin = await make_role(session_maker, "Administrator")
        editor = await make_role(session_maker, "Editor")
        command = CreateUserCommand(unit_of_work, password_service)

        result = await command.execute(
            name="Alice",
            email="Alice@Example.com",
            password=TEST_PASSWORD,
            primary_role_id=admin.id,
            role_ids=[admin.id, editor.id],
            profile=ProfileInput(bio="Hello", avatar_url="https://img.test/a.png"),
        )

        assert result.success is True
        assert result.message == "User created successfully"
        user = result.user
        assert user.email == "alice@example.com"
        assert user.primary_role.id == admin.id
        assert set(user.role_ids) == {admin.id, editor.id}
        assert user.profile.bio == "Hello"
        assert user.profile.avatar_url == "https://img.test/a.png"
        assert await role_ids_of(session_maker, user.id) == {admin.id, editor.id}

    @pytest.mark.asyncio
    async def test_password_is_hashed_and_never_returned(
        self,
        unit_of_work,
        session_maker,
        password_service,
    ):
        command = CreateUserCommand(unit_of_work, password_service)

        result = await command.execute(
            name="Alice",
            email="alice@example.com",
            password=TEST_PASSWORD,
        )

        assert "password" not in str(result.to_dict())
        async with unit_of_work as uow:
            stored = await uow.users.find_by_id(result.user.id)
        assert stored.password_hash != TEST_PASSWORD
        assert password_service.verify(TEST_PASSWORD, stored.password_hash)

    @pytest.mark.asyncio
    async def test_without_profile_or_roles(
        self,
        unit_of_work,
        session_maker,
        password_service,
    ):
        command = CreateUserCommand(unit_of_work, password_service)

        result = await command.execute(
            name="Alice",
            email="alice@example.com",
            password=TEST_PASSWORD,
        )

        assert result.user.profile is None
        assert result.user.roles == []
        assert result.user.primary_role is None
        assert await count_rows(session_maker, ProfileModel) == 0

    @pytest.mark.asyncio
    async def test_duplicate_role_ids_collapse(
        self,
        unit_of_work,
        session_maker,
        password_service,
    ):
        editor = await make_role(session_maker, "Editor")
        command = CreateUserCommand(unit_of_work, password_service)

        await command.execute(
            name="Alice",
            email="alice@example.com",
            password=TEST_PASSWORD,
            role_ids=[editor.id, editor.id],
        )

        assert await count_rows(session_maker, UserRoleModel) == 1

    @pytest.mark.asyncio
    async def test_duplicate_email_rejected_without_side_effects(
        self,
        unit_of_work,
        session_maker,
        password_service,
    ):
        editor = await make_role(session_maker, "Editor")
        await make_user(session_maker, name="First", email="a@x.com")
        before = await snapshot_store(session_maker)
        command = CreateUserCommand(unit_of_work, password_service)

        with pytest.raises(EmailAlreadyExistsError) as exc_info:
            await command.execute(
                name="Second",
                email="A@X.com",
                password=TEST_PASSWORD,
                role_ids=[editor.id],
                profile=ProfileInput(bio="Should not exist"),
            )

        assert exc_info.value.code == ErrorCode.DUPLICATE_EMAIL
        assert await snapshot_store(session_maker) == before
        assert await count_rows(session_maker, UserModel) == 1

    @pytest.mark.asyncio
    async def test_missing_primary_role_rejected(
        self,
        unit_of_work,
        session_maker,
        password_service,
    ):
        before = await snapshot_store(session_maker)
        command = CreateUserCommand(unit_of_work, password_service)

        with pytest.raises(RoleNotFoundError) as exc_info:
            await command.execute(
                name="Alice",
                email="alice@example.com",
                password=TEST_PASSWORD,
                primary_role_id=MISSING_ROLE_ID,
            )

        assert exc_info.value.purpose == "primary"
        assert await snapshot_store(session_maker) == before

    @pytest.mark.asyncio
    async def test_one_missing_role_aborts_everything(
        self,
        unit_of_work,
        session_maker,
        password_service,
    ):
        editor = await make_role(session_maker, "Editor")
        before = await snapshot_store(session_maker)
        command = CreateUserCommand(unit_of_work, password_service)

        with pytest.raises(RolesNotFoundError) as exc_info:
            await command.execute(
                name="Alice",
                email="alice@example.com",
                password=TEST_PASSWORD,
                role_ids=[editor.id, MISSING_ROLE_ID],
                profile=ProfileInput(bio="Hello"),
            )

        assert exc_info.value.missing_ids == [MISSING_ROLE_ID]
        assert await snapshot_store(session_maker) == before

    @pytest.mark.asyncio
    async def test_weak_password_rejected(
        self,
        unit_of_work,
        session_maker,
        password_service,
    ):
        command = CreateUserCommand(unit_of_work, password_service)

        with pytest.raises(WeakPasswordError):
            await command.execute(
                name="Alice",
                email="alice@example.com",
                password="123",
            )

        assert await count_rows(session_maker, UserModel) == 0

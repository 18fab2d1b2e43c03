"""Tests for the SQLAlchemy unit of work (commit, rollback, translation)."""

from uuid import UUID

import pytest
from sqlalchemy import text

from roster.domain.role import Role
from roster.domain.shared.exceptions import ConflictError, PersistenceError
from roster.domain.user import User, UserNotFoundError
from roster.infrastructure.persistence.sqlalchemy.models import (
    RoleModel,
    UserModel,
    UserRoleModel,
)
from tests.shared.fixtures.factories import TEST_PASSWORD_HASH, count_rows

UNKNOWN_ID = UUID("99999999-9999-9999-9999-999999999999")


def _user(email: str = "alice@example.com") -> User:
    return User.create(name="Alice", email=email, password_hash=TEST_PASSWORD_HASH)


class TestUnitOfWorkLifecycle:
    @pytest.mark.asyncio
    async def test_commits_on_normal_exit(self, unit_of_work, session_maker):
        async with unit_of_work as uow:
            await uow.roles.save(Role.create(name="Editor"))
            await uow.users.save(_user())

        assert await count_rows(session_maker, RoleModel) == 1
        assert await count_rows(session_maker, UserModel) == 1

    @pytest.mark.asyncio
    async def test_rolls_back_on_exception(self, unit_of_work, session_maker):
        with pytest.raises(RuntimeError, match="boom"):
            async with unit_of_work as uow:
                await uow.users.save(_user())
                raise RuntimeError("boom")

        assert await count_rows(session_maker, UserModel) == 0

    @pytest.mark.asyncio
    async def test_domain_exceptions_pass_through(self, unit_of_work, session_maker):
        with pytest.raises(UserNotFoundError):
            async with unit_of_work as uow:
                await uow.users.save(_user())
                raise UserNotFoundError(UNKNOWN_ID)

        assert await count_rows(session_maker, UserModel) == 0

    @pytest.mark.asyncio
    async def test_is_reusable_after_exit(self, unit_of_work, session_maker):
        async with unit_of_work as uow:
            await uow.users.save(_user("a@x.com"))
        async with unit_of_work as uow:
            await uow.users.save(_user("b@x.com"))

        assert await count_rows(session_maker, UserModel) == 2

    @pytest.mark.asyncio
    async def test_nested_entry_rejected(self, unit_of_work):
        async with unit_of_work:
            with pytest.raises(RuntimeError, match="already active"):
                await unit_of_work.__aenter__()

    def test_session_unavailable_outside_block(self, unit_of_work):
        with pytest.raises(RuntimeError, match="not active"):
            _ = unit_of_work.session


class TestUnitOfWorkErrorTranslation:
    @pytest.mark.asyncio
    async def test_constraint_violation_becomes_conflict(
        self,
        unit_of_work,
        session_maker,
    ):
        with pytest.raises(ConflictError) as exc_info:
            async with unit_of_work as uow:
                await uow.users.save(_user())
                # Foreign keys are enforced, so a dangling role id fails at commit
                uow.session.add(
                    UserRoleModel(id=UNKNOWN_ID, user_id=UNKNOWN_ID, role_id=UNKNOWN_ID),
                )

        assert "error" in exc_info.value.details
        assert await count_rows(session_maker, UserModel) == 0

    @pytest.mark.asyncio
    async def test_storage_failure_becomes_persistence_error(
        self,
        unit_of_work,
        session_maker,
    ):
        with pytest.raises(PersistenceError) as exc_info:
            async with unit_of_work as uow:
                await uow.users.save(_user())
                await uow.session.execute(text("SELECT * FROM missing_table"))

        assert exc_info.value.details["error"] == "OperationalError"
        assert await count_rows(session_maker, UserModel) == 0

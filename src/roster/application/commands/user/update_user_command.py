"""Partial update of a user, its profile and its role set."""

import logging
from typing import Any
from uuid import UUID

from roster.application.commands.payloads import (
    ProfileInput,
    UserChanges,
    is_set,
)
from roster.application.dtos import UserOperationResult
from roster.application.ports import PasswordHasher, UnitOfWork
from roster.application.services import (
    load_user_details,
    require_role,
    require_roles,
    require_user,
    unique_ids,
)
from roster.domain.user import (
    Email,
    EmailAlreadyExistsError,
    InvalidUserDataError,
    Profile,
    User,
)

logger = logging.getLogger(__name__)


def _required(value: Any, field: str) -> Any:
    if value is None:
        msg = f"{field} cannot be cleared"
        raise InvalidUserDataError(msg, field=field)
    return value


class UpdateUserCommand:
    """Command to apply a tri-state partial update to a user.

    Omitted fields keep their value. An explicit ``None`` clears the
    primary role, removes every role association, or deletes the profile;
    for name, email, password and is_active it is rejected. A supplied
    ``role_ids`` list replaces the association set exactly. A supplied
    profile is merged field by field into the stored one, or created.
    """

    def __init__(
        self,
        unit_of_work: UnitOfWork,
        password_service: PasswordHasher,
    ):
        self._uow = unit_of_work
        self._password_service = password_service

    async def execute(self, user_id: UUID, changes: UserChanges) -> UserOperationResult:
        async with self._uow as uow:
            user = await require_user(uow, user_id)

            new_email: Email | None = None
            if is_set(changes.email):
                new_email = Email(_required(changes.email, "email"))
                if new_email.value != user.email:
                    owner = await uow.users.find_by_email(new_email)
                    if owner is not None and owner.id != user.id:
                        raise EmailAlreadyExistsError(new_email.value)

            if is_set(changes.primary_role_id) and changes.primary_role_id is not None:
                await require_role(uow, changes.primary_role_id, "primary")

            role_ids: list[UUID] | None = None
            if is_set(changes.role_ids):
                role_ids = unique_ids(changes.role_ids or [])
                if role_ids:
                    await require_roles(uow, role_ids)

            self._apply_user_fields(user, changes, new_email)
            await uow.users.save(user)

            if is_set(changes.profile):
                await self._apply_profile(uow, user.id, changes.profile)

            if role_ids is not None:
                await uow.user_roles.replace_for_user(user.id, role_ids)

            details = await load_user_details(uow, user)

        logger.info("Updated user %s", user.id)
        return UserOperationResult(message="User updated successfully", user=details)

    def _apply_user_fields(
        self,
        user: User,
        changes: UserChanges,
        new_email: Email | None,
    ) -> None:
        if is_set(changes.name):
            user.rename(_required(changes.name, "name"))
        if new_email is not None and new_email.value != user.email:
            user.change_email(new_email)
        if is_set(changes.password):
            password = _required(changes.password, "password")
            user.change_password_hash(self._password_service.hash(password))
        if is_set(changes.is_active):
            if _required(changes.is_active, "is_active"):
                user.activate()
            else:
                user.deactivate()
        if is_set(changes.primary_role_id):
            user.assign_primary_role(changes.primary_role_id)

    async def _apply_profile(
        self,
        uow: UnitOfWork,
        user_id: UUID,
        profile_input: ProfileInput | None,
    ) -> None:
        if profile_input is None:
            await uow.profiles.delete_by_user_id(user_id)
            return

        profile = await uow.profiles.find_by_user_id(user_id)
        if profile is None:
            profile = Profile.create(
                user_id=user_id,
                bio=profile_input.value_or_none("bio"),
                avatar_url=profile_input.value_or_none("avatar_url"),
            )
        else:
            if is_set(profile_input.bio):
                profile.change_bio(profile_input.bio)
            if is_set(profile_input.avatar_url):
                profile.change_avatar_url(profile_input.avatar_url)

        await uow.profiles.save(profile)

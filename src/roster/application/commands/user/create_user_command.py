"""Create a user together with its profile and role associations."""

import logging
from collections.abc import Sequence
from uuid import UUID

from roster.application.commands.payloads import ProfileInput
from roster.application.dtos import UserOperationResult
from roster.application.ports import PasswordHasher, UnitOfWork
from roster.application.services import (
    load_user_details,
    require_role,
    require_roles,
    unique_ids,
)
from roster.domain.user import Email, EmailAlreadyExistsError, Profile, User

logger = logging.getLogger(__name__)


class CreateUserCommand:
    """Command to create a user, its optional profile and its role set.

    Every step runs in one unit of work: either the user, the profile and
    all association rows exist afterwards, or none of them do.
    """

    def __init__(
        self,
        unit_of_work: UnitOfWork,
        password_service: PasswordHasher,
    ):
        self._uow = unit_of_work
        self._password_service = password_service

    async def execute(  # NOQA: PLR0913
        self,
        name: str,
        email: str,
        password: str,
        primary_role_id: UUID | None = None,
        role_ids: Sequence[UUID] | None = None,
        profile: ProfileInput | None = None,
    ) -> UserOperationResult:
        email_obj = Email(email)
        requested_role_ids = unique_ids(role_ids or [])

        async with self._uow as uow:
            if await uow.users.find_by_email(email_obj):
                raise EmailAlreadyExistsError(email_obj.value)

            if primary_role_id is not None:
                await require_role(uow, primary_role_id, "primary")
            if requested_role_ids:
                await require_roles(uow, requested_role_ids)

            password_hash = self._password_service.hash(password)
            user = User.create(
                name=name,
                email=email_obj,
                password_hash=password_hash,
                primary_role_id=primary_role_id,
            )
            await uow.users.save(user)

            if profile is not None:
                await uow.profiles.save(
                    Profile.create(
                        user_id=user.id,
                        bio=profile.value_or_none("bio"),
                        avatar_url=profile.value_or_none("avatar_url"),
                    ),
                )

            for role_id in requested_role_ids:
                await uow.user_roles.add(user.id, role_id)

            details = await load_user_details(uow, user)

        logger.info(
            "Created user %s (%s) with %d role(s)",
            user.id,
            user.email,
            len(requested_role_ids),
        )
        return UserOperationResult(message="User created successfully", user=details)

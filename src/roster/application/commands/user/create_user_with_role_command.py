"""Create a user and a brand-new role for it in one unit of work."""

import logging

from roster.application.commands.payloads import ProfileInput
from roster.application.dtos import RoleSummaryDTO, UserWithRoleResult
from roster.application.ports import PasswordHasher, UnitOfWork
from roster.application.services import load_user_details
from roster.domain.role import Role, RoleNameAlreadyExistsError
from roster.domain.user import Email, EmailAlreadyExistsError, Profile, User

logger = logging.getLogger(__name__)


class CreateUserWithRoleCommand:
    """Command to create a role and a user holding it.

    The new role becomes the user's primary role and is also added to the
    user's role set. A taken email or role name aborts both inserts.
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
        role_name: str,
        role_description: str | None = None,
        profile: ProfileInput | None = None,
    ) -> UserWithRoleResult:
        email_obj = Email(email)

        async with self._uow as uow:
            if await uow.users.find_by_email(email_obj):
                raise EmailAlreadyExistsError(email_obj.value)

            role = Role.create(name=role_name, description=role_description)
            if await uow.roles.find_by_name(role.name):
                raise RoleNameAlreadyExistsError(role.name)
            await uow.roles.save(role)

            user = User.create(
                name=name,
                email=email_obj,
                password_hash=self._password_service.hash(password),
                primary_role_id=role.id,
            )
            await uow.users.save(user)
            await uow.user_roles.add(user.id, role.id)

            if profile is not None:
                await uow.profiles.save(
                    Profile.create(
                        user_id=user.id,
                        bio=profile.value_or_none("bio"),
                        avatar_url=profile.value_or_none("avatar_url"),
                    ),
                )

            details = await load_user_details(uow, user)

        logger.info("Created user %s with new role %s", user.id, role.name)
        return UserWithRoleResult(
            message="User and role created successfully",
            user=details,
            role=RoleSummaryDTO.from_role(role),
        )

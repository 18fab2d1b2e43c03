"""Default data seeding.

Creates the standard roles and an administrator account through the
regular commands, so seeding obeys the same consistency rules as the API.
Running it twice leaves the store unchanged.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from roster.application.commands import CreateRoleCommand, CreateUserCommand
from roster.application.ports import PasswordHasher, UnitOfWork
from roster.domain.role import RoleNameAlreadyExistsError
from roster.domain.user import EmailAlreadyExistsError

logger = logging.getLogger(__name__)

DEFAULT_ROLES: tuple[tuple[str, str], ...] = (
    ("Administrator", "Full access to the system"),
    ("User", "Standard user"),
    ("Moderator", "Can moderate content"),
)
ADMIN_ROLE_NAME = "Administrator"
ADMIN_NAME = "System Administrator"
ADMIN_EMAIL = "admin@example.com"
ADMIN_PASSWORD = "admin123"


@dataclass
class SeedReport:
    created_roles: list[str] = field(default_factory=list)
    existing_roles: list[str] = field(default_factory=list)
    admin_created: bool = False


async def seed_defaults(
    uow_factory: Callable[[], UnitOfWork],
    password_service: PasswordHasher,
    admin_email: str = ADMIN_EMAIL,
    admin_password: str = ADMIN_PASSWORD,
) -> SeedReport:
    report = SeedReport()

    for name, description in DEFAULT_ROLES:
        try:
            await CreateRoleCommand(uow_factory()).execute(name, description)
            report.created_roles.append(name)
        except RoleNameAlreadyExistsError:
            report.existing_roles.append(name)

    async with uow_factory() as uow:
        admin_role = await uow.roles.find_by_name(ADMIN_ROLE_NAME)
    admin_role_id = admin_role.id if admin_role else None

    try:
        await CreateUserCommand(uow_factory(), password_service).execute(
            name=ADMIN_NAME,
            email=admin_email,
            password=admin_password,
            primary_role_id=admin_role_id,
            role_ids=[admin_role_id] if admin_role_id else [],
        )
        report.admin_created = True
    except EmailAlreadyExistsError:
        logger.info("Administrator %s already exists", admin_email)

    logger.info(
        "Seeding finished: %d role(s) created, admin created=%s",
        len(report.created_roles),
        report.admin_created,
    )
    return report

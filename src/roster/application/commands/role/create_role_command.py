import logging

from roster.application.dtos import RoleDTO, RoleOperationResult
from roster.application.ports import UnitOfWork
from roster.domain.role import Role, RoleNameAlreadyExistsError

logger = logging.getLogger(__name__)


class CreateRoleCommand:
    """Command to create a role with a unique name."""

    def __init__(self, unit_of_work: UnitOfWork):
        self._uow = unit_of_work

    async def execute(
        self,
        name: str,
        description: str | None = None,
    ) -> RoleOperationResult:
        role = Role.create(name=name, description=description)

        async with self._uow as uow:
            if await uow.roles.find_by_name(role.name):
                raise RoleNameAlreadyExistsError(role.name)
            await uow.roles.save(role)

        logger.info("Created role %s (%s)", role.id, role.name)
        return RoleOperationResult(
            message="Role created successfully",
            role=RoleDTO.from_role(role),
        )

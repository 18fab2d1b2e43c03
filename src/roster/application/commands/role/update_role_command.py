import logging
from uuid import UUID

from roster.application.commands.payloads import RoleChanges, is_set
from roster.application.dtos import RoleDTO, RoleOperationResult
from roster.application.ports import UnitOfWork
from roster.application.services import require_role
from roster.domain.role import InvalidRoleDataError, RoleNameAlreadyExistsError

logger = logging.getLogger(__name__)


class UpdateRoleCommand:
    """Command to apply a partial update to a role.

    The name cannot be cleared; the description can.
    """

    def __init__(self, unit_of_work: UnitOfWork):
        self._uow = unit_of_work

    async def execute(self, role_id: UUID, changes: RoleChanges) -> RoleOperationResult:
        async with self._uow as uow:
            role = await require_role(uow, role_id)

            if is_set(changes.name):
                if changes.name is None:
                    msg = "Role name cannot be cleared"
                    raise InvalidRoleDataError(msg, field="name")
                if changes.name.strip() != role.name:
                    other = await uow.roles.find_by_name(changes.name)
                    if other is not None and other.id != role.id:
                        raise RoleNameAlreadyExistsError(changes.name.strip())
                    role.rename(changes.name)

            if is_set(changes.description):
                role.describe(changes.description)

            if is_set(changes.is_active):
                if changes.is_active is None:
                    msg = "is_active cannot be cleared"
                    raise InvalidRoleDataError(msg, field="is_active")
                if changes.is_active:
                    role.activate()
                else:
                    role.deactivate()

            await uow.roles.save(role)
            primary_count = await uow.users.count_by_primary_role(role.id)
            assigned_count = await uow.user_roles.count_for_role(role.id)

        logger.info("Updated role %s", role.id)
        return RoleOperationResult(
            message="Role updated successfully",
            role=RoleDTO.from_role(role, primary_count, assigned_count),
        )

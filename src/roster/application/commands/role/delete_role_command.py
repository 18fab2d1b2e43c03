import logging
from uuid import UUID

from roster.application.dtos import RoleDeletionResult
from roster.application.ports import UnitOfWork
from roster.application.services import require_role
from roster.domain.role import RoleInUseError

logger = logging.getLogger(__name__)


class DeleteRoleCommand:
    """Command to delete a role that nobody holds as primary role.

    Association rows of the role are removed first. Roles that are still
    somebody's primary role are refused; use
    DeleteRoleWithReassignmentCommand for those.
    """

    def __init__(self, unit_of_work: UnitOfWork):
        self._uow = unit_of_work

    async def execute(self, role_id: UUID) -> RoleDeletionResult:
        async with self._uow as uow:
            await require_role(uow, role_id)

            primary_count = await uow.users.count_by_primary_role(role_id)
            if primary_count:
                raise RoleInUseError(role_id, primary_count)

            removed = await uow.user_roles.remove_all_for_role(role_id)
            await uow.roles.delete(role_id)

        logger.info("Deleted role %s (%d assignment(s) removed)", role_id, removed)
        return RoleDeletionResult(
            message="Role deleted successfully",
            role_id=role_id,
            affected_users=removed,
        )

import logging
from uuid import UUID

from roster.application.dtos import RoleDeletionResult
from roster.application.ports import UnitOfWork
from roster.application.services import require_role
from roster.domain.role import InvalidReplacementRoleError

logger = logging.getLogger(__name__)


class DeleteRoleWithReassignmentCommand:
    """Command to delete a role, optionally moving its holders elsewhere.

    Steps, all in one unit of work:

    1. every association of the role is moved to the replacement role, or
       removed when no replacement is given
    2. users whose primary role is the deleted role get it cleared
    3. the role row is deleted
    """

    def __init__(self, unit_of_work: UnitOfWork):
        self._uow = unit_of_work

    async def execute(
        self,
        role_id: UUID,
        replacement_role_id: UUID | None = None,
    ) -> RoleDeletionResult:
        async with self._uow as uow:
            role = await require_role(uow, role_id)

            replacement = None
            if replacement_role_id is not None:
                replacement = await require_role(
                    uow,
                    replacement_role_id,
                    "replacement",
                )
                if replacement.id == role.id:
                    raise InvalidReplacementRoleError(role.id)

            holders = await uow.users.list_by_role(role.id)
            for user in holders:
                await uow.user_roles.remove(user.id, role.id)
                if replacement is not None:
                    await uow.user_roles.add(user.id, replacement.id)

            cleared = await uow.users.clear_primary_role(role.id)
            await uow.roles.delete(role.id)

        if replacement is not None:
            message = (
                f"Role '{role.name}' deleted; {len(holders)} user(s) "
                f"reassigned to '{replacement.name}'"
            )
        else:
            message = f"Role '{role.name}' deleted; {len(holders)} user(s) affected"

        logger.info(
            "Deleted role %s with reassignment to %s (%d holder(s), %d primary cleared)",
            role.id,
            replacement.id if replacement else None,
            len(holders),
            cleared,
        )
        return RoleDeletionResult(
            message=message,
            role_id=role.id,
            affected_users=len(holders),
            replacement_role_id=replacement.id if replacement else None,
            primary_references_cleared=cleared,
        )

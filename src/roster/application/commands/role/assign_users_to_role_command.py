import logging
from collections.abc import Sequence
from uuid import UUID

from roster.application.dtos import RoleAssignmentResult, RoleSummaryDTO
from roster.application.ports import UnitOfWork
from roster.application.services import require_role, require_users, unique_ids
from roster.domain.role import EmptyAssignmentError

logger = logging.getLogger(__name__)


class AssignUsersToRoleCommand:
    """Command to give a role to many users at once.

    All listed users must exist, otherwise nothing is assigned. Users that
    already hold the role are left as they are.
    """

    def __init__(self, unit_of_work: UnitOfWork):
        self._uow = unit_of_work

    async def execute(
        self,
        role_id: UUID,
        user_ids: Sequence[UUID],
    ) -> RoleAssignmentResult:
        requested = unique_ids(user_ids)
        if not requested:
            raise EmptyAssignmentError

        async with self._uow as uow:
            role = await require_role(uow, role_id)
            users = await require_users(uow, requested)

            newly_assigned = 0
            for user in users:
                if await uow.user_roles.add(user.id, role.id):
                    newly_assigned += 1

        logger.info(
            "Assigned role %s to %d user(s) (%d new)",
            role.name,
            len(users),
            newly_assigned,
        )
        return RoleAssignmentResult(
            message=f"{len(users)} user(s) assigned to role '{role.name}'",
            role=RoleSummaryDTO.from_role(role),
            assigned_count=len(users),
            newly_assigned_count=newly_assigned,
        )

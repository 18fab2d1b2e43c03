import logging
from uuid import UUID

from roster.application.dtos import RoleSummaryDTO, RoleTransferResult
from roster.application.ports import UnitOfWork
from roster.application.services import require_role
from roster.domain.role import NoUsersToTransferError, SameRoleTransferError

logger = logging.getLogger(__name__)


class TransferUsersBetweenRolesCommand:
    """Command to move every holder of one role over to another role.

    Only the association set is touched; primary roles stay as they are.
    """

    def __init__(self, unit_of_work: UnitOfWork):
        self._uow = unit_of_work

    async def execute(
        self,
        source_role_id: UUID,
        target_role_id: UUID,
    ) -> RoleTransferResult:
        async with self._uow as uow:
            source = await require_role(uow, source_role_id, "source")
            target = await require_role(uow, target_role_id, "target")
            if source.id == target.id:
                raise SameRoleTransferError(source.id)

            holders = await uow.users.list_by_role(source.id)
            if not holders:
                raise NoUsersToTransferError(source.id, source.name)

            for user in holders:
                await uow.user_roles.remove(user.id, source.id)
                await uow.user_roles.add(user.id, target.id)

        logger.info(
            "Transferred %d user(s) from role %s to role %s",
            len(holders),
            source.name,
            target.name,
        )
        return RoleTransferResult(
            message=(
                f"{len(holders)} user(s) transferred from role "
                f"'{source.name}' to role '{target.name}'"
            ),
            source_role=RoleSummaryDTO.from_role(source),
            target_role=RoleSummaryDTO.from_role(target),
            transferred_count=len(holders),
        )

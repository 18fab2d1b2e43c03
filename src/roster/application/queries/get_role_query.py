from uuid import UUID

from roster.application.dtos import RoleDTO
from roster.application.ports import UnitOfWork
from roster.application.services import require_role


class GetRoleQuery:
    """Query for one role with its holder counts."""

    def __init__(self, unit_of_work: UnitOfWork):
        self._uow = unit_of_work

    async def execute(self, role_id: UUID) -> RoleDTO:
        async with self._uow as uow:
            role = await require_role(uow, role_id)
            primary_count = await uow.users.count_by_primary_role(role.id)
            assigned_count = await uow.user_roles.count_for_role(role.id)
        return RoleDTO.from_role(role, primary_count, assigned_count)

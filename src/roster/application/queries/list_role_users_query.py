from uuid import UUID

from roster.application.dtos import RoleSummaryDTO, RoleUsersDTO, UserSummaryDTO
from roster.application.ports import UnitOfWork
from roster.application.services import require_role


class ListRoleUsersQuery:
    """Query for the users attached to a role.

    ``primary_users`` hold the role as primary role, ``assigned_users``
    hold it through the association. A user may appear in both lists.
    """

    def __init__(self, unit_of_work: UnitOfWork):
        self._uow = unit_of_work

    async def execute(self, role_id: UUID) -> RoleUsersDTO:
        async with self._uow as uow:
            role = await require_role(uow, role_id)
            primary = await uow.users.list_by_primary_role(role.id)
            assigned = await uow.users.list_by_role(role.id)

        return RoleUsersDTO(
            role=RoleSummaryDTO.from_role(role),
            primary_users=[UserSummaryDTO.from_user(user) for user in primary],
            assigned_users=[UserSummaryDTO.from_user(user) for user in assigned],
        )

from roster.application.dtos import RoleDTO
from roster.application.ports import UnitOfWork


class ListRolesQuery:
    """Query for all roles, newest first, with holder counts."""

    def __init__(self, unit_of_work: UnitOfWork):
        self._uow = unit_of_work

    async def execute(self) -> list[RoleDTO]:
        async with self._uow as uow:
            roles = await uow.roles.list_all()
            result = []
            for role in roles:
                primary_count = await uow.users.count_by_primary_role(role.id)
                assigned_count = await uow.user_roles.count_for_role(role.id)
                result.append(RoleDTO.from_role(role, primary_count, assigned_count))
        return result

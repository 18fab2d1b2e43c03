from roster.application.dtos import UserDTO
from roster.application.ports import UnitOfWork


class ListUsersQuery:
    """Query for all users, newest first, with primary role expanded."""

    def __init__(self, unit_of_work: UnitOfWork):
        self._uow = unit_of_work

    async def execute(self, is_active: bool | None = None) -> list[UserDTO]:
        async with self._uow as uow:
            users = await uow.users.list_all(is_active=is_active)
            primary_ids = {u.primary_role_id for u in users if u.primary_role_id}
            roles = await uow.roles.find_by_ids(list(primary_ids))

        roles_by_id = {role.id: role for role in roles}
        return [
            UserDTO.from_user(user, roles_by_id.get(user.primary_role_id))
            for user in users
        ]

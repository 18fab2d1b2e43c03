from uuid import UUID

from roster.application.dtos import UserDetailDTO
from roster.application.ports import UnitOfWork
from roster.application.services import load_user_details, require_user


class GetUserQuery:
    """Query for one user with roles and profile expanded."""

    def __init__(self, unit_of_work: UnitOfWork):
        self._uow = unit_of_work

    async def execute(self, user_id: UUID) -> UserDetailDTO:
        async with self._uow as uow:
            user = await require_user(uow, user_id)
            return await load_user_details(uow, user)

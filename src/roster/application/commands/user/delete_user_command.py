import logging
from uuid import UUID

from roster.application.dtos import UserDeletionResult
from roster.application.ports import UnitOfWork
from roster.application.services import require_user

logger = logging.getLogger(__name__)


class DeleteUserCommand:
    """Command to delete a user after removing its profile and role rows."""

    def __init__(self, unit_of_work: UnitOfWork):
        self._uow = unit_of_work

    async def execute(self, user_id: UUID) -> UserDeletionResult:
        async with self._uow as uow:
            await require_user(uow, user_id)

            profile_removed = await uow.profiles.delete_by_user_id(user_id)
            removed_assignments = await uow.user_roles.remove_all_for_user(user_id)
            await uow.users.delete(user_id)

        logger.info(
            "Deleted user %s (%d role assignment(s) removed)",
            user_id,
            removed_assignments,
        )
        return UserDeletionResult(
            message="User deleted successfully",
            user_id=user_id,
            removed_assignments=removed_assignments,
            profile_removed=profile_removed,
        )

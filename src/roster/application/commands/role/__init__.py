from roster.application.commands.role.assign_users_to_role_command import (
    AssignUsersToRoleCommand,
)
from roster.application.commands.role.create_role_command import CreateRoleCommand
from roster.application.commands.role.delete_role_command import DeleteRoleCommand
from roster.application.commands.role.delete_role_with_reassignment_command import (
    DeleteRoleWithReassignmentCommand,
)
from roster.application.commands.role.transfer_users_between_roles_command import (
    TransferUsersBetweenRolesCommand,
)
from roster.application.commands.role.update_role_command import UpdateRoleCommand

__all__ = [
    "AssignUsersToRoleCommand",
    "CreateRoleCommand",
    "DeleteRoleCommand",
    "DeleteRoleWithReassignmentCommand",
    "TransferUsersBetweenRolesCommand",
    "UpdateRoleCommand",
]

"""Application commands (state-changing use cases).

Each command owns one unit of work per execute() call.
"""

from roster.application.commands.payloads import (
    UNSET,
    ProfileInput,
    RoleChanges,
    Unset,
    UserChanges,
    is_set,
)
from roster.application.commands.role import (
    AssignUsersToRoleCommand,
    CreateRoleCommand,
    DeleteRoleCommand,
    DeleteRoleWithReassignmentCommand,
    TransferUsersBetweenRolesCommand,
    UpdateRoleCommand,
)
from roster.application.commands.user import (
    CreateUserCommand,
    CreateUserWithRoleCommand,
    DeleteUserCommand,
    UpdateUserCommand,
)

__all__ = [
    "UNSET",
    "AssignUsersToRoleCommand",
    "CreateRoleCommand",
    "CreateUserCommand",
    "CreateUserWithRoleCommand",
    "DeleteRoleCommand",
    "DeleteRoleWithReassignmentCommand",
    "DeleteUserCommand",
    "ProfileInput",
    "RoleChanges",
    "TransferUsersBetweenRolesCommand",
    "Unset",
    "UpdateRoleCommand",
    "UpdateUserCommand",
    "UserChanges",
    "is_set",
]

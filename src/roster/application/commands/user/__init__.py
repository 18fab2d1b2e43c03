from roster.application.commands.user.create_user_command import CreateUserCommand
from roster.application.commands.user.create_user_with_role_command import (
    CreateUserWithRoleCommand,
)
from roster.application.commands.user.delete_user_command import DeleteUserCommand
from roster.application.commands.user.update_user_command import UpdateUserCommand

__all__ = [
    "CreateUserCommand",
    "CreateUserWithRoleCommand",
    "DeleteUserCommand",
    "UpdateUserCommand",
]

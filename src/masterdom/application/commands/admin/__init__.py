from masterdom.application.commands.admin.delete_user_command import DeleteUserCommand
from masterdom.application.commands.admin.promote_user_command import (
    PromoteUserCommand,
)
from masterdom.application.commands.admin.update_user_command import (
    UpdateUserCommand,
)

__all__ = [
    "DeleteUserCommand",
    "PromoteUserCommand",
    "UpdateUserCommand",
]

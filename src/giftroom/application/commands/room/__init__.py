from giftroom.application.commands.room.delete_user_command import (
    DeleteUserCommand,
    DeleteUserRequest,
)

__all__ = ["DeleteUserCommand", "DeleteUserRequest"]

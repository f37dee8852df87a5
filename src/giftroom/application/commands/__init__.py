"""Command layer - write operations that mutate state.

Commands represent user intentions to change system state. They
orchestrate domain objects and repositories and return ``Result`` values.
"""

from giftroom.application.commands.room import DeleteUserCommand, DeleteUserRequest

__all__ = ["DeleteUserCommand", "DeleteUserRequest"]

"""Application commands for user management."""

from staffhub.application.commands.create_user_command import (
    CreateUserCommand,
    CreateUserCommandHandler,
)

__all__ = [
    "CreateUserCommand",
    "CreateUserCommandHandler",
]

"""Application commands for authentication and credential management."""

from staffhub_auth.application.commands.login_command import (
    LoginCommand,
    LoginCommandHandler,
    LoginResponse,
)
from staffhub_auth.application.commands.recover_password_command import (
    RecoverPasswordCommand,
    RecoverPasswordCommandHandler,
)
from staffhub_auth.application.commands.update_credentials_command import (
    UpdateCredentialsCommand,
    UpdateCredentialsCommandHandler,
)

__all__ = [
    "LoginCommand",
    "LoginCommandHandler",
    "LoginResponse",
    "RecoverPasswordCommand",
    "RecoverPasswordCommandHandler",
    "UpdateCredentialsCommand",
    "UpdateCredentialsCommandHandler",
]

from staffhub.presentation.api.schemas.auth import (
    LoginRequest,
    LoginResponse,
    MessageResponse,
    RecoverPasswordRequest,
    UpdateCredentialsRequest,
)
from staffhub.presentation.api.schemas.users import CreateUserRequest, UserResponse

__all__ = [
    "CreateUserRequest",
    "LoginRequest",
    "LoginResponse",
    "MessageResponse",
    "RecoverPasswordRequest",
    "UpdateCredentialsRequest",
    "UserResponse",
]

"""Authentication schemas for request/response models.

Email and password fields are plain strings on purpose: malformed values
reach the command handlers, which answer with VALIDATION_ERROR (400) or
INVALID_CREDENTIALS (401) instead of a generic 422.
"""

from pydantic import BaseModel, ConfigDict, Field

from staffhub.presentation.api.schemas.users import UserResponse


class LoginRequest(BaseModel):
    """Request schema for user login."""

    email: str = Field(..., max_length=255)
    password: str = Field(..., max_length=1024)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "user@example.com",
                "password": "securepassword123",
            },
        },
    )


class LoginResponse(BaseModel):
    """Response schema for a successful login."""

    user: UserResponse
    access_token: str
    token_type: str = "bearer"  # NOQA: S105
    expires_in: int = Field(..., description="Token lifetime in seconds")


class UpdateCredentialsRequest(BaseModel):
    """Request schema for replacing the caller's email and password."""

    email: str = Field(..., max_length=255)
    password: str = Field(..., max_length=1024)
    current_password: str | None = Field(
        default=None,
        max_length=1024,
        description="Required unless the server disables re-confirmation",
    )


class RecoverPasswordRequest(BaseModel):
    """Request schema for password recovery."""

    email: str = Field(..., max_length=255)


class MessageResponse(BaseModel):
    detail: str

"""Authentication exceptions.

These are the errors carried by ``Failure`` results of the auth command
handlers. They extend the shared domain hierarchy so the presentation
layer can map their codes to HTTP responses.
"""

from staffhub.domain.shared.exceptions import (
    EntityNotFoundError,
    ErrorCode,
    UnauthorizedError,
    ValidationError,
)


class InvalidCredentialsError(UnauthorizedError):
    """Email or password is incorrect."""

    def __init__(self, message: str = "Invalid email or password"):
        super().__init__(message, ErrorCode.INVALID_CREDENTIALS)


class InvalidTokenError(UnauthorizedError):
    """An access token is invalid, expired, or malformed."""

    def __init__(self, message: str = "Invalid or expired token"):
        super().__init__(message, ErrorCode.INVALID_TOKEN)


class CredentialsNotFoundError(EntityNotFoundError):
    """No credentials are registered for the given email or user."""

    def __init__(self, message: str = "Credentials not found"):
        super().__init__(message, ErrorCode.CREDENTIALS_NOT_FOUND)


class WeakPasswordError(ValidationError):
    """A password doesn't meet strength requirements."""

    def __init__(self, message: str = "Password does not meet requirements"):
        super().__init__(message, ErrorCode.WEAK_PASSWORD)

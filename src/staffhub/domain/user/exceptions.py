"""User domain exceptions.

Custom exceptions for the user domain, used for validation
and business rule violations.
"""

from staffhub.domain.shared.exceptions import (
    ConflictError,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)


class InvalidEmailError(ValidationError):
    """Raised when email format is invalid."""

    def __init__(self, message: str) -> None:
        super().__init__(message, ErrorCode.INVALID_EMAIL)


class InvalidUserDataError(ValidationError):
    """Raised when a user profile field (name, phone, role) is malformed."""

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        super().__init__(message, details={"field": field})


class EmailAlreadyInUseError(ConflictError):
    """Email already registered to another account."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(
            f"Email already registered: {email}",
            ErrorCode.EMAIL_ALREADY_IN_USE,
        )


class UserNotFoundError(EntityNotFoundError):
    """User not found."""

    def __init__(self, user_id: str) -> None:
        self.user_id = user_id
        super().__init__(f"User not found: {user_id}", ErrorCode.USER_NOT_FOUND)

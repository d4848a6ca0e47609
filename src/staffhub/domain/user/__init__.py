"""User domain - staff profiles referenced by credentials.

Design notes:
- User ID is a random UUID4 generated at creation (opaque, unpredictable)
- Email is not part of the profile; it belongs to the Credentials record
- Repository interface defined here, implementation in infrastructure
"""

from staffhub.domain.user.aggregates import User
from staffhub.domain.user.exceptions import (
    EmailAlreadyInUseError,
    InvalidEmailError,
    InvalidUserDataError,
    UserNotFoundError,
)
from staffhub.domain.user.repositories import UserRepository
from staffhub.domain.user.value_objects import Email, UserRole, normalize_email

__all__ = [
    "Email",
    "EmailAlreadyInUseError",
    "InvalidEmailError",
    "InvalidUserDataError",
    "User",
    "UserNotFoundError",
    "UserRepository",
    "UserRole",
    "normalize_email",
]

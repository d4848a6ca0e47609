from enum import Enum


class UserRole(str, Enum):
    """Roles a staff member can hold."""

    USER = "user"
    ADMIN = "admin"

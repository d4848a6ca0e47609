"""User repository interface."""

from abc import ABC, abstractmethod
from uuid import UUID

from staffhub.domain.shared.option import Option
from staffhub.domain.user.aggregates.user import User


class UserRepository(ABC):
    """Repository interface for User aggregates."""

    @abstractmethod
    async def get_user_by_id(self, user_id: UUID) -> Option[User]:
        """Find a user by their ID."""

    @abstractmethod
    async def save_user(self, user: User) -> User:
        """Save or update a user."""

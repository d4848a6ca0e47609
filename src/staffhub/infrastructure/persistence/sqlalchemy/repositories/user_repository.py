"""SQLAlchemy implementation of UserRepository."""

import logging
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from staffhub.domain.shared.option import Option, option_of
from staffhub.domain.user import User, UserRepository
from staffhub.infrastructure.persistence.sqlalchemy.models import UserModel

logger = logging.getLogger(__name__)


class UserRepositorySQLAlchemy(UserRepository):
    """SQLAlchemy implementation of the UserRepository interface."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_user_by_id(self, user_id: UUID) -> Option[User]:
        model = await self._find_model_by_id(user_id)
        return option_of(self._map_to_domain(model) if model else None)

    async def save_user(self, user: User) -> User:
        existing = await self._find_model_by_id(user.id)

        if existing:
            self._update_model(existing, user)
            logger.debug("Updated user: %s", user.id)
        else:
            self._session.add(self._map_to_model(user))
            logger.info("Created user: %s", user.id)

        await self._session.flush()
        return user

    async def _find_model_by_id(self, user_id: UUID) -> UserModel | None:
        stmt = select(UserModel).where(UserModel.id == user_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _map_to_domain(self, model: UserModel) -> User:
        return User.reconstitute(
            id=model.id,
            name=model.name,
            phone=model.phone,
            department_id=model.department_id,
            role=model.role,
            active=model.active,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _map_to_model(self, user: User) -> UserModel:
        return UserModel(
            id=user.id,
            name=user.name,
            phone=user.phone,
            department_id=user.department_id,
            role=user.role.value,
            active=user.active,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )

    def _update_model(self, model: UserModel, user: User) -> None:
        model.name = user.name
        model.phone = user.phone
        model.department_id = user.department_id
        model.role = user.role.value
        model.active = user.active
        model.updated_at = user.updated_at

"""SQLAlchemy implementation of CredentialsRepository.

Lookups map rows to immutable Credentials. Updates are issued as a
single UPDATE statement so a concurrent writer can never observe a row
with the new email and the old hash (or the reverse).
"""

import logging
from uuid import UUID

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from staffhub.domain.shared.option import Option, option_of
from staffhub.domain.shared.time import utc_now
from staffhub.domain.user import EmailAlreadyInUseError
from staffhub_auth.exceptions import CredentialsNotFoundError
from staffhub_auth.persistence.sqlalchemy.models import CredentialsModel
from staffhub_auth.repositories import Credentials, CredentialsRepository

logger = logging.getLogger(__name__)


class CredentialsRepositorySQLAlchemy(CredentialsRepository):
    """SQLAlchemy implementation of CredentialsRepository."""

    def __init__(self, session: AsyncSession):
        """Initialize repository with database session.

        Parameters
        ----------
        session
            SQLAlchemy async session
        """
        self._session = session

    def _to_data(self, model: CredentialsModel) -> Credentials:
        """Map SQLAlchemy model to domain data transfer object."""
        return Credentials(
            id=model.id,
            user_id=model.user_id,
            email=model.email,
            password_hash=model.password_hash,
        )

    async def get_credentials_by_email(self, email: str) -> Option[Credentials]:
        stmt = select(CredentialsModel).where(CredentialsModel.email == email)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return option_of(self._to_data(model) if model else None)

    async def get_credentials_by_user_id(self, user_id: UUID) -> Option[Credentials]:
        stmt = select(CredentialsModel).where(CredentialsModel.user_id == user_id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return option_of(self._to_data(model) if model else None)

    async def update_credentials(
        self,
        user_id: UUID,
        email: str,
        password_hash: str,
    ) -> None:
        stmt = (
            update(CredentialsModel)
            .where(CredentialsModel.user_id == user_id)
            .values(email=email, password_hash=password_hash, updated_at=utc_now())
            .execution_options(synchronize_session=False)
        )
        try:
            result = await self._session.execute(stmt)
        except IntegrityError as e:
            raise EmailAlreadyInUseError(email) from e

        if result.rowcount == 0:
            raise CredentialsNotFoundError(f"No credentials for user {user_id}")

        logger.debug("Updated credentials for user: %s", user_id)

    async def add_credentials(self, credentials: Credentials) -> UUID:
        model = CredentialsModel(
            id=credentials.id,
            user_id=credentials.user_id,
            email=credentials.email,
            password_hash=credentials.password_hash,
        )
        self._session.add(model)
        try:
            await self._session.flush()
        except IntegrityError as e:
            raise EmailAlreadyInUseError(credentials.email) from e

        logger.info("Created credentials for user: %s", credentials.user_id)
        return credentials.user_id

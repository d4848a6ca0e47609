"""In-memory repository doubles for handler tests with real services."""

from dataclasses import replace
from uuid import UUID

from staffhub.domain.shared.option import Option, option_of
from staffhub.domain.user import EmailAlreadyInUseError
from staffhub_auth.exceptions import CredentialsNotFoundError
from staffhub_auth.repositories import Credentials, CredentialsRepository


class InMemoryCredentialsRepository(CredentialsRepository):
    """Dict-backed CredentialsRepository keyed by user id."""

    def __init__(self, *credentials: Credentials):
        self.by_user_id: dict[UUID, Credentials] = {c.user_id: c for c in credentials}

    async def get_credentials_by_email(self, email: str) -> Option[Credentials]:
        match = next((c for c in self.by_user_id.values() if c.email == email), None)
        return option_of(match)

    async def get_credentials_by_user_id(self, user_id: UUID) -> Option[Credentials]:
        return option_of(self.by_user_id.get(user_id))

    async def update_credentials(
        self,
        user_id: UUID,
        email: str,
        password_hash: str,
    ) -> None:
        current = self.by_user_id.get(user_id)
        if current is None:
            raise CredentialsNotFoundError(f"No credentials for user {user_id}")
        owner = await self.get_credentials_by_email(email)
        if owner.is_present and owner.value.user_id != user_id:
            raise EmailAlreadyInUseError(email)
        self.by_user_id[user_id] = replace(
            current,
            email=email,
            password_hash=password_hash,
        )

    async def add_credentials(self, credentials: Credentials) -> UUID:
        if (await self.get_credentials_by_email(credentials.email)).is_present:
            raise EmailAlreadyInUseError(credentials.email)
        self.by_user_id[credentials.user_id] = credentials
        return credentials.user_id

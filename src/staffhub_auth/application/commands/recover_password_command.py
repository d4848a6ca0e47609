import asyncio
import logging
from collections.abc import Callable
from dataclasses import dataclass

from staffhub.domain.shared.exceptions import InfrastructureError
from staffhub.domain.shared.option import Absent
from staffhub.domain.shared.result import Failure, Result, Success
from staffhub.domain.user import normalize_email
from staffhub_auth.exceptions import CredentialsNotFoundError
from staffhub_auth.repositories import Credentials, CredentialsRepository
from staffhub_auth.services import (
    CryptoService,
    NotificationService,
    generate_temporary_password,
)

logger = logging.getLogger(__name__)

RECOVERY_SUBJECT = "Password Recovery - StaffHub"

RECOVERY_BODY = """Hello,

A password recovery was requested for your StaffHub account.

Your new temporary password is:

    {password}

Sign in with it and change it right away under your account settings.

If you didn't request this, contact your administrator.

-- StaffHub
"""


@dataclass(frozen=True)
class RecoverPasswordCommand:
    email: str


class RecoverPasswordCommandHandler:
    """Command to replace a forgotten password with an emailed temporary one."""

    def __init__(
        self,
        credentials_repository: CredentialsRepository,
        crypto_service: CryptoService,
        notification_service: NotificationService,
        password_factory: Callable[[], str] = generate_temporary_password,
    ):
        self._credentials_repo = credentials_repository
        self._crypto_service = crypto_service
        self._notification_service = notification_service
        self._password_factory = password_factory

    async def execute(self, command: RecoverPasswordCommand) -> Result[None]:
        email = normalize_email(command.email)
        try:
            lookup = await self._credentials_repo.get_credentials_by_email(email)
        except Exception as e:
            logger.exception("Credentials lookup failed during password recovery")
            return Failure(InfrastructureError(details={"cause": repr(e)}))

        if isinstance(lookup, Absent):
            logger.info("Password recovery requested for unknown email: %s", email)
            return Failure(CredentialsNotFoundError(f"No account for email {email}"))
        credentials = lookup.value

        hash_replaced = False
        try:
            temporary_password = self._password_factory()
            new_hash = await self._crypto_service.hash(temporary_password)
            await self._credentials_repo.update_credentials(
                credentials.user_id,
                credentials.email,
                new_hash,
            )
            hash_replaced = True
            await asyncio.to_thread(
                self._notification_service.send,
                to_email=credentials.email,
                subject=RECOVERY_SUBJECT,
                body=RECOVERY_BODY.format(password=temporary_password),
            )
        except Exception as e:
            logger.exception("Password recovery failed for user %s", credentials.user_id)
            if hash_replaced:
                await self._restore_password_hash(credentials)
            return Failure(InfrastructureError(details={"cause": repr(e)}))

        logger.info("Password recovered for user: %s", credentials.user_id)
        return Success(None)

    async def _restore_password_hash(self, credentials: Credentials) -> None:
        """Put the previous hash back when the temporary password was not delivered."""
        try:
            await self._credentials_repo.update_credentials(
                credentials.user_id,
                credentials.email,
                credentials.password_hash,
            )
        except Exception:
            logger.exception(
                "Could not restore password hash for user %s",
                credentials.user_id,
            )

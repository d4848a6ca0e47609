import logging
from dataclasses import dataclass, field
from uuid import UUID

from staffhub.domain.shared.option import Absent, Present
from staffhub.domain.shared.result import Failure, Result, Success
from staffhub.domain.user import EmailAlreadyInUseError
from staffhub_auth.application.verification import verify_password
from staffhub_auth.exceptions import CredentialsNotFoundError, InvalidCredentialsError
from staffhub_auth.repositories import CredentialsRepository
from staffhub_auth.services import CredentialsValidator, CryptoService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UpdateCredentialsCommand:
    user_id: UUID
    email: str
    password: str = field(repr=False)
    current_password: str | None = field(default=None, repr=False)


class UpdateCredentialsCommandHandler:
    """Command to replace a user's login email and password.

    The caller must already be authenticated as ``user_id``. When
    ``require_current_password`` is set, the current password must also be
    supplied and match before anything is written.
    """

    def __init__(
        self,
        credentials_repository: CredentialsRepository,
        crypto_service: CryptoService,
        validator: CredentialsValidator,
        require_current_password: bool = True,
    ):
        self._credentials_repo = credentials_repository
        self._crypto_service = crypto_service
        self._validator = validator
        self._require_current_password = require_current_password

    async def execute(self, command: UpdateCredentialsCommand) -> Result[None]:
        lookup = await self._credentials_repo.get_credentials_by_user_id(
            command.user_id,
        )
        if isinstance(lookup, Absent):
            return Failure(
                CredentialsNotFoundError(f"No credentials for user {command.user_id}"),
            )
        credentials = lookup.value

        validated = self._validator.validate(command.email, command.password)
        if isinstance(validated, Failure):
            return validated
        new_email = validated.value

        if self._require_current_password:
            if not command.current_password:
                return Failure(InvalidCredentialsError("Current password is required"))
            verified = await verify_password(
                self._crypto_service,
                lookup,
                command.current_password,
            )
            if isinstance(verified, Failure):
                return Failure(InvalidCredentialsError("Current password is incorrect"))

        if new_email != credentials.email:
            owner = await self._credentials_repo.get_credentials_by_email(new_email)
            if isinstance(owner, Present) and owner.value.user_id != command.user_id:
                return Failure(EmailAlreadyInUseError(new_email))

        new_hash = await self._crypto_service.hash(command.password)
        try:
            await self._credentials_repo.update_credentials(
                command.user_id,
                new_email,
                new_hash,
            )
        except EmailAlreadyInUseError as e:
            return Failure(e)

        logger.info("Credentials updated for user: %s", command.user_id)
        return Success(None)

import logging
from dataclasses import dataclass, field

from staffhub.domain.shared.option import Absent
from staffhub.domain.shared.result import Failure, Result, Success
from staffhub.domain.user import User, UserRepository, normalize_email
from staffhub_auth.application.verification import verify_password
from staffhub_auth.exceptions import InvalidCredentialsError
from staffhub_auth.repositories import CredentialsRepository
from staffhub_auth.services import CryptoService, TokenAuthenticationService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoginCommand:
    email: str
    password: str = field(repr=False)


@dataclass(frozen=True)
class LoginResponse:
    user: User
    access_token: str = field(repr=False)
    expires_in_seconds: int


class LoginCommandHandler:
    """Command to authenticate a user with email and password."""

    def __init__(
        self,
        credentials_repository: CredentialsRepository,
        user_repository: UserRepository,
        crypto_service: CryptoService,
        token_service: TokenAuthenticationService,
    ):
        self._credentials_repo = credentials_repository
        self._user_repo = user_repository
        self._crypto_service = crypto_service
        self._token_service = token_service

    async def execute(self, command: LoginCommand) -> Result[LoginResponse]:
        email = normalize_email(command.email)
        lookup = await self._credentials_repo.get_credentials_by_email(email)

        verified = await verify_password(self._crypto_service, lookup, command.password)
        if isinstance(verified, Failure):
            logger.info("Login rejected for %s", email)
            return verified
        credentials = verified.value

        user = await self._user_repo.get_user_by_id(credentials.user_id)
        if isinstance(user, Absent):
            logger.warning(
                "Credentials %s reference missing user %s",
                credentials.id,
                credentials.user_id,
            )
            return Failure(InvalidCredentialsError())

        token = self._token_service.authenticate(
            subject=str(credentials.user_id),
            email=credentials.email,
        )

        logger.info("User logged in: %s", email)
        return Success(
            LoginResponse(
                user=user.value,
                access_token=token.access_token,
                expires_in_seconds=token.expires_in_seconds,
            ),
        )

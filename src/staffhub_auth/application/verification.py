"""Password verification shared by the auth command handlers."""

from staffhub.domain.shared.option import Absent, Option
from staffhub.domain.shared.result import Failure, Result, Success
from staffhub_auth.exceptions import InvalidCredentialsError
from staffhub_auth.repositories import Credentials
from staffhub_auth.services import CryptoService


async def verify_password(
    crypto_service: CryptoService,
    credentials: Option[Credentials],
    password: str,
) -> Result[Credentials]:
    """Check a plaintext password against looked-up credentials.

    Missing credentials fail without touching the crypto service, so no
    hashing work is spent on unknown accounts. Both failure paths return
    the same error, which does not reveal whether the account exists.
    """
    if isinstance(credentials, Absent):
        return Failure(InvalidCredentialsError())

    matched = await crypto_service.compare(password, credentials.value.password_hash)
    if not matched:
        return Failure(InvalidCredentialsError())

    return Success(credentials.value)

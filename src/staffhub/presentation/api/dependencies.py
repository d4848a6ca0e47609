"""FastAPI dependency injection for the StaffHub API.

Provides dependencies for:
- Database sessions
- Crypto, token, validation and notification services
- Command handlers wired to SQLAlchemy repositories
- Authentication (token payload from the Authorization header)
"""

import logging
from functools import lru_cache
from typing import Annotated, AsyncGenerator

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from staffhub.application.commands import CreateUserCommandHandler
from staffhub.infrastructure.email import EmailNotificationService
from staffhub.infrastructure.persistence.sqlalchemy import (
    DepartmentRepositorySQLAlchemy,
    UserRepositorySQLAlchemy,
)
from staffhub_auth import (
    BcryptCryptoService,
    CredentialsValidator,
    CryptoService,
    InvalidTokenError,
    JWTTokenAuthenticationService,
    NotificationService,
    TokenAuthenticationService,
    TokenPayload,
)
from staffhub_auth.application.commands import (
    LoginCommandHandler,
    RecoverPasswordCommandHandler,
    UpdateCredentialsCommandHandler,
)
from staffhub_auth.persistence.sqlalchemy import CredentialsRepositorySQLAlchemy
from staffhub_auth.services import generate_temporary_password
from staffhub_config.settings import Settings, get_settings

logger = logging.getLogger(__name__)

# Security scheme for Bearer tokens
security = HTTPBearer(auto_error=False)

SettingsDep = Annotated[Settings, Depends(get_settings)]


# -----------------------------------------------------------------------------
# Database Engine & Session (Singleton)
# -----------------------------------------------------------------------------


@lru_cache(maxsize=1)
def get_engine() -> AsyncEngine:
    """
    Get the shared async database engine (singleton).

    The engine manages the connection pool and is reused across all requests.

    Returns
    -------
    AsyncEngine instance
    """
    return create_async_engine(
        get_settings().database_url,
        echo=False,
        pool_pre_ping=True,  # Verify connections before use
    )


@lru_cache(maxsize=1)
def get_session_maker() -> async_sessionmaker[AsyncSession]:
    """
    Get the shared async session maker (singleton).

    Returns
    -------
    async_sessionmaker configured with the shared engine
    """
    return async_sessionmaker(
        get_engine(),
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Database session dependency.

    Creates an async session for the request using the shared engine/pool.

    Yields
    ------
    AsyncSession for database operations
    """
    async with get_session_maker()() as session:
        yield session


# Type alias for injected session
DBSession = Annotated[AsyncSession, Depends(get_db_session)]


# -----------------------------------------------------------------------------
# Services
# -----------------------------------------------------------------------------


def get_crypto_service(settings: SettingsDep) -> CryptoService:
    """Get the bcrypt crypto service configured with the work factor."""
    return BcryptCryptoService(rounds=settings.bcrypt_rounds)


def get_token_service(settings: SettingsDep) -> TokenAuthenticationService:
    """Get the JWT token service configured with API settings."""
    return JWTTokenAuthenticationService(
        secret_key=settings.jwt_secret_key.get_secret_value(),
        expires_in_seconds=settings.jwt_access_token_expire_seconds,
    )


def get_credentials_validator(settings: SettingsDep) -> CredentialsValidator:
    return CredentialsValidator(
        min_length=settings.password_min_length,
        max_length=settings.password_max_length,
    )


def get_notification_service(settings: SettingsDep) -> NotificationService:
    return EmailNotificationService(settings)


CryptoServiceDep = Annotated[CryptoService, Depends(get_crypto_service)]
TokenServiceDep = Annotated[TokenAuthenticationService, Depends(get_token_service)]
ValidatorDep = Annotated[CredentialsValidator, Depends(get_credentials_validator)]
NotificationDep = Annotated[NotificationService, Depends(get_notification_service)]


# -----------------------------------------------------------------------------
# Command Handlers
# -----------------------------------------------------------------------------


def get_login_handler(
    session: DBSession,
    crypto_service: CryptoServiceDep,
    token_service: TokenServiceDep,
) -> LoginCommandHandler:
    return LoginCommandHandler(
        credentials_repository=CredentialsRepositorySQLAlchemy(session),
        user_repository=UserRepositorySQLAlchemy(session),
        crypto_service=crypto_service,
        token_service=token_service,
    )


def get_update_credentials_handler(
    session: DBSession,
    crypto_service: CryptoServiceDep,
    validator: ValidatorDep,
    settings: SettingsDep,
) -> UpdateCredentialsCommandHandler:
    return UpdateCredentialsCommandHandler(
        credentials_repository=CredentialsRepositorySQLAlchemy(session),
        crypto_service=crypto_service,
        validator=validator,
        require_current_password=settings.credentials_require_current_password,
    )


def get_recover_password_handler(
    session: DBSession,
    crypto_service: CryptoServiceDep,
    notification_service: NotificationDep,
    settings: SettingsDep,
) -> RecoverPasswordCommandHandler:
    length = settings.recovery_password_length
    return RecoverPasswordCommandHandler(
        credentials_repository=CredentialsRepositorySQLAlchemy(session),
        crypto_service=crypto_service,
        notification_service=notification_service,
        password_factory=lambda: generate_temporary_password(length),
    )


def get_create_user_handler(
    session: DBSession,
    crypto_service: CryptoServiceDep,
    validator: ValidatorDep,
) -> CreateUserCommandHandler:
    return CreateUserCommandHandler(
        user_repository=UserRepositorySQLAlchemy(session),
        department_repository=DepartmentRepositorySQLAlchemy(session),
        credentials_repository=CredentialsRepositorySQLAlchemy(session),
        crypto_service=crypto_service,
        validator=validator,
    )


LoginHandler = Annotated[LoginCommandHandler, Depends(get_login_handler)]
UpdateCredentialsHandler = Annotated[
    UpdateCredentialsCommandHandler,
    Depends(get_update_credentials_handler),
]
RecoverPasswordHandler = Annotated[
    RecoverPasswordCommandHandler,
    Depends(get_recover_password_handler),
]
CreateUserHandler = Annotated[CreateUserCommandHandler, Depends(get_create_user_handler)]


# -----------------------------------------------------------------------------
# Current Token (Bearer Authentication)
# -----------------------------------------------------------------------------


def get_current_token(
    token_service: TokenServiceDep,
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
) -> TokenPayload:
    """
    FastAPI dependency returning the verified payload of the bearer token.

    Raises
    ------
    HTTPException
        401 if the token is missing, invalid, or expired
    """
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
            headers={"WWW-Authenticate": "Bearer"},
        )

    try:
        return token_service.verify_token(credentials.credentials)
    except InvalidTokenError as e:
        logger.warning("Invalid token: %s", e)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
            headers={"WWW-Authenticate": "Bearer"},
        ) from e


# Type alias for the authenticated caller
CurrentToken = Annotated[TokenPayload, Depends(get_current_token)]

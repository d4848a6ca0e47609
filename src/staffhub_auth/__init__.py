"""StaffHub Auth - login, credential updates and password recovery.

Architecture:
    staffhub_auth/
    ├── application/        # Command handlers (login, update, recover)
    ├── services/           # Crypto, tokens, validation, notification port
    ├── repositories/       # Abstract interfaces
    ├── persistence/        # Implementations by technology
    │   └── sqlalchemy/     # SQLAlchemy implementation
    ├── schemas.py          # Data classes
    └── exceptions.py       # Auth exceptions

Every command handler returns a ``Result``; expected outcomes such as a
wrong password come back as ``Failure`` rather than being raised.
"""

from staffhub_auth.exceptions import (
    CredentialsNotFoundError,
    InvalidCredentialsError,
    InvalidTokenError,
    WeakPasswordError,
)
from staffhub_auth.repositories import Credentials, CredentialsRepository
from staffhub_auth.schemas import TokenPayload, TokenResponse
from staffhub_auth.services import (
    BcryptCryptoService,
    CredentialsValidator,
    CryptoService,
    JWTTokenAuthenticationService,
    NotificationService,
    TokenAuthenticationService,
)

__all__ = [
    # Services
    "BcryptCryptoService",
    "CredentialsValidator",
    "CryptoService",
    "JWTTokenAuthenticationService",
    "NotificationService",
    "TokenAuthenticationService",
    # Repositories (interfaces)
    "Credentials",
    "CredentialsRepository",
    # Schemas
    "TokenPayload",
    "TokenResponse",
    # Exceptions
    "CredentialsNotFoundError",
    "InvalidCredentialsError",
    "InvalidTokenError",
    "WeakPasswordError",
]

"""Authentication services.

Provides password hashing, access tokens, credential validation and the
notification port used by password recovery.
"""

from staffhub_auth.services.credentials_validator import CredentialsValidator
from staffhub_auth.services.crypto_service import BcryptCryptoService, CryptoService
from staffhub_auth.services.notification_service import NotificationService
from staffhub_auth.services.password_generator import generate_temporary_password
from staffhub_auth.services.token_service import (
    JWTTokenAuthenticationService,
    TokenAuthenticationService,
)

__all__ = [
    "BcryptCryptoService",
    "CredentialsValidator",
    "CryptoService",
    "JWTTokenAuthenticationService",
    "NotificationService",
    "TokenAuthenticationService",
    "generate_temporary_password",
]

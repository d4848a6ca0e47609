"""Repository interfaces for staffhub_auth."""

from staffhub_auth.repositories.credentials_repository import (
    Credentials,
    CredentialsRepository,
)

__all__ = [
    "Credentials",
    "CredentialsRepository",
]

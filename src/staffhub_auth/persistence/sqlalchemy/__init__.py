"""SQLAlchemy implementation for staffhub_auth persistence.

Provides:
- AuthBase: Declarative base for auth models (shared metadata)
- CredentialsModel: SQLAlchemy model for credentials
- CredentialsRepositorySQLAlchemy: Repository implementation
"""

from staffhub_auth.persistence.sqlalchemy.base import AuthBase
from staffhub_auth.persistence.sqlalchemy.models import CredentialsModel
from staffhub_auth.persistence.sqlalchemy.repositories import (
    CredentialsRepositorySQLAlchemy,
)

__all__ = [
    "AuthBase",
    "CredentialsModel",
    "CredentialsRepositorySQLAlchemy",
]

from staffhub_auth.persistence.sqlalchemy.repositories.credentials_repository import (
    CredentialsRepositorySQLAlchemy,
)

__all__ = ["CredentialsRepositorySQLAlchemy"]

from staffhub_auth.persistence.sqlalchemy.models.credentials_model import (
    CredentialsModel,
)

__all__ = ["CredentialsModel"]

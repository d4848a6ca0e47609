"""SQLAlchemy persistence for the staffhub domain.

Provides:
- Base: Declarative base shared by all models (including staffhub_auth)
- UserModel / DepartmentModel: SQLAlchemy models
- UserRepositorySQLAlchemy / DepartmentRepositorySQLAlchemy: repositories
"""

from staffhub.infrastructure.persistence.sqlalchemy.models import (
    Base,
    DepartmentModel,
    UserModel,
)
from staffhub.infrastructure.persistence.sqlalchemy.repositories import (
    DepartmentRepositorySQLAlchemy,
    UserRepositorySQLAlchemy,
)

__all__ = [
    "Base",
    "DepartmentModel",
    "DepartmentRepositorySQLAlchemy",
    "UserModel",
    "UserRepositorySQLAlchemy",
]

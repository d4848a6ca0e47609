from staffhub.infrastructure.persistence.sqlalchemy.repositories.department_repository import (  # noqa: E501
    DepartmentRepositorySQLAlchemy,
)
from staffhub.infrastructure.persistence.sqlalchemy.repositories.user_repository import (
    UserRepositorySQLAlchemy,
)

__all__ = [
    "DepartmentRepositorySQLAlchemy",
    "UserRepositorySQLAlchemy",
]

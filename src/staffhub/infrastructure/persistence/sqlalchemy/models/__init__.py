from staffhub.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)
from staffhub.infrastructure.persistence.sqlalchemy.models.department_model import (
    DepartmentModel,
)
from staffhub.infrastructure.persistence.sqlalchemy.models.user_model import UserModel

__all__ = [
    "Base",
    "DepartmentModel",
    "TimestampMixin",
    "UserModel",
]

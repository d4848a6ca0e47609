"""Department domain (only what account creation needs)."""

from staffhub.domain.department.department import Department
from staffhub.domain.department.department_repository import DepartmentRepository
from staffhub.domain.department.exceptions import DepartmentNotFoundError

__all__ = [
    "Department",
    "DepartmentNotFoundError",
    "DepartmentRepository",
]

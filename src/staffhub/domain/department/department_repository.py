"""Department repository interface."""

from abc import ABC, abstractmethod
from uuid import UUID

from staffhub.domain.department.department import Department
from staffhub.domain.shared.option import Option


class DepartmentRepository(ABC):
    """Repository interface for departments."""

    @abstractmethod
    async def get_department_by_id(self, department_id: UUID) -> Option[Department]:
        """Find a department by its ID."""

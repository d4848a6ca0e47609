"""SQLAlchemy implementation of DepartmentRepository."""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from staffhub.domain.department import Department, DepartmentRepository
from staffhub.domain.shared.option import Absent, Option, Present
from staffhub.infrastructure.persistence.sqlalchemy.models import DepartmentModel


class DepartmentRepositorySQLAlchemy(DepartmentRepository):
    """SQLAlchemy implementation of the DepartmentRepository interface."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_department_by_id(self, department_id: UUID) -> Option[Department]:
        stmt = select(DepartmentModel).where(DepartmentModel.id == department_id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return Absent()

        return Present(Department(id=model.id, name=model.name))

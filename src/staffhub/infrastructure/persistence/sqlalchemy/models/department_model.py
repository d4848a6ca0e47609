"""SQLAlchemy model for departments."""

from uuid import UUID

from sqlalchemy import String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from staffhub.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)


class DepartmentModel(Base, TimestampMixin):
    """SQLAlchemy model for persisting departments."""

    __tablename__ = "departments"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    name: Mapped[str] = mapped_column(String(120), nullable=False)

    def __repr__(self) -> str:
        return f"<DepartmentModel(id={self.id}, name={self.name})>"

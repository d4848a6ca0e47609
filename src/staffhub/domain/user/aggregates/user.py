"""User aggregate."""

from datetime import datetime
from typing import Union
from uuid import UUID, uuid4

from staffhub.domain.shared.time import utc_now
from staffhub.domain.user.value_objects import UserRole


class User:
    """
    User aggregate root.

    Holds the staff profile only. Login identity (email and password hash)
    lives in a separate Credentials record that references the user by id.
    """

    def __init__(  # noqa: PLR0913
        self,
        name: str,
        phone: str,
        department_id: UUID,
        role: Union[str, UserRole] = UserRole.USER,
        active: bool = True,
        id: UUID | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ):
        self._id = id or uuid4()
        self._name = name
        self._phone = phone
        self._department_id = department_id
        self._role = role if isinstance(role, UserRole) else UserRole(role)
        self._active = active
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or utc_now()

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def phone(self) -> str:
        return self._phone

    @property
    def department_id(self) -> UUID:
        return self._department_id

    @property
    def role(self) -> UserRole:
        return self._role

    @property
    def is_admin(self) -> bool:
        return self._role == UserRole.ADMIN

    @property
    def active(self) -> bool:
        return self._active

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def deactivate(self) -> None:
        self._active = False
        self._updated_at = utc_now()

    @classmethod
    def create(  # noqa: PLR0913
        cls,
        name: str,
        phone: str,
        department_id: UUID,
        role: UserRole = UserRole.USER,
        id: UUID | None = None,
    ) -> "User":
        return cls(
            id=id,
            name=name,
            phone=phone,
            department_id=department_id,
            role=role,
        )

    @classmethod
    def reconstitute(  # noqa: PLR0913
        cls,
        id: UUID,
        name: str,
        phone: str,
        department_id: UUID,
        role: Union[str, UserRole],
        active: bool,
        created_at: datetime,
        updated_at: datetime,
    ) -> "User":
        return cls(
            id=id,
            name=name,
            phone=phone,
            department_id=department_id,
            role=role,
            active=active,
            created_at=created_at,
            updated_at=updated_at,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"User(id={self._id}, name={self._name!r})"

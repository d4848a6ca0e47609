"""User schemas for request/response models."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from staffhub.domain.user import User


class UserResponse(BaseModel):
    """Public representation of a user profile."""

    id: UUID
    name: str
    phone: str
    role: str
    department_id: UUID
    active: bool
    created_at: datetime

    @classmethod
    def from_domain(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id,
            name=user.name,
            phone=user.phone,
            role=user.role.value,
            department_id=user.department_id,
            active=user.active,
            created_at=user.created_at,
        )


class CreateUserRequest(BaseModel):
    """Request schema for creating a user with login credentials."""

    name: str = Field(..., max_length=255)
    phone: str = Field(..., max_length=32)
    role: str = Field(default="user", max_length=20)
    department_id: UUID
    email: str = Field(..., max_length=255)
    password: str = Field(..., max_length=1024)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Test User",
                "phone": "+584242374999",
                "role": "admin",
                "department_id": "5fb9be1e-37a6-457b-8719-6a832185b5d3",
                "email": "testuser@example.com",
                "password": "securepassword123",
            },
        },
    )

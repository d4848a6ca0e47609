"""SQLAlchemy model for login credentials.

This model stores the login email and password hash of a user.
"""

from uuid import UUID

from sqlalchemy import ForeignKey, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from staffhub.infrastructure.persistence.sqlalchemy.models.base import TimestampMixin
from staffhub_auth.persistence.sqlalchemy.base import AuthBase


class CredentialsModel(AuthBase, TimestampMixin):
    """
    SQLAlchemy model for login credentials.

    Stored separately from the User profile. Each user has exactly one
    credentials record and each email belongs to at most one record;
    both are enforced by unique indexes.

    Table: credentials
    """

    __tablename__ = "credentials"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)

    user_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        unique=True,
        nullable=False,
        index=True,
    )

    # Normalized (lower-case) login email
    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
    )

    # Password hash (bcrypt format, ~60 chars)
    password_hash: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<CredentialsModel(id={self.id}, user_id={self.user_id})>"

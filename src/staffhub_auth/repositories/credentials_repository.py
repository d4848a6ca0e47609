"""Abstract repository interface for login credentials.

This interface defines the contract for credential persistence.
Implementations can use SQLAlchemy, MongoDB, or any other storage.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from uuid import UUID

from staffhub.domain.shared.option import Option


@dataclass(frozen=True)
class Credentials:
    """Immutable login identity of a user.

    The email is unique across all credentials. The password hash is
    opaque and only ever checked through a CryptoService.
    """

    id: UUID
    user_id: UUID
    email: str
    password_hash: str

    def __repr__(self) -> str:
        return f"Credentials(id={self.id}, user_id={self.user_id}, email={self.email!r})"


class CredentialsRepository(ABC):
    """
    Abstract repository interface for user login credentials.

    Lookups return ``Absent()`` when nothing matches; infrastructure faults
    are raised. ``update_credentials`` must replace email and hash of a
    record in one atomic write.
    """

    @abstractmethod
    async def get_credentials_by_email(self, email: str) -> Option[Credentials]:
        """
        Find credentials by their (normalized) email.

        Parameters
        ----------
        email
            The login email

        Returns
        -------
        Present credentials if found, Absent otherwise
        """

    @abstractmethod
    async def get_credentials_by_user_id(self, user_id: UUID) -> Option[Credentials]:
        """
        Find credentials by the owning user's ID.

        Parameters
        ----------
        user_id
            The user's unique identifier

        Returns
        -------
        Present credentials if found, Absent otherwise
        """

    @abstractmethod
    async def update_credentials(
        self,
        user_id: UUID,
        email: str,
        password_hash: str,
    ) -> None:
        """
        Replace the email and password hash of a user's credentials.

        Parameters
        ----------
        user_id
            The user's unique identifier
        email
            The new (normalized) login email
        password_hash
            The new password hash

        Raises
        ------
        EmailAlreadyInUseError
            If another record already owns ``email``
        """

    @abstractmethod
    async def add_credentials(self, credentials: Credentials) -> UUID:
        """
        Store credentials for a newly created user.

        Parameters
        ----------
        credentials
            The credentials to store

        Returns
        -------
        The user id the credentials belong to

        Raises
        ------
        EmailAlreadyInUseError
            If another record already owns the email
        """

"""Auth schemas and data structures.

These are simple data classes used for transferring token data
between components.
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class TokenResponse:
    """An issued access token.

    Attributes
    ----------
    access_token
        Opaque token string handed to the client
    expires_in_seconds
        Lifetime of the token from the moment it was issued
    """

    access_token: str
    expires_in_seconds: int


@dataclass(frozen=True)
class TokenPayload:
    """Decoded access token payload.

    This represents the data extracted from a verified token.

    Attributes
    ----------
    user_id
        The unique identifier of the user (token subject)
    email
        The login email the token was issued for
    exp
        Token expiration timestamp
    """

    user_id: UUID
    email: str
    exp: datetime

    def is_expired(self) -> bool:
        """Check if the token has expired."""
        return datetime.now(tz=self.exp.tzinfo) > self.exp

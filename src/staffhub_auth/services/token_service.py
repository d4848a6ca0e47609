"""Access token issuance and verification.

Tokens are opaque to the rest of the system: callers only see a string
and its lifetime in seconds.
"""

from abc import ABC, abstractmethod
from datetime import datetime, timedelta, timezone
from uuid import UUID

import jwt

from staffhub_auth.exceptions import InvalidTokenError
from staffhub_auth.schemas import TokenPayload, TokenResponse


class TokenAuthenticationService(ABC):
    """Issues and verifies short-lived access tokens."""

    @abstractmethod
    def authenticate(self, subject: str, email: str) -> TokenResponse:
        """Issue an access token for an authenticated subject."""

    @abstractmethod
    def verify_token(self, token: str) -> TokenPayload:
        """Decode a token, raising InvalidTokenError if it is not valid."""


class JWTTokenAuthenticationService(TokenAuthenticationService):
    """JWT implementation of TokenAuthenticationService.

    Examples
    --------
    >>> service = JWTTokenAuthenticationService(secret_key="your-secret-key")
    >>> token = service.authenticate(str(user_id), "user@example.com")
    >>> payload = service.verify_token(token.access_token)
    >>> print(payload.user_id)
    """

    DEFAULT_EXPIRE_SECONDS = 3600
    ALGORITHM = "HS256"

    def __init__(
        self,
        secret_key: str,
        expires_in_seconds: int = DEFAULT_EXPIRE_SECONDS,
    ):
        """Initialize the JWT service.

        Parameters
        ----------
        secret_key
            Secret key for signing tokens. Must be kept secure.
        expires_in_seconds
            Lifetime of issued access tokens (default one hour)
        """
        if not secret_key:
            msg = "JWT secret key cannot be empty"
            raise ValueError(msg)
        if expires_in_seconds <= 0:
            msg = "Token lifetime must be positive"
            raise ValueError(msg)

        self._secret_key = secret_key
        self._expires_in_seconds = expires_in_seconds

    def authenticate(self, subject: str, email: str) -> TokenResponse:
        """Create a signed access token.

        Parameters
        ----------
        subject
            The user's unique identifier (``sub`` claim)
        email
            The login email

        Returns
        -------
        TokenResponse with the encoded token and its lifetime
        """
        now = datetime.now(tz=timezone.utc)
        payload = {
            "sub": subject,
            "email": email,
            "iat": now,
            "exp": now + timedelta(seconds=self._expires_in_seconds),
        }
        token = jwt.encode(payload, self._secret_key, algorithm=self.ALGORITHM)
        return TokenResponse(
            access_token=token,
            expires_in_seconds=self._expires_in_seconds,
        )

    def verify_token(self, token: str) -> TokenPayload:
        """Verify and decode a JWT token.

        Parameters
        ----------
        token
            The JWT token string to verify

        Returns
        -------
        TokenPayload containing the decoded data

        Raises
        ------
        InvalidTokenError
            If token is invalid, expired, or malformed
        """
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self.ALGORITHM],
            )

            return TokenPayload(
                user_id=UUID(payload["sub"]),
                email=payload["email"],
                exp=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
            )

        except jwt.ExpiredSignatureError as e:
            raise InvalidTokenError("Token has expired") from e
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(f"Invalid token: {e}") from e
        except (KeyError, ValueError) as e:
            raise InvalidTokenError(f"Malformed token payload: {e}") from e

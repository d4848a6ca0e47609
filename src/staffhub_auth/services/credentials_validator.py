"""Format and strength checks for new credentials."""

from staffhub.domain.shared.result import Failure, Result, Success
from staffhub.domain.user import Email, InvalidEmailError
from staffhub_auth.exceptions import WeakPasswordError


class CredentialsValidator:
    """Validates an email/password pair before it is stored.

    Returns the normalized email on success. Nothing is raised for bad
    input; the offending field comes back as a ``Failure``.
    """

    MIN_LENGTH = 8
    MAX_LENGTH = 128

    def __init__(self, min_length: int = MIN_LENGTH, max_length: int = MAX_LENGTH):
        self._min_length = min_length
        self._max_length = max_length

    def validate(self, email: str, password: str) -> Result[str]:
        try:
            normalized = Email(email).value
        except InvalidEmailError as e:
            return Failure(e)

        weak = self.check_password_strength(password)
        if weak is not None:
            return Failure(weak)

        return Success(normalized)

    def check_password_strength(self, password: str) -> WeakPasswordError | None:
        """Return the reason a password is rejected, or None if it is acceptable.

        Current requirements:
        - Not empty or whitespace only
        - Between ``min_length`` and ``max_length`` characters
        """
        if not password or not password.strip():
            return WeakPasswordError("Password cannot be empty")

        if len(password) < self._min_length:
            return WeakPasswordError(
                f"Password must be at least {self._min_length} characters",
            )

        if len(password) > self._max_length:
            return WeakPasswordError(
                f"Password cannot exceed {self._max_length} characters",
            )

        return None

"""Unit tests for CredentialsValidator."""

from staffhub.domain.shared import ErrorCode, Failure, Success
from staffhub.domain.user import InvalidEmailError
from staffhub_auth.exceptions import WeakPasswordError
from staffhub_auth.services import CredentialsValidator


class TestCredentialsValidator:
    def setup_method(self):
        self.validator = CredentialsValidator(min_length=8, max_length=128)

    def test_valid_pair_returns_normalized_email(self):
        result = self.validator.validate(" Test@Gmail.com ", "testpassword")

        assert result == Success("test@gmail.com")

    def test_malformed_email(self):
        result = self.validator.validate("invalidgmail.com", "testpassword")

        assert isinstance(result, Failure)
        assert isinstance(result.error, InvalidEmailError)
        assert result.error.code == ErrorCode.INVALID_EMAIL

    def test_email_checked_before_password(self):
        result = self.validator.validate("invalidgmail.com", "")

        assert isinstance(result.error, InvalidEmailError)

    def test_empty_password(self):
        result = self.validator.validate("test@gmail.com", "")

        assert isinstance(result, Failure)
        assert isinstance(result.error, WeakPasswordError)
        assert result.error.message == "Password cannot be empty"

    def test_whitespace_password(self):
        result = self.validator.validate("test@gmail.com", "         ")

        assert isinstance(result.error, WeakPasswordError)

    def test_short_password(self):
        result = self.validator.validate("test@gmail.com", "short")

        assert result.error.message == "Password must be at least 8 characters"

    def test_long_password(self):
        result = self.validator.validate("test@gmail.com", "x" * 129)

        assert result.error.message == "Password cannot exceed 128 characters"

    def test_boundaries_accepted(self):
        assert self.validator.validate("test@gmail.com", "x" * 8).is_success
        assert self.validator.validate("test@gmail.com", "x" * 128).is_success

    def test_check_password_strength_returns_none_when_ok(self):
        assert self.validator.check_password_strength("testpassword") is None

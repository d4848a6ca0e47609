"""Unit tests for JWTTokenAuthenticationService."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import jwt
import pytest

from staffhub_auth.exceptions import InvalidTokenError
from staffhub_auth.services import JWTTokenAuthenticationService

SECRET = "test-secret-key-for-jwt"  # NOQA: S105


class TestJWTTokenAuthenticationService:
    """Tests for token issuance and verification."""

    def setup_method(self):
        self.service = JWTTokenAuthenticationService(
            secret_key=SECRET,
            expires_in_seconds=3600,
        )
        self.user_id = uuid4()

    def test_authenticate_reports_lifetime(self):
        token = self.service.authenticate(str(self.user_id), "test@gmail.com")

        assert token.access_token
        assert token.expires_in_seconds == 3600

    def test_verify_round_trips_subject_and_email(self):
        token = self.service.authenticate(str(self.user_id), "test@gmail.com")

        payload = self.service.verify_token(token.access_token)

        assert payload.user_id == self.user_id
        assert payload.email == "test@gmail.com"
        assert payload.is_expired() is False

    def test_token_is_hs256(self):
        token = self.service.authenticate(str(self.user_id), "test@gmail.com")

        assert jwt.get_unverified_header(token.access_token)["alg"] == "HS256"

    def test_verify_rejects_other_secret(self):
        other = JWTTokenAuthenticationService(secret_key="another-secret")
        token = other.authenticate(str(self.user_id), "test@gmail.com")

        with pytest.raises(InvalidTokenError, match="Invalid token"):
            self.service.verify_token(token.access_token)

    def test_verify_rejects_expired_token(self):
        past = datetime.now(tz=timezone.utc) - timedelta(hours=2)
        token = jwt.encode(
            {
                "sub": str(self.user_id),
                "email": "test@gmail.com",
                "iat": past,
                "exp": past + timedelta(seconds=1),
            },
            SECRET,
            algorithm="HS256",
        )

        with pytest.raises(InvalidTokenError, match="expired"):
            self.service.verify_token(token)

    def test_verify_rejects_garbage(self):
        with pytest.raises(InvalidTokenError):
            self.service.verify_token("not.a.token")

    def test_verify_rejects_malformed_subject(self):
        future = datetime.now(tz=timezone.utc) + timedelta(hours=1)
        token = jwt.encode(
            {"sub": "not-a-uuid", "email": "test@gmail.com", "exp": future},
            SECRET,
            algorithm="HS256",
        )

        with pytest.raises(InvalidTokenError, match="Malformed"):
            self.service.verify_token(token)

    def test_empty_secret_rejected(self):
        with pytest.raises(ValueError, match="cannot be empty"):
            JWTTokenAuthenticationService(secret_key="")

    def test_non_positive_lifetime_rejected(self):
        with pytest.raises(ValueError, match="positive"):
            JWTTokenAuthenticationService(secret_key=SECRET, expires_in_seconds=0)

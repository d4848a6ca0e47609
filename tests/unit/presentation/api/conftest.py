"""Fixtures for API tests with mocked command handlers.

The handlers are replaced through ``app.dependency_overrides`` so these
tests exercise routing, request parsing, authentication and the error
mapping without a database.
"""

from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient
from pydantic import SecretStr

from staffhub.presentation.api.app import API_V1_PREFIX, create_app
from staffhub.presentation.api.dependencies import (
    get_create_user_handler,
    get_db_session,
    get_login_handler,
    get_recover_password_handler,
    get_update_credentials_handler,
)
from staffhub_auth.services import JWTTokenAuthenticationService
from staffhub_config.settings import Settings, get_settings

TEST_JWT_SECRET = "test-jwt-secret-for-testing-only"  # NOQA: S105


@pytest.fixture
def api_v1_prefix() -> str:
    """Get the API v1 prefix for building URLs."""
    return API_V1_PREFIX


@pytest.fixture
def api_settings() -> Settings:
    """Test API settings with debug enabled."""
    return Settings(
        jwt_secret_key=SecretStr(TEST_JWT_SECRET),
        postgres_password=SecretStr("test-password"),
        api_host="127.0.0.1",
        api_debug=True,
        api_cors_origins="http://localhost:3000",
        bcrypt_rounds=4,
    )


@pytest.fixture
def db_session_mock() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def handlers() -> dict[str, AsyncMock]:
    return {
        "login": AsyncMock(),
        "update_credentials": AsyncMock(),
        "recover_password": AsyncMock(),
        "create_user": AsyncMock(),
    }


@pytest.fixture
def app(api_settings, db_session_mock, handlers):
    app = create_app(settings=api_settings)

    async def override_get_db_session():
        yield db_session_mock

    app.dependency_overrides[get_settings] = lambda: api_settings
    app.dependency_overrides[get_db_session] = override_get_db_session
    app.dependency_overrides[get_login_handler] = lambda: handlers["login"]
    app.dependency_overrides[get_update_credentials_handler] = lambda: handlers[
        "update_credentials"
    ]
    app.dependency_overrides[get_recover_password_handler] = lambda: handlers[
        "recover_password"
    ]
    app.dependency_overrides[get_create_user_handler] = lambda: handlers["create_user"]
    return app


@pytest.fixture
def test_client(app) -> TestClient:
    # No context manager: the lifespan (schema creation) is not run.
    return TestClient(app)


@pytest.fixture
def token_service(api_settings) -> JWTTokenAuthenticationService:
    return JWTTokenAuthenticationService(
        secret_key=api_settings.jwt_secret_key.get_secret_value(),
        expires_in_seconds=api_settings.jwt_access_token_expire_seconds,
    )

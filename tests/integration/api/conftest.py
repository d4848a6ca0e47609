"""Pytest fixtures for API integration tests.

Uses Testcontainers PostgreSQL for isolated, ephemeral database instances.
This ensures tests never touch production databases.
"""

import asyncio
from unittest.mock import Mock
from uuid import uuid4

import bcrypt
import pytest
from fastapi.testclient import TestClient
from pydantic import SecretStr
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from staffhub.domain.shared.time import utc_now
from staffhub.infrastructure.persistence.sqlalchemy.models import (
    Base,
    DepartmentModel,
    UserModel,
)
from staffhub.presentation.api.app import API_V1_PREFIX, create_app
from staffhub.presentation.api.dependencies import (
    get_db_session,
    get_notification_service,
)
from staffhub_auth.services import NotificationService
from staffhub_config.settings import Settings, get_settings
from tests.shared.fixtures.factories import (
    TEST_DEPARTMENT_ID,
    TEST_EMAIL,
    TEST_PASSWORD,
    TEST_USER_ID,
)


@pytest.fixture
def api_v1_prefix() -> str:
    """Get the API v1 prefix for building URLs."""
    return API_V1_PREFIX


@pytest.fixture
def api_settings() -> Settings:
    """Test API settings with debug enabled."""
    return Settings(
        jwt_secret_key=SecretStr("test-jwt-secret-for-testing-only"),
        postgres_password=SecretStr("test-password"),
        api_host="127.0.0.1",
        api_port=8000,
        api_debug=True,
        bcrypt_rounds=4,
    )


def _setup_test_database(async_engine):
    """Synchronously set up the test database with tables and seed data.

    This runs in a fresh event loop to avoid conflicts with TestClient's loop.
    """
    # Import models to register them with Base.metadata
    from staffhub_auth.persistence.sqlalchemy.models import CredentialsModel

    async def _setup():
        async with async_engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
            await conn.run_sync(Base.metadata.create_all)

        session_maker = async_sessionmaker(
            async_engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )
        async with session_maker() as session:
            now = utc_now()
            session.add(DepartmentModel(id=TEST_DEPARTMENT_ID, name="Engineering"))
            await session.flush()
            session.add(
                UserModel(
                    id=TEST_USER_ID,
                    name="Test User",
                    phone="+584242374999",
                    role="admin",
                    department_id=TEST_DEPARTMENT_ID,
                    active=True,
                    created_at=now,
                    updated_at=now,
                ),
            )
            await session.flush()
            password_hash = bcrypt.hashpw(
                TEST_PASSWORD.encode("utf-8"),
                bcrypt.gensalt(rounds=4),
            ).decode("utf-8")
            session.add(
                CredentialsModel(
                    id=uuid4(),
                    user_id=TEST_USER_ID,
                    email=TEST_EMAIL,
                    password_hash=password_hash,
                ),
            )
            await session.commit()

    # Run in a fresh event loop to avoid conflicts
    loop = asyncio.new_event_loop()
    try:
        loop.run_until_complete(_setup())
    finally:
        loop.close()


def _teardown_test_database(async_engine):
    """Synchronously tear down the test database."""

    async def _teardown():
        async with async_engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)

    loop = asyncio.new_event_loop()
    try:
        loop.run_until_complete(_teardown())
    finally:
        loop.close()


@pytest.fixture
def notification_service() -> Mock:
    """Captures outgoing recovery emails instead of sending them."""
    return Mock(spec=NotificationService)


@pytest.fixture
def test_client(api_settings, async_engine, notification_service):
    """Create a test client with Testcontainers PostgreSQL.

    Sets up the database synchronously, then lets FastAPI manage its own
    session creation within the TestClient's event loop context.
    """
    _setup_test_database(async_engine)

    app = create_app(settings=api_settings)

    test_session_maker = async_sessionmaker(
        async_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async def override_get_db_session():
        async with test_session_maker() as session:
            yield session

    app.dependency_overrides[get_db_session] = override_get_db_session
    app.dependency_overrides[get_settings] = lambda: api_settings
    app.dependency_overrides[get_notification_service] = lambda: notification_service

    yield TestClient(app)

    _teardown_test_database(async_engine)


@pytest.fixture
def auth_headers(test_client, api_v1_prefix) -> dict:
    """Get auth headers for the seeded user."""
    response = test_client.post(
        f"{api_v1_prefix}/auth/login",
        json={"email": TEST_EMAIL, "password": TEST_PASSWORD},
    )
    assert response.status_code == 200, (
        f"Login failed: {response.status_code} - {response.text}"
    )

    token = response.json()["access_token"]
    return {"Authorization": f"Bearer {token}"}

"""Tests for the error-code to HTTP status mapping."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from staffhub.domain.shared import (
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    InfrastructureError,
    UnauthorizedError,
    ValidationError,
)
from staffhub.presentation.api.exception_handlers import (
    _get_status_for_exception,
    setup_exception_handlers,
)


@pytest.mark.parametrize(
    ("exc", "expected_status"),
    [
        (ValidationError("bad"), 400),
        (UnauthorizedError(), 401),
        (EntityNotFoundError("missing"), 404),
        (ConflictError("taken"), 409),
        (InfrastructureError(), 503),
        (DomainException("boom"), 500),
    ],
)
def test_status_for_exception(exc, expected_status):
    assert _get_status_for_exception(exc) == expected_status


def _app_raising(exc: Exception) -> FastAPI:
    app = FastAPI()
    setup_exception_handlers(app)

    @app.get("/boom")
    async def boom():
        raise exc

    return app


def test_domain_exception_response_body():
    client = TestClient(_app_raising(ConflictError("Email already registered")))

    response = client.get("/boom")

    assert response.status_code == 409
    assert response.json() == {
        "detail": "Email already registered",
        "code": ErrorCode.CONFLICT.value,
    }


def test_unauthorized_sets_www_authenticate():
    client = TestClient(_app_raising(UnauthorizedError()))

    response = client.get("/boom")

    assert response.status_code == 401
    assert response.headers["WWW-Authenticate"] == "Bearer"


def test_unhandled_exception_is_generic_500():
    client = TestClient(
        _app_raising(RuntimeError("secret internals")),
        raise_server_exceptions=False,
    )

    response = client.get("/boom")

    assert response.status_code == 500
    assert response.json() == {
        "detail": "An internal error occurred",
        "code": "INTERNAL_ERROR",
    }
    assert "secret internals" not in response.text

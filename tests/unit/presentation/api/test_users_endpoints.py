"""Tests for the /api/v1/users endpoints."""

from staffhub.domain.department import DepartmentNotFoundError
from staffhub.domain.shared import Failure, Success
from staffhub.domain.user import EmailAlreadyInUseError, InvalidUserDataError
from tests.shared.fixtures.factories import (
    TEST_DEPARTMENT_ID,
    TEST_EMAIL,
    TEST_PASSWORD,
    TEST_USER_ID,
    make_user,
)

CREATE_USER_BODY = {
    "name": "Test User",
    "phone": "+584242374999",
    "role": "admin",
    "department_id": str(TEST_DEPARTMENT_ID),
    "email": TEST_EMAIL,
    "password": TEST_PASSWORD,
}


class TestCreateUser:
    """Tests for POST /api/v1/users."""

    def test_create_user_success(
        self,
        test_client,
        handlers,
        db_session_mock,
        api_v1_prefix,
    ):
        handlers["create_user"].execute.return_value = Success(make_user())

        response = test_client.post(f"{api_v1_prefix}/users", json=CREATE_USER_BODY)

        assert response.status_code == 201
        data = response.json()
        assert data["id"] == str(TEST_USER_ID)
        assert data["department_id"] == str(TEST_DEPARTMENT_ID)
        assert data["active"] is True
        assert "password" not in data
        db_session_mock.commit.assert_awaited_once()

    def test_existing_email_conflicts(
        self,
        test_client,
        handlers,
        db_session_mock,
        api_v1_prefix,
    ):
        handlers["create_user"].execute.return_value = Failure(
            EmailAlreadyInUseError(TEST_EMAIL),
        )

        response = test_client.post(f"{api_v1_prefix}/users", json=CREATE_USER_BODY)

        assert response.status_code == 409
        db_session_mock.rollback.assert_awaited_once()
        db_session_mock.commit.assert_not_awaited()

    def test_unknown_department(self, test_client, handlers, api_v1_prefix):
        handlers["create_user"].execute.return_value = Failure(
            DepartmentNotFoundError(str(TEST_DEPARTMENT_ID)),
        )

        response = test_client.post(f"{api_v1_prefix}/users", json=CREATE_USER_BODY)

        assert response.status_code == 404
        assert response.json()["code"] == "DEPARTMENT_NOT_FOUND"

    def test_invalid_profile(self, test_client, handlers, api_v1_prefix):
        handlers["create_user"].execute.return_value = Failure(
            InvalidUserDataError("phone", "Invalid phone number: abc"),
        )

        response = test_client.post(
            f"{api_v1_prefix}/users",
            json={**CREATE_USER_BODY, "phone": "abc"},
        )

        assert response.status_code == 400
        assert response.json()["code"] == "VALIDATION_ERROR"

"""Tests for the unversioned health endpoint."""


def test_health_check(test_client):
    response = test_client.get("/health")

    assert response.status_code == 200
    assert response.json() == {
        "status": "healthy",
        "version": "1.0.0",
        "api_versions": ["v1"],
    }

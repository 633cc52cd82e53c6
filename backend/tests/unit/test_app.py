from unittest.mock import AsyncMock, patch


def test_root_returns_message(client):
    response = client.get("/")
    assert response.status_code == 200
    data = response.json()
    assert data["message"] == "Employee API"


def test_health_returns_status(client):
    with patch("app.api.v1.endpoints.health.employee_service.check_connection", AsyncMock(return_value=True)):
        response = client.get("/api/v1/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["version"] == "0.1.0"
    assert "services" in data

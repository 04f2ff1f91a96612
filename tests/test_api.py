# tests/test_api.py

import pytest
from fastapi.testclient import TestClient

from logitrack.adapters.configuration.config import settings
from logitrack.main import app


@pytest.fixture
def client(tmp_path, monkeypatch):
    monkeypatch.setattr(settings, "DB_PROVIDER", "LOCAL")
    monkeypatch.setattr(settings, "LOCAL_STORAGE_PATH", str(tmp_path / "api.json"))
    with TestClient(app) as test_client:
        yield test_client


def _login(client, email, password):
    response = client.post("/api/v1/auth/login", json={"email": email, "password": password})
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['accessToken']}"}


@pytest.fixture
def user_headers(client):
    response = client.post("/api/v1/auth/register", json={
        "name": "Carlos Entregas",
        "email": "carlos@logitrack.com",
        "password": "segredo1",
        "phone": "11988887777",
    })
    assert response.status_code == 201, response.text
    return _login(client, "carlos@logitrack.com", "segredo1")


@pytest.fixture
def admin_headers(client):
    return _login(client, settings.ADMIN_EMAIL, settings.ADMIN_PASSWORD)


def test_register_returns_camel_case_without_password(client):
    response = client.post("/api/v1/auth/register", json={
        "name": "Carlos", "email": "carlos@logitrack.com", "password": "segredo1",
    })

    body = response.json()
    assert response.status_code == 201
    assert body["role"] == "USER"
    assert "password" not in body


def test_duplicate_registration_conflicts(client, user_headers):
    response = client.post("/api/v1/auth/register", json={
        "name": "Carlos", "email": "carlos@logitrack.com", "password": "segredo1",
    })
    assert response.status_code == 409
    assert response.json()["code"] == "RESOURCE_ALREADY_EXISTS"


def test_wrong_password_is_unauthorized(client, user_headers):
    response = client.post("/api/v1/auth/login", json={"email": "carlos@logitrack.com", "password": "xxxxxx"})
    assert response.status_code == 401


def test_routes_require_token(client):
    assert client.get("/api/v1/services").status_code in (401, 403)


def test_service_lifecycle(client, user_headers):
    created_client = client.post("/api/v1/clients", headers=user_headers, json={"name": "Mercado Central"})
    assert created_client.status_code == 201, created_client.text
    client_id = created_client.json()["id"]

    response = client.post("/api/v1/services", headers=user_headers, json={
        "clientId": client_id,
        "pickupAddresses": ["Rua A, 1"],
        "deliveryAddresses": ["Rua B, 2", ""],
        "cost": 50,
        "driverFee": 20,
        "date": "2024-03-10",
    })
    assert response.status_code == 201, response.text
    service = response.json()
    assert service["deliveryAddresses"] == ["Rua B, 2"]
    assert service["total"] == 50

    listed = client.get("/api/v1/services", headers=user_headers,
                        params={"startDate": "2024-03-01", "endDate": "2024-03-31"})
    assert [s["id"] for s in listed.json()] == [service["id"]]

    updated = client.put(f"/api/v1/services/{service['id']}", headers=user_headers, json={"cost": 70})
    assert updated.json()["cost"] == 70

    logs = client.get(f"/api/v1/services/{service['id']}/logs", headers=user_headers).json()
    assert [log["action"] for log in logs] == ["EDICAO", "CRIACAO"]
    assert logs[0]["userName"] == "Carlos Entregas"
    assert logs[0]["changes"] == {"Valor": {"old": 50, "new": 70}}

    assert client.delete(f"/api/v1/services/{service['id']}", headers=user_headers).status_code == 204
    trash = client.get("/api/v1/services/trash", headers=user_headers).json()
    assert [s["id"] for s in trash] == [service["id"]]

    restored = client.post(f"/api/v1/services/{service['id']}/restore", headers=user_headers)
    assert restored.json()["deletedAt"] is None

    counted = client.get("/api/v1/clients", headers=user_headers).json()
    assert counted[0]["serviceCount"] == 1


def test_invalid_service_is_bad_request(client, user_headers):
    response = client.post("/api/v1/services", headers=user_headers, json={
        "clientId": "c1", "pickupAddresses": [], "deliveryAddresses": ["Rua B"], "date": "2024-03-10",
    })
    assert response.status_code == 400
    assert response.json()["code"] == "INVALID_INPUT"
    assert "pickupAddresses" in response.json()["errors"]


def test_non_finite_cost_is_bad_request(client, user_headers):
    body = '{"clientId": "c1", "pickupAddresses": ["Rua A"], "deliveryAddresses": ["Rua B"], "cost": NaN}'
    response = client.post("/api/v1/services", content=body,
                           headers={**user_headers, "Content-Type": "application/json"})

    assert response.status_code == 400
    assert response.json()["code"] == "INVALID_INPUT"
    assert "cost" in response.json()["errors"]
    assert client.get("/api/v1/services", headers=user_headers).json() == []


def test_unknown_service_is_not_found(client, user_headers):
    assert client.get("/api/v1/services/nope", headers=user_headers).status_code == 404


def test_report_summary(client, user_headers):
    client.post("/api/v1/expenses", headers=user_headers,
                json={"category": "GAS", "amount": 30, "date": "2024-03-05"})

    response = client.get("/api/v1/reports/summary", headers=user_headers, params={
        "timeframe": "CUSTOM", "startDate": "2024-03-01", "endDate": "2024-03-31",
    })

    assert response.status_code == 200, response.text
    body = response.json()
    assert body["expenses"] == 30
    assert body["netProfit"] == -30
    assert body["expensesByCategory"]["GAS"] == 30


def test_custom_report_needs_dates(client, user_headers):
    response = client.get("/api/v1/reports/summary", headers=user_headers, params={"timeframe": "CUSTOM"})
    assert response.status_code == 400


def test_admin_routes(client, user_headers, admin_headers):
    assert client.get("/api/v1/users/list", headers=user_headers).status_code == 403
    assert client.get("/api/v1/backups/connections", headers=user_headers).status_code == 403

    users = client.get("/api/v1/users/list", headers=admin_headers).json()
    carlos = next(u for u in users if u["email"] == "carlos@logitrack.com")

    blocked = client.post(f"/api/v1/users/{carlos['id']}/toggle-status", headers=admin_headers)
    assert blocked.json()["status"] == "BLOCKED"

    response = client.post("/api/v1/auth/login", json={"email": "carlos@logitrack.com", "password": "segredo1"})
    assert response.status_code == 400
    assert response.json()["code"] == "RESOURCE_INACTIVE"


def test_me(client, user_headers):
    me = client.get("/api/v1/users/me", headers=user_headers).json()
    assert me["email"] == "carlos@logitrack.com"

    updated = client.put("/api/v1/users/me", headers=user_headers, json={"companyName": "Carlos Express"})
    assert updated.json()["companyName"] == "Carlos Express"


def test_client_categories(client, user_headers):
    categories = client.get("/api/v1/clients/categories", headers=user_headers).json()
    assert "Varejo" in categories

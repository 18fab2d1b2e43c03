"""Request helpers shared by the HTTP tests."""

from fastapi.testclient import TestClient

API = "/api/v1"
TEST_PASSWORD = "secure_password_123"


def create_role(client: TestClient, name: str, description: str | None = None) -> str:
    response = client.post(f"{API}/roles", json={"name": name, "description": description})
    assert response.status_code == 201, response.text
    return response.json()["data"]["id"]


def create_user(client: TestClient, email: str, **fields) -> dict:
    payload = {"name": "Test User", "email": email, "password": TEST_PASSWORD}
    payload.update(fields)
    response = client.post(f"{API}/users", json=payload)
    assert response.status_code == 201, response.text
    return response.json()["data"]


def role_ids_of(client: TestClient, user_id: str) -> set[str]:
    response = client.get(f"{API}/users/{user_id}")
    assert response.status_code == 200, response.text
    return {role["id"] for role in response.json()["data"]["roles"]}

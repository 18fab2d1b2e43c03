"""HTTP tests for /api/v1/transactions."""

from uuid import uuid4

from tests.integration.api.helpers import (
    API,
    TEST_PASSWORD,
    create_role,
    create_user,
    role_ids_of,
)

TX = f"{API}/transactions"


class TestAssignUsersToRole:
    def test_assigns_all_users(self, client):
        role = create_role(client, "Reviewer")
        users = [create_user(client, f"u{i}@x.com")["id"] for i in range(3)]

        response = client.post(
            f"{TX}/assign-users-to-role",
            json={"role_id": role, "user_ids": users},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["assigned_count"] == 3
        assert body["message"] == "3 user(s) assigned to role 'Reviewer'"
        assert all(role_ids_of(client, u) == {role} for u in users)

    def test_missing_user_assigns_nobody(self, client):
        role = create_role(client, "Reviewer")
        user = create_user(client, "u@x.com")["id"]

        response = client.post(
            f"{TX}/assign-users-to-role",
            json={"role_id": role, "user_ids": [user, str(uuid4())]},
        )

        assert response.status_code == 400
        assert response.json()["code"] == "USERS_NOT_FOUND"
        assert role_ids_of(client, user) == set()

    def test_empty_user_list_rejected_by_schema(self, client):
        role = create_role(client, "Reviewer")

        response = client.post(
            f"{TX}/assign-users-to-role",
            json={"role_id": role, "user_ids": []},
        )

        assert response.status_code == 422


class TestTransferUsers:
    def test_moves_holders(self, client):
        r1 = create_role(client, "Role One")
        r2 = create_role(client, "Role Two")
        user = create_user(client, "u@x.com", role_ids=[r1])["id"]

        response = client.post(
            f"{TX}/transfer-users-between-roles",
            json={"source_role_id": r1, "target_role_id": r2},
        )

        assert response.status_code == 200
        assert response.json()["transferred_count"] == 1
        assert role_ids_of(client, user) == {r2}

    def test_no_holders_is_400(self, client):
        r1 = create_role(client, "Role One")
        r2 = create_role(client, "Role Two")

        response = client.post(
            f"{TX}/transfer-users-between-roles",
            json={"source_role_id": r1, "target_role_id": r2},
        )

        assert response.status_code == 400
        assert response.json()["code"] == "NO_USERS_TO_TRANSFER"

    def test_unknown_target_is_404(self, client):
        r1 = create_role(client, "Role One")
        create_user(client, "u@x.com", role_ids=[r1])

        response = client.post(
            f"{TX}/transfer-users-between-roles",
            json={"source_role_id": r1, "target_role_id": str(uuid4())},
        )

        assert response.status_code == 404
        assert response.json()["detail"].startswith("Target role not found")


class TestDeleteRoleWithReassignment:
    def test_reassigns_and_clears_primary(self, client):
        doomed = create_role(client, "Legacy")
        replacement = create_role(client, "Modern")
        user = create_user(
            client,
            "u@x.com",
            primary_role_id=doomed,
            role_ids=[doomed],
        )["id"]

        response = client.post(
            f"{TX}/roles/{doomed}/delete-with-reassignment",
            json={"replacement_role_id": replacement},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["affected_users"] == 1
        assert body["replacement_role_id"] == replacement
        detail = client.get(f"{API}/users/{user}").json()["data"]
        assert detail["primary_role"] is None
        assert {r["id"] for r in detail["roles"]} == {replacement}
        assert client.get(f"{API}/roles/{doomed}").status_code == 404

    def test_without_body_removes_role(self, client):
        doomed = create_role(client, "Legacy")
        user = create_user(client, "u@x.com", role_ids=[doomed])["id"]

        response = client.post(f"{TX}/roles/{doomed}/delete-with-reassignment")

        assert response.status_code == 200
        assert response.json()["replacement_role_id"] is None
        assert role_ids_of(client, user) == set()

    def test_unknown_replacement_keeps_role(self, client):
        doomed = create_role(client, "Legacy")

        response = client.post(
            f"{TX}/roles/{doomed}/delete-with-reassignment",
            json={"replacement_role_id": str(uuid4())},
        )

        assert response.status_code == 404
        assert client.get(f"{API}/roles/{doomed}").status_code == 200


class TestCreateUserWithRole:
    def test_creates_both(self, client):
        response = client.post(
            f"{TX}/create-user-with-role",
            json={
                "user": {
                    "name": "Alice",
                    "email": "alice@example.com",
                    "password": TEST_PASSWORD,
                },
                "role": {"name": "Curator", "description": "Curates"},
            },
        )

        assert response.status_code == 201
        data = response.json()["data"]
        assert data["role"]["name"] == "Curator"
        assert data["user"]["primary_role"]["id"] == data["role"]["id"]

    def test_taken_role_name_creates_no_user(self, client):
        create_role(client, "Curator")

        response = client.post(
            f"{TX}/create-user-with-role",
            json={
                "user": {
                    "name": "Alice",
                    "email": "alice@example.com",
                    "password": TEST_PASSWORD,
                },
                "role": {"name": "Curator"},
            },
        )

        assert response.status_code == 409
        assert client.get(f"{API}/users").json()["count"] == 0


class TestHealth:
    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

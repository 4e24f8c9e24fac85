"""
Test suite for user management endpoints (admin-only).
"""

import uuid


def _create_user(client, headers, **overrides):
    data = {"email": "sara@example.com", "first_name": "Sara", "last_name": "Haddad", "country": "AE"}
    data.update(overrides)
    return client.post("/api/v1/users", json=data, headers=headers)


class TestUsers:

    def test_requires_admin(self, client):
        assert client.get("/api/v1/users").status_code == 401

    def test_invalid_token(self, client):
        response = client.get("/api/v1/users", headers={"Authorization": "Bearer not-a-token"})

        assert response.status_code == 401

    def test_create_user_defaults_to_unverified(self, client, auth_headers):
        response = _create_user(client, auth_headers)

        assert response.status_code == 201
        assert response.json()["status"]["code"] == "unverified"
        assert response.json()["role"] == "user"

    def test_duplicate_email_rejected(self, client, auth_headers):
        _create_user(client, auth_headers)
        response = _create_user(client, auth_headers, email="SARA@example.com")

        assert response.status_code == 400

    def test_invalid_email(self, client, auth_headers):
        assert _create_user(client, auth_headers, email="not-an-email").status_code == 422

    def test_update_status_and_stats(self, client, auth_headers, lookup_ids):
        user_id = _create_user(client, auth_headers).json()["id"]
        _create_user(client, auth_headers, email="omar@example.com", first_name="Omar")

        response = client.patch(
            f"/api/v1/users/{user_id}/status",
            json={"status_id": lookup_ids["status"]["verified"]},
            headers=auth_headers,
        )
        assert response.status_code == 200
        assert response.json()["status"]["code"] == "verified"

        stats = client.get("/api/v1/users", params={"include_stats": True}, headers=auth_headers).json()["stats"]
        assert stats == {"total": 2, "verified": 1, "unverified": 1, "disabled": 0}

    def test_search_and_status_filter(self, client, auth_headers):
        _create_user(client, auth_headers)
        _create_user(client, auth_headers, email="omar@example.com", first_name="Omar")

        by_search = client.get("/api/v1/users", params={"search": "omar"}, headers=auth_headers).json()
        by_status = client.get("/api/v1/users", params={"status": "verified"}, headers=auth_headers).json()

        assert [u["first_name"] for u in by_search["list"]] == ["Omar"]
        assert by_status["list"] == []

    def test_update_user(self, client, auth_headers):
        user_id = _create_user(client, auth_headers).json()["id"]

        response = client.put(f"/api/v1/users/{user_id}", json={"location": "Dubai"}, headers=auth_headers)

        assert response.status_code == 200
        assert response.json()["location"] == "Dubai"
        assert response.json()["first_name"] == "Sara"

    def test_update_rejects_null_first_name(self, client, auth_headers):
        user_id = _create_user(client, auth_headers).json()["id"]

        response = client.put(f"/api/v1/users/{user_id}", json={"first_name": None}, headers=auth_headers)

        assert response.status_code == 422

    def test_delete_user(self, client, auth_headers):
        user_id = _create_user(client, auth_headers).json()["id"]

        assert client.delete(f"/api/v1/users/{user_id}", headers=auth_headers).status_code == 200
        assert client.get(f"/api/v1/users/{user_id}", headers=auth_headers).status_code == 404

    def test_status_of_unknown_user(self, client, auth_headers, lookup_ids):
        response = client.patch(
            f"/api/v1/users/{uuid.uuid4()}/status",
            json={"status_id": lookup_ids["status"]["disabled"]},
            headers=auth_headers,
        )

        assert response.status_code == 404

"""
Test suite for admin authentication, admin accounts and the overview stats.
"""

import uuid
import pytest

from app.models.admin import AdminRole


# Password of the `admin` fixture
ADMIN_PASSWORD = "admin-password-123"


def _login(client, email="admin@example.com", password=ADMIN_PASSWORD):
    return client.post("/api/v1/admin/auth/login", json={"email": email, "password": password})


def _create_admin(client, headers, **overrides):
    data = {"email": "grace@example.com", "password": "another-password", "first_name": "Grace"}
    data.update(overrides)
    return client.post("/api/v1/admins", json=data, headers=headers)


def _promote(db_session, admin):
    admin.role = AdminRole.SUPER_ADMIN
    db_session.commit()


class TestAdminLogin:
    """Tests for /admin/auth endpoints"""

    def test_login_success(self, client, admin):
        response = _login(client)

        assert response.status_code == 200
        data = response.json()
        assert data["token_type"] == "bearer"
        assert data["admin"]["email"] == admin.email
        assert data["admin"]["last_login_at"] is not None
        assert "hashed_password" not in data["admin"]

    def test_login_email_is_case_insensitive(self, client, admin):
        assert _login(client, email="ADMIN@example.com").status_code == 200

    def test_login_token_works(self, client, admin):
        token = _login(client).json()["access_token"]

        response = client.get("/api/v1/admin/auth/me", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 200
        assert response.json()["first_name"] == "Ada"

    @pytest.mark.parametrize("email,password", [
        ("admin@example.com", "wrong-password"),
        ("nobody@example.com", ADMIN_PASSWORD),
    ])
    def test_login_bad_credentials(self, client, admin, email, password):
        response = _login(client, email=email, password=password)

        assert response.status_code == 401
        assert response.json()["detail"] == "Incorrect email or password"

    def test_login_inactive_admin(self, client, admin, db_session, lookup_ids):
        admin.status_id = lookup_ids["status"]["disabled"]
        db_session.commit()

        response = _login(client)

        assert response.status_code == 403
        assert response.json()["detail"] == "Admin account is inactive"

    def test_inactive_admin_token_rejected(self, client, admin, auth_headers, db_session, lookup_ids):
        admin.status_id = lookup_ids["status"]["inactive"]
        db_session.commit()

        assert client.get("/api/v1/admin/auth/me", headers=auth_headers).status_code == 403

    def test_me_requires_token(self, client):
        assert client.get("/api/v1/admin/auth/me").status_code == 401


class TestAdminAccounts:
    """Tests for /admins management endpoints"""

    def test_create_and_list_admins(self, client, auth_headers):
        response = client.post(
            "/api/v1/admins",
            json={"email": "Grace@Example.com", "password": "another-password", "first_name": "Grace"},
            headers=auth_headers,
        )

        assert response.status_code == 201
        assert response.json()["email"] == "grace@example.com"

        listing = client.get("/api/v1/admins", headers=auth_headers).json()
        assert listing["pagination"]["total_count"] == 2

    def test_new_admin_can_log_in(self, client, auth_headers):
        client.post(
            "/api/v1/admins",
            json={"email": "grace@example.com", "password": "another-password", "first_name": "Grace"},
            headers=auth_headers,
        )

        assert _login(client, "grace@example.com", "another-password").status_code == 200

    def test_duplicate_admin_email(self, client, auth_headers):
        response = client.post(
            "/api/v1/admins",
            json={"email": "admin@example.com", "password": "another-password", "first_name": "Dup"},
            headers=auth_headers,
        )

        assert response.status_code == 400

    def test_short_password_rejected(self, client, auth_headers):
        response = client.post(
            "/api/v1/admins",
            json={"email": "short@example.com", "password": "short", "first_name": "Short"},
            headers=auth_headers,
        )

        assert response.status_code == 422

    def test_update_admin_role(self, client, auth_headers, admin, db_session):
        _promote(db_session, admin)
        other_id = _create_admin(client, auth_headers).json()["id"]

        response = client.put(f"/api/v1/admins/{other_id}", json={"role": "super_admin"}, headers=auth_headers)

        assert response.status_code == 200
        assert response.json()["role"] == "super_admin"

    def test_admin_cannot_promote(self, client, auth_headers, admin):
        other_id = _create_admin(client, auth_headers).json()["id"]

        for admin_id in (admin.id, other_id):
            response = client.put(f"/api/v1/admins/{admin_id}", json={"role": "super_admin"}, headers=auth_headers)
            assert response.status_code == 403
        assert client.get(f"/api/v1/admins/{admin.id}", headers=auth_headers).json()["role"] == "admin"

    def test_admin_cannot_create_super_admin(self, client, auth_headers):
        response = _create_admin(client, auth_headers, role="super_admin")

        assert response.status_code == 403
        assert client.get("/api/v1/admins", headers=auth_headers).json()["pagination"]["total_count"] == 1

    def test_super_admin_creates_super_admin(self, client, auth_headers, admin, db_session):
        _promote(db_session, admin)

        response = _create_admin(client, auth_headers, role="super_admin")

        assert response.status_code == 201
        assert response.json()["role"] == "super_admin"

    def test_admin_cannot_manage_super_admin(self, client, auth_headers, admin, db_session):
        _promote(db_session, admin)
        other_id = _create_admin(client, auth_headers, role="super_admin").json()["id"]
        admin.role = AdminRole.ADMIN
        db_session.commit()

        assert client.put(
            f"/api/v1/admins/{other_id}", json={"first_name": "Eve"}, headers=auth_headers
        ).status_code == 403
        assert client.delete(f"/api/v1/admins/{other_id}", headers=auth_headers).status_code == 403

    def test_update_rejects_null_role(self, client, auth_headers, admin):
        response = client.put(f"/api/v1/admins/{admin.id}", json={"role": None}, headers=auth_headers)

        assert response.status_code == 422

    def test_cannot_delete_self(self, client, auth_headers, admin):
        response = client.delete(f"/api/v1/admins/{admin.id}", headers=auth_headers)

        assert response.status_code == 400

    def test_delete_other_admin(self, client, auth_headers):
        other_id = client.post(
            "/api/v1/admins",
            json={"email": "grace@example.com", "password": "another-password", "first_name": "Grace"},
            headers=auth_headers,
        ).json()["id"]

        assert client.delete(f"/api/v1/admins/{other_id}", headers=auth_headers).status_code == 200
        assert client.get(f"/api/v1/admins/{other_id}", headers=auth_headers).status_code == 404

    def test_unknown_admin(self, client, auth_headers):
        assert client.get(f"/api/v1/admins/{uuid.uuid4()}", headers=auth_headers).status_code == 404


class TestOverviewStats:

    def test_stats(self, client, auth_headers, sample_job_data):
        client.post("/api/v1/jobs", json=sample_job_data, headers=auth_headers)
        client.post("/api/v1/jobs-sources", json={"name": "Bayt", "code": "bayt"}, headers=auth_headers)

        response = client.get("/api/v1/admin/stats", headers=auth_headers)

        assert response.status_code == 200
        data = response.json()
        assert data["jobs"] == {"total": 1, "published": 1}
        assert data["users"]["total"] == 0
        assert data["sources"] == {"total": 1, "active": 1, "inactive": 0}
        assert data["total_companies"] == 1
        assert data["total_resources"] == 0

    def test_stats_requires_admin(self, client):
        assert client.get("/api/v1/admin/stats").status_code == 401

"""
Test suite for job source endpoints (admin-only).
"""


def _create(client, headers, **overrides):
    data = {"name": "Bayt", "code": "bayt", "base_url": "https://www.bayt.com"}
    data.update(overrides)
    return client.post("/api/v1/jobs-sources", json=data, headers=headers)


class TestJobSources:

    def test_requires_admin(self, client):
        assert client.get("/api/v1/jobs-sources").status_code == 401

    def test_create_and_get(self, client, auth_headers):
        response = _create(client, auth_headers)

        assert response.status_code == 201
        source = response.json()
        assert source["is_active"] is True

        fetched = client.get(f"/api/v1/jobs-sources/{source['id']}", headers=auth_headers)
        assert fetched.json()["code"] == "bayt"

    def test_duplicate_code(self, client, auth_headers):
        _create(client, auth_headers)
        response = _create(client, auth_headers, name="Bayt Again")

        assert response.status_code == 400
        assert response.json()["detail"] == "Job source with code 'bayt' already exists"

    def test_update_to_taken_code(self, client, auth_headers):
        _create(client, auth_headers)
        other_id = _create(client, auth_headers, name="GulfTalent", code="gulftalent").json()["id"]

        response = client.put(f"/api/v1/jobs-sources/{other_id}", json={"code": "bayt"}, headers=auth_headers)

        assert response.status_code == 400

    def test_update_keeping_own_code(self, client, auth_headers):
        source_id = _create(client, auth_headers).json()["id"]

        response = client.put(
            f"/api/v1/jobs-sources/{source_id}",
            json={"code": "bayt", "is_active": False},
            headers=auth_headers,
        )

        assert response.status_code == 200
        assert response.json()["is_active"] is False

    def test_list_filter_and_stats(self, client, auth_headers):
        _create(client, auth_headers)
        _create(client, auth_headers, name="GulfTalent", code="gulftalent", is_active=False)

        data = client.get(
            "/api/v1/jobs-sources", params={"is_active": True, "include_stats": True}, headers=auth_headers
        ).json()

        assert [s["code"] for s in data["list"]] == ["bayt"]
        assert data["stats"] == {"total": 2, "active": 1, "inactive": 1}

    def test_delete(self, client, auth_headers):
        source_id = _create(client, auth_headers).json()["id"]

        assert client.delete(f"/api/v1/jobs-sources/{source_id}", headers=auth_headers).status_code == 200
        assert client.get(f"/api/v1/jobs-sources/{source_id}", headers=auth_headers).status_code == 404

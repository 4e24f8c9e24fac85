"""
Test suite for company endpoints.
"""

import uuid


class TestCompanyCrud:
    """Create, read, update and delete companies"""

    def test_create_company(self, client, company, sample_company_data):
        fetched = client.get(f"/api/v1/companies/{company['id']}")

        assert fetched.status_code == 200
        data = fetched.json()
        assert data["name"] == sample_company_data["name"]
        assert data["metadata"] == sample_company_data["metadata"]
        assert data["contact"] == sample_company_data["contact"]
        assert data["status"]["code"] == "active"

    def test_create_company_requires_name(self, client, auth_headers):
        response = client.post("/api/v1/companies", json={"location": "Doha"}, headers=auth_headers)

        assert response.status_code == 422

    def test_update_company(self, client, auth_headers, company):
        response = client.put(
            f"/api/v1/companies/{company['id']}",
            json={"is_premium": True, "rank": 1},
            headers=auth_headers,
        )

        assert response.status_code == 200
        assert response.json()["is_premium"] is True
        assert response.json()["name"] == company["name"]

    def test_update_rejects_null_name(self, client, auth_headers, company):
        response = client.put(f"/api/v1/companies/{company['id']}", json={"name": None}, headers=auth_headers)

        assert response.status_code == 422
        assert client.get(f"/api/v1/companies/{company['id']}").json()["name"] == company["name"]

    def test_get_nonexistent_company(self, client):
        response = client.get(f"/api/v1/companies/{uuid.uuid4()}")

        assert response.status_code == 404
        assert response.json()["detail"] == "Company not found"

    def test_delete_company_deletes_its_jobs(self, client, auth_headers, company, sample_job_data):
        job_id = client.post("/api/v1/jobs", json=sample_job_data, headers=auth_headers).json()["id"]

        response = client.delete(f"/api/v1/companies/{company['id']}", headers=auth_headers)

        assert response.status_code == 200
        assert client.get(f"/api/v1/companies/{company['id']}").status_code == 404
        assert client.get(f"/api/v1/jobs/{job_id}").status_code == 404


class TestCompanyListing:
    """Listing, featured and per-company jobs"""

    def test_list_companies_with_job_counts(self, client, auth_headers, company, sample_job_data):
        client.post("/api/v1/jobs", json=sample_job_data, headers=auth_headers)
        client.post("/api/v1/jobs", json=sample_job_data, headers=auth_headers)
        client.post("/api/v1/companies", json={"name": "Beta LLC"}, headers=auth_headers)

        data = client.get("/api/v1/companies").json()

        assert [c["name"] for c in data["list"]] == ["Acme Corp", "Beta LLC"]
        assert [c["open_jobs"] for c in data["list"]] == [2, 0]
        assert data["pagination"]["total_count"] == 2

    def test_search_companies(self, client, auth_headers, company):
        client.post("/api/v1/companies", json={"name": "Gulf Hospitality"}, headers=auth_headers)

        data = client.get("/api/v1/companies", params={"search": "energy"}).json()

        assert [c["name"] for c in data["list"]] == ["Acme Corp"]

    def test_featured_companies(self, client, company):
        response = client.get("/api/v1/companies/featured", params={"limit": 1})

        assert response.status_code == 200
        assert len(response.json()) == 1

    def test_company_jobs(self, client, auth_headers, company, sample_job_data):
        client.post("/api/v1/jobs", json=sample_job_data, headers=auth_headers)

        response = client.get(f"/api/v1/companies/{company['id']}/jobs")

        assert response.status_code == 200
        assert [j["title"] for j in response.json()] == [sample_job_data["title"]]

    def test_jobs_of_unknown_company(self, client):
        response = client.get(f"/api/v1/companies/{uuid.uuid4()}/jobs")

        assert response.status_code == 404

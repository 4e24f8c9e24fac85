"""
Test suite for lookup lists and lookup seeding.
"""

import pytest

from app.crud import lookup as lookup_crud


class TestLookupEndpoint:

    @pytest.mark.parametrize("lookup_type,expected_count", [
        ("statuses", len(lookup_crud.DEFAULT_STATUSES)),
        ("job-types", len(lookup_crud.DEFAULT_JOB_TYPES)),
        ("industries", len(lookup_crud.DEFAULT_INDUSTRIES)),
        ("resource-types", len(lookup_crud.DEFAULT_RESOURCE_TYPES)),
        ("currencies", len(lookup_crud.DEFAULT_CURRENCIES)),
    ])
    def test_seeded_tables(self, client, lookup_type, expected_count):
        response = client.get("/api/v1/lookups", params={"type": lookup_type})

        assert response.status_code == 200
        assert len(response.json()) == expected_count

    def test_statuses_sorted_by_name(self, client):
        names = [row["name"] for row in client.get("/api/v1/lookups", params={"type": "statuses"}).json()]

        assert names == sorted(names)

    def test_currencies_include_symbol(self, client):
        currencies = client.get("/api/v1/lookups", params={"type": "currencies"}).json()

        aed = next(c for c in currencies if c["code"] == "AED")
        assert aed["name"] == "UAE Dirham"
        assert aed["symbol"]

    def test_locations_are_distinct_and_sorted(self, client, auth_headers, sample_job_data):
        client.post("/api/v1/jobs", json=sample_job_data, headers=auth_headers)
        client.post("/api/v1/jobs", json={**sample_job_data, "location": "Abu Dhabi"}, headers=auth_headers)
        client.post("/api/v1/jobs", json={**sample_job_data, "location": None}, headers=auth_headers)

        job_locations = client.get("/api/v1/lookups", params={"type": "job-locations"}).json()
        company_locations = client.get("/api/v1/lookups", params={"type": "company-locations"}).json()

        assert job_locations == ["Abu Dhabi", "Dubai"]
        assert company_locations == ["Dubai"]

    def test_companies_and_sources(self, client, auth_headers, company):
        client.post("/api/v1/jobs-sources", json={"name": "Bayt", "code": "bayt"}, headers=auth_headers)

        companies = client.get("/api/v1/lookups", params={"type": "companies"}).json()
        sources = client.get("/api/v1/lookups", params={"type": "sources"}).json()

        assert [c["name"] for c in companies] == ["Acme Corp"]
        assert [s["code"] for s in sources] == ["bayt"]

    def test_all(self, client):
        data = client.get("/api/v1/lookups", params={"type": "all"}).json()

        assert set(data) == {"statuses", "job_types", "industries", "resource_types", "currencies", "sources"}
        assert len(data["job_types"]) == len(lookup_crud.DEFAULT_JOB_TYPES)
        assert data["sources"] == []

    def test_invalid_type(self, client):
        response = client.get("/api/v1/lookups", params={"type": "planets"})

        assert response.status_code == 400
        assert response.json()["detail"] == "Invalid lookup type: planets"

    def test_type_is_required(self, client):
        assert client.get("/api/v1/lookups").status_code == 422


class TestLookupSeeding:

    def test_seed_is_idempotent(self, db_session):
        inserted = lookup_crud.seed_defaults(db_session)

        assert set(inserted.values()) == {0}
        assert len(lookup_crud.get_statuses(db_session)) == len(lookup_crud.DEFAULT_STATUSES)

    def test_seed_restores_missing_rows(self, db_session):
        db_session.delete(lookup_crud.get_job_type_by_code(db_session, "freelance"))
        db_session.commit()

        inserted = lookup_crud.seed_defaults(db_session)

        assert inserted["job_types"] == 1
        assert lookup_crud.get_job_type_by_code(db_session, "freelance") is not None

    def test_unknown_code(self, db_session):
        assert lookup_crud.get_status_by_code(db_session, "nope") is None
        assert lookup_crud.get_status_id(db_session, "nope") is None

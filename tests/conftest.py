"""
Pytest configuration and fixtures for testing.

This file provides reusable test fixtures for:
- Database setup/teardown (lookup tables seeded)
- FastAPI test client
- An admin account with its bearer token
- Sample companies and jobs
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.database import Base, get_db
from app.core.security import create_access_token
from app.crud import admin as admin_crud
from app.crud import lookup as lookup_crud
from app.models.lookup import Currency, Industry, JobType, Status
from app.schemas.admin import AdminCreateRequest
from main import app


# Use in-memory SQLite for testing (fast, isolated)
SQLALCHEMY_TEST_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

ADMIN_PASSWORD = "admin-password-123"


@pytest.fixture
def db_session():
    """
    Create a fresh database with seeded lookup tables for each test.
    """
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    lookup_crud.seed_defaults(db)
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db_session):
    """
    FastAPI test client with overridden database dependency.
    """
    def override_get_db():
        try:
            yield db_session
        except Exception:
            db_session.rollback()
            raise

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def admin(db_session):
    """An active admin account"""
    return admin_crud.create(db_session, AdminCreateRequest(
        email="admin@example.com",
        password=ADMIN_PASSWORD,
        first_name="Ada",
        last_name="Admin",
    ))


@pytest.fixture
def auth_headers(admin):
    """Authorization header for the admin fixture"""
    token = create_access_token(data={"sub": str(admin.id), "role": admin.role.value})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def lookup_ids(db_session):
    """Ids of a few seeded lookup rows, keyed by table and code"""
    def ids(model):
        return {row.code: row.id for row in db_session.query(model).all()}

    return {
        "status": ids(Status),
        "job_type": ids(JobType),
        "industry": ids(Industry),
        "currency": ids(Currency),
    }


@pytest.fixture
def sample_company_data():
    """Sample company data for testing"""
    return {
        "name": "Acme Corp",
        "short_description": "Industrial software",
        "long_description": "Acme builds planning software for the energy sector.",
        "website_url": "https://acme.com",
        "location": "Dubai",
        "country": "AE",
        "metadata": {"industry": "Technology", "linkedin": "https://linkedin.com/company/acme"},
        "contact": {"first_name": "Jane", "email": "jane@acme.com"},
        "tags": ["energy", "software"],
    }


@pytest.fixture
def company(client, auth_headers, sample_company_data):
    """A company created through the API"""
    response = client.post("/api/v1/companies", json=sample_company_data, headers=auth_headers)
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def sample_job_data(company, lookup_ids):
    """Sample job data for testing, attached to the company fixture"""
    return {
        "title": "Senior Python Developer",
        "description": "Build and operate FastAPI services backed by PostgreSQL.",
        "company_id": company["id"],
        "job_type_id": lookup_ids["job_type"]["full-time"],
        "industry_id": lookup_ids["industry"]["it"],
        "currency_id": lookup_ids["currency"]["AED"],
        "location": "Dubai",
        "country": "AE",
        "salary_min": 25000,
        "salary_max": 35000,
        "salary_frequency": "monthly",
        "apply_url": "https://acme.com/careers/python",
        "metadata": {"remote": False},
        "tags": ["python", "fastapi"],
    }

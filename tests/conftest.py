"""
Pytest configuration and fixtures for testing.

This file provides reusable test fixtures for:
- Database setup/teardown
- FastAPI test client
- Seeded companies, jobs and users

Tests run on in-memory SQLite by default; set TEST_DATABASE_URL to run
them against PostgreSQL instead.
"""

import os

# The app's own engine is only touched by the startup hook; keep it off Postgres
os.environ.setdefault("DATABASE_URL_OVERRIDE", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from jobly.core.database import Base, get_db
from jobly.models import Application, Company, Job, User
from main import app


SQLALCHEMY_TEST_DATABASE_URL = os.getenv("TEST_DATABASE_URL", "sqlite:///:memory:")
IS_SQLITE = SQLALCHEMY_TEST_DATABASE_URL.startswith("sqlite")

if IS_SQLITE:
    engine = create_engine(
        SQLALCHEMY_TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    @event.listens_for(engine, "before_cursor_execute", retval=True)
    def _ilike_as_like(conn, cursor, statement, parameters, context, executemany):
        # SQLite has no ILIKE; its LIKE is already case-insensitive for ASCII
        return statement.replace(" ILIKE ", " LIKE "), parameters
else:
    engine = create_engine(SQLALCHEMY_TEST_DATABASE_URL)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session():
    """
    Create a fresh database session for each test.
    Tables are dropped after the test completes.
    """
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
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
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def seeded(db_session):
    """
    Three companies, one job each, and two users; u1 applied to the first job.

    Returns the job ids in company order.
    """
    db_session.add_all([
        Company(handle="c1", name="C1", num_employees=1, description="Desc1", logo_url="http://c1.img"),
        Company(handle="c2", name="C2", num_employees=2, description="Desc2", logo_url="http://c2.img"),
        Company(handle="c3", name="C3", num_employees=3, description="Desc3", logo_url="http://c3.img"),
    ])
    db_session.flush()

    jobs = [
        Job(title="Job1", salary=100000, equity="0.01", company_handle="c1"),
        Job(title="Job2", salary=200000, equity="0.02", company_handle="c2"),
        Job(title="Job3", salary=300000, equity="0", company_handle="c3"),
    ]
    db_session.add_all(jobs)
    db_session.flush()

    db_session.add_all([
        User(username="u1", first_name="U1F", last_name="U1L", email="user1@user.com", is_admin=False),
        User(username="u2", first_name="U2F", last_name="U2L", email="user2@user.com", is_admin=True),
    ])
    db_session.flush()
    db_session.add(Application(username="u1", job_id=jobs[0].id))
    db_session.commit()

    return {"job_ids": [job.id for job in jobs]}


@pytest.fixture
def sample_company_data():
    """Sample company payload as sent by clients"""
    return {
        "handle": "new",
        "name": "New",
        "description": "DescNew",
        "numEmployees": 10,
        "logoUrl": "http://new.img",
    }

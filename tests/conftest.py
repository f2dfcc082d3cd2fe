"""Test configuration and fixtures."""

import os

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import text

# In-memory SQLite stands in for PostgreSQL; must be set before importing the app
os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("JWT_SECRET_KEY", "test-secret")

from jobboard.core.auth import create_access_token  # noqa: E402
from jobboard.db.postgres import engine  # noqa: E402
from jobboard.main import app  # noqa: E402

# SQLite flavour of scripts/schema.sql
SCHEMA = [
    """
    CREATE TABLE companies (
        handle VARCHAR(25) PRIMARY KEY,
        name TEXT UNIQUE NOT NULL,
        num_employees INTEGER CHECK (num_employees >= 0),
        description TEXT NOT NULL,
        logo_url TEXT
    )
    """,
    """
    CREATE TABLE jobs (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        title TEXT NOT NULL,
        salary INTEGER CHECK (salary >= 0),
        equity NUMERIC CHECK (equity <= 1.0),
        company_handle VARCHAR(25) NOT NULL REFERENCES companies ON DELETE CASCADE
    )
    """,
]


@pytest.fixture
def job_ids():
    """Companies c1..c3 and jobs J1..J4; yields the job ids in J1..J4 order."""
    with engine.begin() as conn:
        for statement in SCHEMA:
            conn.execute(text(statement))
        conn.execute(text("""
            INSERT INTO companies (handle, name, num_employees, description, logo_url)
            VALUES ('c1', 'C1', 1, 'Desc1', 'http://c1.img'),
                   ('c2', 'C2', 2, 'Desc2', 'http://c2.img'),
                   ('c3', 'C3', 3, 'Desc3', 'http://c3.img')
        """))
        conn.execute(text("""
            INSERT INTO jobs (title, salary, equity, company_handle)
            VALUES ('J1', 1, '0.1', 'c1'),
                   ('J2', 2, '0.2', 'c2'),
                   ('J3', 3, '0.3', 'c3'),
                   ('J4', NULL, NULL, 'c1')
        """))
        ids = [row[0] for row in conn.execute(text("SELECT id FROM jobs ORDER BY id"))]
    try:
        yield ids
    finally:
        with engine.begin() as conn:
            conn.execute(text("DROP TABLE IF EXISTS jobs"))
            conn.execute(text("DROP TABLE IF EXISTS companies"))


@pytest.fixture
def client(job_ids):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def u1_token():
    return create_access_token({"username": "u1", "isAdmin": False})


@pytest.fixture
def admin_token():
    return create_access_token({"username": "admin", "isAdmin": True})


@pytest.fixture
def user_headers(u1_token):
    return {"Authorization": f"Bearer {u1_token}"}


@pytest.fixture
def admin_headers(admin_token):
    return {"Authorization": f"Bearer {admin_token}"}

"""Pytest bootstrap: isolated settings, a throwaway SQLite file and shared helpers."""

import os
import sys
import tempfile
from pathlib import Path

# Ensure project root is on sys.path so `import tutorhub` works without install
PROJECT_ROOT = Path(__file__).resolve().parents[1]
project_root_str = str(PROJECT_ROOT)
if project_root_str not in sys.path:
    sys.path.insert(0, project_root_str)

# Settings are read at import time; point them at a scratch database first.
_DB_DIR = tempfile.mkdtemp(prefix="tutorhub-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{_DB_DIR}/tutorhub.db"
os.environ["SECRET_KEY"] = "test-secret-key-not-for-production"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["API_PREFIX"] = "/api"

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from tutorhub import models  # noqa: E402
from tutorhub.database import Base, SessionLocal, engine  # noqa: E402
from tutorhub.main import app  # noqa: E402
from tutorhub.utils.security import get_password_hash  # noqa: E402


DEFAULT_PASSWORD = "s3cret-pass"


@pytest.fixture(autouse=True)
def reset_db():
    """Fresh schema for every test."""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture
def db_session():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def api():
    with TestClient(app) as client:
        yield client


def auth_header(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def register(api):
    """Register through the API; returns (user_json, token)."""

    def _register(name, email, role, password=DEFAULT_PASSWORD, **extra):
        resp = api.post(
            "/api/register",
            json={"name": name, "email": email, "password": password, "role": role, **extra},
        )
        assert resp.status_code == 201, resp.text
        body = resp.json()
        return body["user"], body["token"]

    return _register


@pytest.fixture
def create_session(api):
    """Publish a session as the given tutor; returns the session json."""

    def _create(token, title="Algebra basics", subject="Math", **extra):
        payload = {
            "title": title,
            "subject": subject,
            "description": "Intro to linear equations",
            "date": "2026-11-02T15:00:00",
            "duration": 60,
            **extra,
        }
        resp = api.post("/api/sessions", json=payload, headers=auth_header(token))
        assert resp.status_code == 201, resp.text
        return resp.json()

    return _create


@pytest.fixture
def make_user(db_session):
    """Insert a user directly; for service-level tests."""

    def _make(name, email, role):
        user = models.User(
            name=name,
            email=email,
            password_hash=get_password_hash(DEFAULT_PASSWORD),
            role=role,
        )
        db_session.add(user)
        db_session.commit()
        db_session.refresh(user)
        return user

    return _make

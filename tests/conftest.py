import os
import tempfile

from cryptography.fernet import Fernet

# ---------------------------
# Environment must be in place before any therapick module is imported
# ---------------------------
_DB_DIR = tempfile.mkdtemp(prefix="therapick-tests-")
os.environ["ENV"] = "production"  # don't pick up a developer .env
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_DB_DIR, 'test.db')}"
os.environ["JWT_SECRET_KEY"] = "test-secret-key"
os.environ["FERNET_SECRET"] = Fernet.generate_key().decode()
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["DIRECTORY_MODE"] = "static"

import pytest
from fastapi.testclient import TestClient

from therapick.main import app
from therapick.models import database
from therapick.services.directory_service import StaticDirectory, get_directory
from therapick.utils.errors import DirectoryUnavailableError


class UnavailableDirectory:
    """Directory whose every call fails as if TherapAPI were down."""

    def search(self, **kwargs):
        raise DirectoryUnavailableError()

    def get_by_id(self, therapist_id):
        raise DirectoryUnavailableError()

    def get_reviews(self, therapist_id):
        raise DirectoryUnavailableError()

    def get_specialties(self):
        raise DirectoryUnavailableError()


@pytest.fixture(autouse=True)
def fresh_db():
    database.Base.metadata.drop_all(bind=database.engine)
    database.Base.metadata.create_all(bind=database.engine)
    yield


@pytest.fixture
def db():
    session = database.SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def directory():
    return StaticDirectory()


@pytest.fixture
def client(directory):
    app.dependency_overrides[get_directory] = lambda: directory
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def offline_client():
    app.dependency_overrides[get_directory] = lambda: UnavailableDirectory()
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


def register(client, name="Jane Doe", email="jane@example.com", password="secret123"):
    res = client.post("/api/auth/register", json={"name": name, "email": email, "password": password})
    assert res.status_code == 201, res.text
    return res.json()["data"]


def auth_headers_for(client, **kwargs):
    data = register(client, **kwargs)
    return {"Authorization": f"Bearer {data['token']}"}


@pytest.fixture
def auth_headers(client):
    return auth_headers_for(client)


@pytest.fixture
def other_headers(client):
    return auth_headers_for(client, name="Mallory", email="mallory@example.com")

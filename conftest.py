import os

# Must be set before the application modules are imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["JWT_SECRET"] = "test-secret-key"
os.environ["ENVIRONMENT"] = "test"

import pytest
from fastapi.testclient import TestClient

from app.database import Base, engine
from app import models  # noqa: F401  registers tables
from app.services.file_storage import file_storage
from main import app

PASSWORD = "s3cret-pass"

@pytest.fixture(autouse=True)
def database():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)

@pytest.fixture(autouse=True)
def upload_dir(tmp_path, monkeypatch):
    path = tmp_path / "uploads"
    monkeypatch.setattr(file_storage, "upload_dir", path)
    return path

@pytest.fixture
def client():
    return TestClient(app)

def auth_header(token):
    return {"Authorization": f"Bearer {token}"}

@pytest.fixture
def make_user(client):
    """Register a user, log in, and return user, token and headers"""
    def _make_user(username, role=None, email=None, password=PASSWORD):
        email = email or f"{username.lower()}@example.com"
        payload = {"username": username, "email": email, "password": password}
        if role:
            payload["role"] = role
        response = client.post("/api/auth/register", json=payload)
        assert response.status_code == 201, response.text

        response = client.post("/api/auth/login", json={"email": email, "password": password})
        assert response.status_code == 200, response.text
        token = response.json()["token"]
        return {
            "user": response.json()["user"],
            "token": token,
            "headers": auth_header(token),
        }
    return _make_user

@pytest.fixture
def employee(make_user):
    return make_user("alice")

@pytest.fixture
def admin(make_user):
    return make_user("boss", role="admin")

@pytest.fixture
def submit(client):
    """Submit a suggestion as `owner` and return the created row"""
    def _submit(owner, title="Leak", description="Water on the floor near bay 3", department=None, files=None):
        data = {"user_id": str(owner["user"]["user_id"]), "title": title, "description": description}
        if department is not None:
            data["department"] = department
        response = client.post("/api/suggestions", data=data, files=files, headers=owner["headers"])
        assert response.status_code == 201, response.text
        return response.json()
    return _submit

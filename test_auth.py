import time

from jose import jwt

from conftest import PASSWORD

def register(client, **payload):
    return client.post("/api/auth/register", json=payload)

def test_register_creates_employee_by_default(client):
    response = register(client, username="alice", email="alice@example.com", password=PASSWORD)

    assert response.status_code == 201
    body = response.json()
    assert body["message"] == "User registered successfully"
    assert body["user"]["username"] == "alice"
    assert body["user"]["email"] == "alice@example.com"
    assert body["user"]["role"] == "employee"
    assert "password_hash" not in body["user"]
    assert "password" not in body["user"]

def test_register_with_admin_role(client):
    response = register(client, username="boss", email="boss@example.com", password=PASSWORD, role="admin")

    assert response.status_code == 201
    assert response.json()["user"]["role"] == "admin"

def test_register_rejects_unknown_role(client):
    response = register(client, username="eve", email="eve@example.com", password=PASSWORD, role="superuser")

    assert response.status_code == 400

def test_register_requires_all_fields(client):
    for payload in (
        {"email": "a@example.com", "password": PASSWORD},
        {"username": "a", "password": PASSWORD},
        {"username": "a", "email": "a@example.com"},
        {"username": "", "email": "a@example.com", "password": PASSWORD},
        {},
    ):
        response = register(client, **payload)
        assert response.status_code == 400, payload

def test_register_duplicate_email_conflicts(client):
    assert register(client, username="alice", email="same@example.com", password=PASSWORD).status_code == 201

    response = register(client, username="alice2", email="same@example.com", password=PASSWORD)

    assert response.status_code == 409
    assert response.json()["message"] == "User already exists with this email or username."

def test_register_duplicate_username_conflicts(client):
    assert register(client, username="alice", email="one@example.com", password=PASSWORD).status_code == 201

    response = register(client, username="alice", email="two@example.com", password=PASSWORD)

    assert response.status_code == 409

def test_login_returns_signed_token(client):
    register(client, username="alice", email="alice@example.com", password=PASSWORD)

    response = client.post("/api/auth/login", json={"email": "alice@example.com", "password": PASSWORD})

    assert response.status_code == 200
    body = response.json()
    assert body["token_type"] == "bearer"
    assert body["user"]["username"] == "alice"
    assert "password_hash" not in body["user"]

    claims = jwt.decode(body["token"], "test-secret-key", algorithms=["HS256"])
    assert claims["sub"] == str(body["user"]["user_id"])
    assert claims["username"] == "alice"
    assert claims["email"] == "alice@example.com"
    assert claims["role"] == "employee"
    # One hour lifetime
    assert 3500 < claims["exp"] - time.time() <= 3600

def test_wrong_password_is_indistinguishable_from_unknown_email(client):
    register(client, username="alice", email="alice@example.com", password=PASSWORD)

    wrong_password = client.post("/api/auth/login", json={"email": "alice@example.com", "password": "nope"})
    unknown_email = client.post("/api/auth/login", json={"email": "ghost@example.com", "password": PASSWORD})

    assert wrong_password.status_code == 401
    assert unknown_email.status_code == 401
    assert wrong_password.json() == unknown_email.json()

def test_login_requires_email_and_password(client):
    assert client.post("/api/auth/login", json={"email": "alice@example.com"}).status_code == 400
    assert client.post("/api/auth/login", json={"password": PASSWORD}).status_code == 400
    assert client.post("/api/auth/login", json={"email": "", "password": ""}).status_code == 400

def test_register_conflict_detected_at_insert(client, monkeypatch):
    from app.routers import auth

    assert register(client, username="alice", email="alice@example.com", password=PASSWORD).status_code == 201
    # Another request inserts between our lookup and our commit
    monkeypatch.setattr(auth, "find_existing_user", lambda db, username, email: None)

    response = register(client, username="alice", email="alice@example.com", password=PASSWORD)

    assert response.status_code == 409
    assert response.json()["message"] == "User already exists with this email or username."

def test_login_with_mixed_case_email_domain(client):
    registered = register(client, username="alice", email="Alice@Example.COM", password=PASSWORD)
    assert registered.status_code == 201
    assert registered.json()["user"]["email"] == "Alice@example.com"

    response = client.post("/api/auth/login", json={"email": "Alice@Example.COM", "password": PASSWORD})

    assert response.status_code == 200
    assert response.json()["user"]["username"] == "alice"

def test_login_rejects_malformed_email(client):
    response = client.post("/api/auth/login", json={"email": "not-an-email", "password": PASSWORD})

    assert response.status_code == 400

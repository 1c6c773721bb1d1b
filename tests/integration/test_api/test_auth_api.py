"""Integration tests for registration and login."""
import pytest

from foundershub.db.models import Status, User


REGISTRATION = {
    "name": "Ada Lovelace",
    "email": "ada@example.com",
    "password": "engine-42",
    "startupName": "Analytical Engines",
    "startupUrl": "https://engines.example",
}


@pytest.mark.integration
class TestRegister:
    """Test POST /api/register."""

    def test_register_success(self, client, db_session):
        response = client.post("/api/register", json=REGISTRATION)

        assert response.status_code == 201
        user = response.json()["user"]
        assert user["email"] == "ada@example.com"
        assert user["startupName"] == "Analytical Engines"
        assert user["startupUrl"] == "https://engines.example"
        assert "password" not in user
        assert "passwordHash" not in user

        status = db_session.query(Status).filter(Status.user_id == user["id"]).one()
        assert status.status == "Out of Office"

    def test_register_accepts_snake_case(self, client):
        payload = {**REGISTRATION, "startup_name": "Snake Co"}
        del payload["startupName"]

        response = client.post("/api/register", json=payload)
        assert response.status_code == 201
        assert response.json()["user"]["startupName"] == "Snake Co"

    def test_register_missing_fields(self, client, db_session):
        payload = {k: v for k, v in REGISTRATION.items() if k != "startupName"}

        response = client.post("/api/register", json=payload)

        assert response.status_code == 400
        assert response.json() == {"error": "Missing required fields"}
        assert db_session.query(User).count() == 0

    def test_register_duplicate_email(self, client):
        assert client.post("/api/register", json=REGISTRATION).status_code == 201

        response = client.post("/api/register", json={**REGISTRATION, "email": "ADA@example.com"})

        assert response.status_code == 409
        assert response.json() == {"error": "User with this email already exists"}

    def test_register_invalid_email(self, client):
        response = client.post("/api/register", json={**REGISTRATION, "email": "nope"})
        assert response.status_code == 400
        assert response.json()["error"] == "Email address is invalid"


@pytest.mark.integration
class TestLogin:
    """Test POST /api/login."""

    def test_login_success(self, client):
        client.post("/api/register", json=REGISTRATION)

        response = client.post("/api/login", json={"email": "ada@example.com", "password": "engine-42"})

        assert response.status_code == 200
        data = response.json()
        assert set(data.keys()) == {"user", "token"}
        assert data["user"]["name"] == "Ada Lovelace"
        assert data["token"].count(".") == 2

    def test_login_token_authenticates(self, client):
        client.post("/api/register", json=REGISTRATION)
        token = client.post(
            "/api/login", json={"email": "ada@example.com", "password": "engine-42"}
        ).json()["token"]

        response = client.get("/api/user/profile", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 200
        assert response.json()["user"]["email"] == "ada@example.com"

    def test_login_wrong_password(self, client):
        client.post("/api/register", json=REGISTRATION)

        response = client.post("/api/login", json={"email": "ada@example.com", "password": "wrong"})

        assert response.status_code == 401
        assert response.json() == {"error": "Invalid email or password"}

    def test_login_missing_fields(self, client):
        response = client.post("/api/login", json={"email": "ada@example.com"})

        assert response.status_code == 400
        assert response.json() == {"error": "Email and password are required"}

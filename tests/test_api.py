"""API endpoint tests for health, signup, login and identity."""

from types import SimpleNamespace

import pytest

from design_studio.api.dependencies import get_token_service
from design_studio.config import get_settings


def test_health_check(client):
    """Test health check endpoint."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_signup_user(client):
    """Test user signup returns a token and the public user."""
    response = client.post(
        "/auth/signup",
        json={"name": "New User", "email": "newuser@example.com", "password": "password123"},
    )
    assert response.status_code == 201
    data = response.json()
    assert data["token"]
    assert data["user"]["name"] == "New User"
    assert data["user"]["email"] == "newuser@example.com"
    assert "password_hash" not in data["user"]
    assert "password" not in data["user"]


def test_signup_token_resolves_to_created_user(client):
    """Test the signup token verifies to the same id, email and name."""
    response = client.post(
        "/auth/signup",
        json={"name": "Grace", "email": "grace@example.com", "password": "hopper"},
    )
    data = response.json()

    claims = get_token_service(get_settings()).verify(data["token"])
    assert claims.user_id == data["user"]["id"]
    assert claims.email == "grace@example.com"
    assert claims.name == "Grace"


def test_signup_duplicate_email(client, auth_headers):
    """Test signup with an already registered email fails."""
    response = client.post(
        "/auth/signup",
        json={"name": "Duplicate", "email": auth_headers.email, "password": "password123"},
    )
    assert response.status_code == 409
    assert response.json() == {"error": "Email already registered"}


def test_signup_duplicate_email_different_case(client, auth_headers):
    """Test email uniqueness ignores case."""
    response = client.post(
        "/auth/signup",
        json={"name": "Shouty", "email": "TEST@Example.COM", "password": "password123"},
    )
    assert response.status_code == 409


def test_signup_missing_fields(client):
    """Test signup without a password is rejected before anything is stored."""
    response = client.post("/auth/signup", json={"name": "No Password", "email": "np@example.com"})
    assert response.status_code == 400
    assert "password" in response.json()["fields"]

    login = client.post("/auth/login", json={"email": "np@example.com", "password": "x"})
    assert login.status_code == 401


def test_signup_empty_name(client):
    """Test signup with an empty name is rejected."""
    response = client.post(
        "/auth/signup", json={"name": "", "email": "empty@example.com", "password": "pw"}
    )
    assert response.status_code == 400
    assert "name" in response.json()["fields"]


def test_signup_invalid_email(client):
    """Test signup with a malformed email is rejected."""
    response = client.post(
        "/auth/signup", json={"name": "Bad", "email": "not-an-email", "password": "pw"}
    )
    assert response.status_code == 400
    assert "email" in response.json()["fields"]


def test_signup_empty_body(client):
    """Test signup with no JSON body at all."""
    response = client.post("/auth/signup")
    assert response.status_code == 400
    assert "error" in response.json()


def test_login(client, auth_headers):
    """Test user login."""
    response = client.post(
        "/auth/login", json={"email": auth_headers.email, "password": "testpass123"}
    )
    assert response.status_code == 200
    data = response.json()
    assert data["token"]
    assert data["user"]["id"] == auth_headers.user_id


def test_login_is_case_insensitive(client):
    """Test signing up as Ada@X.com and logging in as ada@x.com."""
    signup = client.post(
        "/auth/signup", json={"name": "Ada", "email": "Ada@X.com", "password": "p"}
    )
    assert signup.status_code == 201
    assert signup.json()["user"]["email"] == "ada@x.com"

    login = client.post("/auth/login", json={"email": "ada@x.com", "password": "p"})
    assert login.status_code == 200
    assert login.json()["user"]["id"] == signup.json()["user"]["id"]


def test_login_wrong_password(client, auth_headers):
    """Test login with wrong password."""
    response = client.post(
        "/auth/login", json={"email": auth_headers.email, "password": "wrongpass"}
    )
    assert response.status_code == 401
    assert response.headers["www-authenticate"] == "Bearer"


def test_login_wrong_password_and_unknown_email_are_indistinguishable(client, auth_headers):
    """Test a wrong password looks exactly like an unknown account."""
    wrong_password = client.post(
        "/auth/login", json={"email": auth_headers.email, "password": "wrongpass"}
    )
    unknown_email = client.post(
        "/auth/login", json={"email": "nobody@example.com", "password": "wrongpass"}
    )
    assert wrong_password.status_code == unknown_email.status_code == 401
    assert wrong_password.json() == unknown_email.json()


def test_login_missing_fields(client):
    """Test login without an email."""
    response = client.post("/auth/login", json={"password": "testpass123"})
    assert response.status_code == 400
    assert "email" in response.json()["fields"]


def test_get_me(client, auth_headers):
    """Test getting current user info."""
    response = client.get("/me", headers=auth_headers)
    assert response.status_code == 200
    assert response.json() == {
        "user": {"id": auth_headers.user_id, "name": "Test User", "email": auth_headers.email}
    }


def test_get_me_without_token(client):
    """Test protected route without a token."""
    response = client.get("/me")
    assert response.status_code == 401
    assert response.json()["error"]


def test_get_me_with_invalid_token(client):
    """Test protected route with a garbage token."""
    response = client.get("/me", headers={"Authorization": "Bearer not.a.token"})
    assert response.status_code == 401
    assert response.headers["www-authenticate"] == "Bearer"


def test_get_me_with_wrong_scheme(client, auth_headers):
    """Test protected route with a non-bearer authorization header."""
    token = auth_headers["Authorization"].split(" ", 1)[1]
    response = client.get("/me", headers={"Authorization": f"Basic {token}"})
    assert response.status_code == 401


def test_unknown_route_uses_error_shape(client):
    """Test framework 404s use the same error body."""
    response = client.get("/nope")
    assert response.status_code == 404
    assert "error" in response.json()


@pytest.mark.parametrize(
    "email",
    [
        "user@xn--bcher-kva.ch",
        "someone@localhost",
        "bob@mail.test",
        "josé@example.org",
        "jose\u0301@example.org",
        "Mixed.Case@Example.COM",
    ],
)
def test_signup_then_login_with_same_email(client, email):
    """Test any address accepted at signup logs in when typed the same way."""
    signup = client.post("/auth/signup", json={"name": "Pat", "email": email, "password": "pw"})
    assert signup.status_code == 201
    assert signup.json()["user"]["email"] == email.lower()

    login = client.post("/auth/login", json={"email": email, "password": "pw"})
    assert login.status_code == 200
    assert login.json()["user"]["id"] == signup.json()["user"]["id"]


def test_get_me_reads_user_record(client, auth_headers):
    """Test /me returns the stored user for the token's id."""
    response = client.get("/me", headers=auth_headers)
    assert response.json()["user"]["id"] == auth_headers.user_id
    assert response.json()["user"]["name"] == "Test User"


def test_get_me_unknown_user(client):
    """Test a validly signed token for a user that does not exist."""
    ghost = SimpleNamespace(id=987654, email="ghost@example.com", name="Ghost")
    token = get_token_service(get_settings()).issue(ghost)

    response = client.get("/me", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 401
    assert response.json() == {"error": "User not found"}
    assert response.headers["www-authenticate"] == "Bearer"

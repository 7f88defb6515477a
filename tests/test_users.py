"""Registration endpoint tests."""
import asyncio

from jose import jwt

from app.config.settings import get_settings
from app.core.security import verify_password
from app.repositories.user_repository import UserRepository
from helpers import error_messages, register_user


def test_register_returns_token_for_new_user(client):
    response = client.post(
        "/api/users",
        json={"name": "Jane Doe", "email": "jane@example.com", "password": "secret123"}
    )

    assert response.status_code == 200
    token = response.json()["token"]
    settings = get_settings()
    payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    assert payload["sub"]
    assert payload["type"] == "access"


def test_register_sets_gravatar_and_hides_password(client):
    token = register_user(client, email="Jane@Example.com")

    response = client.get("/api/auth", headers={"x-auth-token": token})

    assert response.status_code == 200
    user = response.json()
    assert user["email"] == "jane@example.com"
    assert user["avatar"].startswith("https://www.gravatar.com/avatar/")
    assert user["avatar"].endswith("?s=200&r=pg&d=mm")
    assert "password" not in user


def test_duplicate_email_is_rejected(client):
    register_user(client, email="jane@example.com")

    response = client.post(
        "/api/users",
        json={"name": "Other", "email": "JANE@example.com", "password": "secret123"}
    )

    assert response.status_code == 400
    assert response.json() == {"errors": [{"msg": "User already exists"}]}


def test_short_password_is_rejected(client):
    response = client.post(
        "/api/users",
        json={"name": "Jane", "email": "jane@example.com", "password": "123"}
    )

    assert response.status_code == 400
    assert error_messages(response) == ["Please enter a password with 6 or more characters"]


def test_blank_name_and_bad_email_are_reported_together(client):
    response = client.post(
        "/api/users",
        json={"name": "  ", "email": "not-an-email", "password": "secret123"}
    )

    assert response.status_code == 400
    errors = response.json()["errors"]
    assert {error["param"] for error in errors} == {"name", "email"}
    assert "Name is required" in [error["msg"] for error in errors]
    assert all(error["location"] == "body" for error in errors)


def test_missing_fields_are_required(client):
    response = client.post("/api/users", json={})

    assert response.status_code == 400
    assert sorted(error_messages(response)) == [
        "email is required",
        "name is required",
        "password is required",
    ]


def test_password_is_stored_as_salted_hash(client, session_factory):
    register_user(client, email="jane@example.com", password="secret123")
    register_user(client, name="John", email="john@example.com", password="secret123")

    async def load(email):
        async with session_factory() as session:
            return await UserRepository(session).get_by_email(email)

    jane = asyncio.run(load("jane@example.com"))
    john = asyncio.run(load("john@example.com"))

    assert jane.password != "secret123"
    assert jane.password != john.password
    assert verify_password("secret123", jane.password)


def test_malformed_json_uses_error_list(client):
    response = client.post(
        "/api/users",
        content=b"{not json",
        headers={"Content-Type": "application/json"}
    )

    assert response.status_code == 400
    errors = response.json()["errors"]
    assert len(errors) == 1
    assert errors[0]["location"] == "body"

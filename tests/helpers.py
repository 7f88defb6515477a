"""Shared request helpers for the API tests."""


def register_user(client, name="Jane Doe", email="jane@example.com", password="secret123"):
    """Register a user and return its token."""
    response = client.post(
        "/api/users",
        json={"name": name, "email": email, "password": password}
    )
    assert response.status_code == 200, response.text
    return response.json()["token"]


def auth_headers(token):
    return {"Authorization": f"Bearer {token}"}


def error_messages(response):
    return [error["msg"] for error in response.json()["errors"]]

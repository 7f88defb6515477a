"""Profile endpoint tests."""
import uuid

from helpers import auth_headers, error_messages, register_user


def test_get_me_without_profile(client, headers):
    response = client.get("/api/profile/me", headers=headers)

    assert response.status_code == 400
    assert response.json() == {"msg": "Profile not found"}


def test_create_profile_from_comma_separated_skills(client, headers):
    response = client.post(
        "/api/profile",
        json={"status": "Developer", "skills": "js, go"},
        headers=headers
    )
    assert response.status_code == 200

    me = client.get("/api/profile/me", headers=headers).json()
    assert me["status"] == "Developer"
    assert me["skills"] == ["js", "go"]
    assert me["user"]["name"] == "Jane Doe"
    assert me["user"]["avatar"].startswith("https://www.gravatar.com/avatar/")
    assert me["experience"] == []
    assert me["education"] == []


def test_skills_list_is_trimmed(client, headers):
    response = client.post(
        "/api/profile",
        json={"status": "Developer", "skills": [" python ", "", "sql"]},
        headers=headers
    )

    assert response.json()["skills"] == ["python", "sql"]


def test_links_are_normalized(client, headers):
    response = client.post(
        "/api/profile",
        json={
            "status": "Developer",
            "skills": "python",
            "website": "www.Example.com/",
            "twitter": "http://twitter.com/jane",
            "linkedin": "linkedin.com/in/jane",
            "youtube": "",
        },
        headers=headers
    )

    profile = response.json()
    assert profile["website"] == "https://example.com"
    assert profile["social"] == {
        "twitter": "https://twitter.com/jane",
        "linkedin": "https://linkedin.com/in/jane",
    }


def test_github_username_uses_wire_name(client, headers):
    response = client.post(
        "/api/profile",
        json={"status": "Developer", "skills": "python", "githubusername": "octocat"},
        headers=headers
    )

    assert response.json()["githubusername"] == "octocat"


def test_update_keeps_single_profile_and_omitted_fields(client, headers):
    first = client.post(
        "/api/profile",
        json={
            "status": "Junior Developer",
            "skills": "python",
            "company": "Acme",
            "bio": "Hello",
            "facebook": "facebook.com/jane",
        },
        headers=headers
    ).json()

    second = client.post(
        "/api/profile",
        json={"status": "Senior Developer", "skills": "python, rust", "twitter": "twitter.com/jane"},
        headers=headers
    ).json()

    assert second["profile_id"] == first["profile_id"]
    assert second["status"] == "Senior Developer"
    assert second["skills"] == ["python", "rust"]
    assert second["company"] == "Acme"
    assert second["bio"] == "Hello"
    assert second["social"] == {"twitter": "https://twitter.com/jane"}
    assert second["updated_date"] is not None
    assert len(client.get("/api/profile").json()) == 1


def test_status_and_skills_are_required(client, headers):
    response = client.post("/api/profile", json={}, headers=headers)

    assert response.status_code == 400
    assert sorted(error_messages(response)) == ["skills is required", "status is required"]


def test_blank_status_and_skills_are_rejected(client, headers):
    response = client.post(
        "/api/profile",
        json={"status": "  ", "skills": " , "},
        headers=headers
    )

    assert response.status_code == 400
    errors = response.json()["errors"]
    assert {error["msg"] for error in errors} == {"Status is required", "Skills is required"}
    assert {error["param"] for error in errors} == {"status", "skills"}
    assert client.get("/api/profile/me", headers=headers).status_code == 400


def test_list_profiles(client, headers, profile):
    other_headers = auth_headers(register_user(client, name="John Roe", email="john@example.com"))
    client.post("/api/profile", json={"status": "Designer", "skills": "figma"}, headers=other_headers)

    response = client.get("/api/profile")

    assert response.status_code == 200
    profiles = response.json()
    assert sorted(p["user"]["name"] for p in profiles) == ["Jane Doe", "John Roe"]
    assert "email" not in profiles[0]["user"]


def test_list_profiles_when_empty(client):
    response = client.get("/api/profile")

    assert response.status_code == 200
    assert response.json() == []


def test_get_profile_by_user(client, profile):
    user_id = profile["user"]["user_id"]

    response = client.get(f"/api/profile/user/{user_id}")

    assert response.status_code == 200
    assert response.json()["profile_id"] == profile["profile_id"]


def test_get_profile_by_unknown_user(client):
    response = client.get(f"/api/profile/user/{uuid.uuid4()}")

    assert response.status_code == 400
    assert response.json() == {"msg": "Profile not found"}


def test_get_profile_by_malformed_user_id(client):
    response = client.get("/api/profile/user/not-an-id")

    assert response.status_code == 400
    assert response.json() == {"msg": "Profile not found"}


def test_delete_account(client, headers, profile):
    response = client.delete("/api/profile", headers=headers)

    assert response.status_code == 200
    assert response.json() == {"msg": "User deleted"}
    assert client.get("/api/profile").json() == []
    assert client.post(
        "/api/auth", json={"email": "jane@example.com", "password": "secret123"}
    ).status_code == 400


def test_delete_account_without_profile(client, headers):
    response = client.delete("/api/profile", headers=headers)

    assert response.status_code == 200
    assert response.json() == {"msg": "User deleted"}
